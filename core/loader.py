"""
Package loader protocol and an in-memory implementation.

The report assembler does not discover dependencies itself. It consumes a
package loader: an object that performs the analysis on demand, remembers
that it did so, and exposes the analyzed packages read-only. Keeping this
behind a protocol lets production code plug in a real analyzer (or the JSON
manifest adapter) while tests use `StaticPackageLoader`.
"""

import threading
from typing import Protocol, Sequence

from core.models import Package


class PackageLoader(Protocol):
    """
    Protocol defining the interface the report assembler consumes.

    Attributes:
        loaded: True once analysis has completed successfully. The loader owns
            this flag, including its value after a failed analysis.
        packages: The analyzed packages. Only meaningful once `loaded` is True.
            Iteration order carries no meaning.
    """

    loaded: bool

    @property
    def packages(self) -> Sequence[Package]:
        """The analyzed packages."""

    def ensure_analyzed(self) -> None:
        """
        Perform dependency discovery and status assignment.

        Must be idempotent: calling it after a successful analysis is a no-op.

        Raises:
            AnalysisError: If the project could not be analyzed.
        """


class StaticPackageLoader:
    """
    In-memory implementation of PackageLoader.

    Serves a fixed list of packages. Useful for tests and for embedding the
    report in tools that already hold analysis results. Analysis is memoized
    under a lock so concurrent callers analyze at most once.

    Attributes:
        loaded: Whether analysis has completed successfully.
        analyze_calls: How many times `ensure_analyzed` was invoked.
    """

    def __init__(
        self,
        packages: Sequence[Package] | None = None,
        error: Exception | None = None,
    ) -> None:
        """
        Args:
            packages: The packages to serve once analyzed.
            error: If given, every analysis attempt raises this exception and
                the loader stays unloaded.
        """
        self._source: list[Package] = list(packages or [])
        self._packages: list[Package] = []
        self._error = error
        self._lock = threading.Lock()
        self.loaded = False
        self.analyze_calls = 0

    @property
    def packages(self) -> Sequence[Package]:
        return tuple(self._packages)

    def ensure_analyzed(self) -> None:
        with self._lock:
            self.analyze_calls += 1
            if self.loaded:
                return
            if self._error is not None:
                raise self._error
            self._packages = list(self._source)
            self.loaded = True
