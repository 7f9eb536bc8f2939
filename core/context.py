"""
Report assembly for the current project.

`Context` is the entry point callers use to obtain the package status list.
It triggers the loader's analysis the first time it is needed and turns the
analyzed packages into an ordered, deterministic list of `ListItem` records.
"""

from core.loader import PackageLoader
from core.models import ListItem
from core.status import sort_list_items


class Context:
    """
    Project context wrapping a package loader.

    The context never mutates shared state itself: the "already analyzed" flag
    belongs to the loader, and the context only reads it to decide whether to
    ask for an analysis.

    Attributes:
        loader: The package loader providing analysis results.
    """

    def __init__(self, loader: PackageLoader) -> None:
        self.loader = loader

    def list_status(self) -> list[ListItem]:
        """
        Obtain the current package status list.

        Analysis runs first if the loader has not run it yet. Any exception
        raised by the analysis propagates unchanged and no list is produced.

        Returns:
            list[ListItem]: One record per analyzed package, ordered by status
                rank (descending) and then canonical path (ascending).
                Empty when there are no packages.

        Raises:
            Exception: Whatever the loader's `ensure_analyzed()` raised,
                typically an `AnalysisError`.
        """
        if not self.loader.loaded:
            self.loader.ensure_analyzed()

        items = [
            ListItem(
                status=pkg.status,
                path=pkg.canonical_path,
                vendor_path=pkg.local_path,
            )
            for pkg in self.loader.packages
        ]
        return sort_list_items(items)
