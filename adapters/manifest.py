"""
JSON analysis manifest adapter.

This module provides a package loader backed by a JSON document written by
the dependency analysis subsystem. It lets the status report run without
re-analyzing the project: the manifest is read and validated once, on the
first call to `ensure_analyzed()`.

Manifest format:

    {
      "packages": [
        {"path": "example.com/lib", "local": "vendor/example.com/lib", "status": "vendor"},
        {"path": "fmt", "status": "s"}
      ]
    }

`status` is either a status name or its single-character form. `local` is
optional.
"""

import json
from pathlib import Path
from typing import Sequence

from constants import STATUS_CHARS
from core.exceptions import ManifestLoadError
from core.models import Package
from models import ListStatus


class JsonManifestLoader:
    """
    Package loader reading analysis results from a JSON manifest.

    Attributes:
        manifest_path: Path of the manifest file.
        loaded: True once the manifest was read and validated successfully.
    """

    def __init__(self, manifest_path: Path):
        """
        Initialize a loader for the given manifest.

        Args:
            manifest_path: Path to the JSON manifest. It is not read until
                `ensure_analyzed()` is called.
        """
        self.manifest_path = manifest_path
        self.loaded = False
        self._packages: list[Package] = []

    @property
    def packages(self) -> Sequence[Package]:
        return tuple(self._packages)

    def ensure_analyzed(self) -> None:
        """
        Read and validate the manifest if that has not happened yet.

        On failure nothing is kept and `loaded` stays False, so a later call
        retries from scratch.

        Raises:
            ManifestLoadError: If the file cannot be read, is not valid JSON,
                has the wrong shape, or names an unknown status.
        """
        if self.loaded:
            return

        try:
            raw = self.manifest_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ManifestLoadError(
                f"Could not read manifest: {e.strerror or e}",
                file_path=str(self.manifest_path),
                original_exception=e,
            ) from e
        except UnicodeDecodeError as e:
            raise ManifestLoadError(
                f"Manifest is not valid UTF-8 (byte {e.start})",
                file_path=str(self.manifest_path),
                original_exception=e,
            ) from e

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ManifestLoadError(
                f"Manifest is not valid JSON (line {e.lineno})",
                file_path=str(self.manifest_path),
                original_exception=e,
            ) from e

        self._packages = self._parse_document(document)
        self.loaded = True

    def _parse_document(self, document: object) -> list[Package]:
        if not isinstance(document, dict) or not isinstance(
            document.get("packages"), list
        ):
            raise ManifestLoadError(
                'Manifest must be an object with a "packages" list',
                file_path=str(self.manifest_path),
            )

        packages = []
        for index, entry in enumerate(document["packages"]):
            if not isinstance(entry, dict) or not isinstance(entry.get("path"), str):
                raise ManifestLoadError(
                    f'Package entry #{index} must be an object with a "path" string',
                    file_path=str(self.manifest_path),
                )
            local = entry.get("local") or ""
            if not isinstance(local, str):
                raise ManifestLoadError(
                    f'Package entry #{index} has a non-string "local" path',
                    file_path=str(self.manifest_path),
                )
            packages.append(
                Package(
                    canonical_path=entry["path"],
                    local_path=local,
                    status=self._parse_status(entry.get("status"), index),
                )
            )
        return packages

    def _parse_status(self, value: object, index: int) -> ListStatus:
        if isinstance(value, str):
            name = value.strip().lower()
            for status in ListStatus:
                if name in (status.value, STATUS_CHARS[status]):
                    return status
        raise ManifestLoadError(
            f"Package entry #{index} has an unknown status: {value!r}",
            file_path=str(self.manifest_path),
        )
