"""
Comprehensive tests for the JSON manifest adapter using pytest.

Tests cover:
- JsonManifestLoader.ensure_analyzed: parsing, status names and characters,
  memoization
- Error handling: unreadable files, invalid JSON, wrong shapes, unknown statuses
- Integration with Context.list_status
"""

import json

import pytest

from adapters.manifest import JsonManifestLoader
from core.context import Context
from core.exceptions import AnalysisError, ManifestLoadError
from core.models import Package
from models import ListStatus


@pytest.fixture
def write_manifest(tmp_path):
    """Write a manifest document to a temporary file and return its path."""

    def _write(document, raw=None):
        path = tmp_path / "manifest.json"
        path.write_text(raw if raw is not None else json.dumps(document))
        return path

    return _write


# ============================================================================
# Tests for successful loading
# ============================================================================


@pytest.mark.unit
def test_loader_is_lazy(tmp_path):
    """Constructing a loader should not touch the file."""
    loader = JsonManifestLoader(tmp_path / "does-not-exist.json")

    assert loader.loaded is False
    assert loader.packages == ()


@pytest.mark.unit
def test_loads_packages(write_manifest):
    """Entries should become Package records."""
    path = write_manifest(
        {
            "packages": [
                {
                    "path": "example.com/lib",
                    "local": "vendor/example.com/lib",
                    "status": "vendor",
                },
                {"path": "fmt", "status": "s"},
            ]
        }
    )
    loader = JsonManifestLoader(path)

    loader.ensure_analyzed()

    assert loader.loaded is True
    assert loader.packages == (
        Package("example.com/lib", "vendor/example.com/lib", ListStatus.VENDOR),
        Package("fmt", "", ListStatus.STD),
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,expected",
    [
        ("program", ListStatus.PROGRAM),
        ("PROGRAM", ListStatus.PROGRAM),
        ("p", ListStatus.PROGRAM),
        ("?", ListStatus.UNKNOWN),
        (" u ", ListStatus.UNUSED),
    ],
)
def test_status_spellings(write_manifest, value, expected):
    """Statuses may be given by name or character, case-insensitively."""
    loader = JsonManifestLoader(
        write_manifest({"packages": [{"path": "a", "status": value}]})
    )

    loader.ensure_analyzed()

    assert loader.packages[0].status is expected


@pytest.mark.unit
def test_null_local_path_is_empty(write_manifest):
    """A null local path should be treated as no local copy."""
    loader = JsonManifestLoader(
        write_manifest({"packages": [{"path": "a", "local": None, "status": "l"}]})
    )

    loader.ensure_analyzed()

    assert loader.packages[0].local_path == ""


@pytest.mark.unit
def test_file_is_read_once(write_manifest):
    """After a successful load, later calls should not re-read the file."""
    path = write_manifest({"packages": [{"path": "a", "status": "l"}]})
    loader = JsonManifestLoader(path)

    loader.ensure_analyzed()
    path.write_text("{broken")
    loader.ensure_analyzed()

    assert [p.canonical_path for p in loader.packages] == ["a"]


@pytest.mark.unit
def test_context_lists_manifest(write_manifest):
    """Context should produce the ordered report from a manifest."""
    path = write_manifest(
        {
            "packages": [
                {"path": "z/pkg", "status": "missing"},
                {"path": "m/pkg", "status": "local"},
                {"path": "b/pkg", "status": "vendor", "local": "vendor/b/pkg"},
                {"path": "a/pkg", "status": "vendor", "local": "vendor/a/pkg"},
            ]
        }
    )

    result = Context(JsonManifestLoader(path)).list_status()

    assert [i.render() for i in result] == [
        "v a/pkg [vendor/a/pkg]",
        "v b/pkg [vendor/b/pkg]",
        "l m/pkg",
        "m z/pkg",
    ]


# ============================================================================
# Tests for error handling
# ============================================================================


@pytest.mark.unit
def test_missing_file_raises(tmp_path):
    """A missing file should raise ManifestLoadError with the cause attached."""
    path = tmp_path / "missing.json"
    loader = JsonManifestLoader(path)

    with pytest.raises(ManifestLoadError) as exc_info:
        loader.ensure_analyzed()

    assert exc_info.value.file_path == str(path)
    assert isinstance(exc_info.value.original_exception, FileNotFoundError)
    assert loader.loaded is False


@pytest.mark.unit
def test_invalid_json_raises(write_manifest):
    """Invalid JSON should raise ManifestLoadError."""
    loader = JsonManifestLoader(write_manifest(None, raw="{not json"))

    with pytest.raises(ManifestLoadError) as exc_info:
        loader.ensure_analyzed()

    assert isinstance(exc_info.value.original_exception, json.JSONDecodeError)


@pytest.mark.unit
@pytest.mark.parametrize(
    "document",
    [
        [],
        {},
        {"packages": {}},
        {"packages": ["a"]},
        {"packages": [{"status": "l"}]},
        {"packages": [{"path": 3, "status": "l"}]},
        {"packages": [{"path": "a", "local": 3, "status": "l"}]},
    ],
)
def test_wrong_shape_raises(write_manifest, document):
    """Documents of the wrong shape should be rejected."""
    loader = JsonManifestLoader(write_manifest(document))

    with pytest.raises(ManifestLoadError):
        loader.ensure_analyzed()

    assert loader.loaded is False


@pytest.mark.unit
@pytest.mark.parametrize("status", ["vendored", "", None, 8])
def test_unknown_status_raises(write_manifest, status):
    """Statuses outside the closed set should be rejected."""
    loader = JsonManifestLoader(
        write_manifest({"packages": [{"path": "a", "status": status}]})
    )

    with pytest.raises(ManifestLoadError, match="unknown status"):
        loader.ensure_analyzed()


@pytest.mark.unit
def test_partial_results_are_not_kept(write_manifest):
    """A failing entry should leave no packages behind."""
    loader = JsonManifestLoader(
        write_manifest(
            {"packages": [{"path": "a", "status": "l"}, {"path": "b", "status": "x"}]}
        )
    )

    with pytest.raises(ManifestLoadError):
        loader.ensure_analyzed()

    assert loader.packages == ()


@pytest.mark.unit
def test_context_propagates_manifest_error(tmp_path):
    """Context should surface the loader's error unchanged."""
    with pytest.raises(AnalysisError) as exc_info:
        Context(JsonManifestLoader(tmp_path / "missing.json")).list_status()

    assert isinstance(exc_info.value, ManifestLoadError)


@pytest.mark.unit
def test_non_utf8_manifest_raises(tmp_path):
    """Bytes that are not UTF-8 should raise ManifestLoadError, not a decode error."""
    path = tmp_path / "manifest.json"
    path.write_bytes(b'{"packages": [{"path": "\xff", "status": "l"}]}')
    loader = JsonManifestLoader(path)

    with pytest.raises(ManifestLoadError) as exc_info:
        loader.ensure_analyzed()

    assert exc_info.value.file_path == str(path)
    assert isinstance(exc_info.value.original_exception, UnicodeDecodeError)
    assert loader.loaded is False
