"""
Shared fixtures for core module tests.

This module provides reusable pytest fixtures for testing core functionality,
including package factories, loader test doubles and common test objects.
"""

import pytest

from core.loader import StaticPackageLoader
from core.models import ListItem, Package
from models import ListStatus


@pytest.fixture
def package_factory():
    """Factory for creating Package instances."""

    def _factory(path="example.com/pkg", status=ListStatus.LOCAL, local=""):
        return Package(canonical_path=path, local_path=local, status=status)

    return _factory


@pytest.fixture
def list_item_factory():
    """Factory for creating ListItem instances."""

    def _factory(path="example.com/pkg", status=ListStatus.LOCAL, vendor_path=""):
        return ListItem(status=status, path=path, vendor_path=vendor_path)

    return _factory


@pytest.fixture
def mixed_packages(package_factory):
    """Packages covering every status, deliberately out of order."""
    return [
        package_factory("z/unknown", ListStatus.UNKNOWN),
        package_factory("fmt", ListStatus.STD),
        package_factory("b/vendored", ListStatus.VENDOR, "vendor/b/vendored"),
        package_factory("example.com/app", ListStatus.LOCAL),
        package_factory("c/missing", ListStatus.MISSING),
        package_factory("a/vendored", ListStatus.VENDOR, "vendor/a/vendored"),
        package_factory("d/external", ListStatus.EXTERNAL),
        package_factory(
            "example.com/app/internal/dep",
            ListStatus.INTERNAL,
            "example.com/app/internal/dep",
        ),
        package_factory("e/unused", ListStatus.UNUSED, "vendor/e/unused"),
        package_factory("f/cmd/tool", ListStatus.PROGRAM, "vendor/f/cmd/tool"),
    ]


@pytest.fixture
def static_loader_factory():
    """Factory for creating StaticPackageLoader test doubles."""

    def _factory(packages=None, error=None):
        return StaticPackageLoader(packages, error=error)

    return _factory
