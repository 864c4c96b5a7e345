"""
Tests that the installed distribution carries every subpackage.
"""
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent


class TestPackaging:

    def test_package_discovery_includes_namespace_dirs(self):
        """api, services, schemas and web ship without __init__.py"""
        tomllib = pytest.importorskip("tomllib")
        with open(ROOT / "pyproject.toml", "rb") as f:
            find = tomllib.load(f)["tool"]["setuptools"]["packages"]["find"]

        assert find["namespaces"] is True

        setuptools = pytest.importorskip("setuptools")
        packages = setuptools.find_namespace_packages(where=str(ROOT), include=find["include"])
        for name in [
            "tinyurl_app",
            "tinyurl_app.api.v1",
            "tinyurl_app.database",
            "tinyurl_app.models",
            "tinyurl_app.schemas",
            "tinyurl_app.services",
            "tinyurl_app.web",
        ]:
            assert name in packages, name
