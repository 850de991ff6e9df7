"""Packaging correctness verification for json-pointer-tree.

Tests validate:
- Base install imports cleanly and the default API works
- py.typed marker is present in the wheel
- Pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the built wheel and current installation rather than
creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import subprocess
import sys
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    """Verify the base install works with default configuration."""

    def test_import_json_pointer_tree(self):  # type: ignore[no-untyped-def]
        """Top-level import succeeds."""
        import json_pointer_tree

        assert hasattr(json_pointer_tree, "get_by_pointer")
        assert hasattr(json_pointer_tree, "set_by_pointer")
        assert hasattr(json_pointer_tree, "JsonMapper")

    def test_set_then_get(self):  # type: ignore[no-untyped-def]
        """set_by_pointer() and get_by_pointer() work with default config."""
        from json_pointer_tree import get_by_pointer, set_by_pointer
        from json_pointer_tree.tree import object_node

        root = object_node()
        assert set_by_pointer(root, "/a/0", 1)
        assert get_by_pointer(root, "/a/0").value == 1


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        dist_dir = PROJECT_ROOT / "dist"
        # Use poetry build since that's the project's build system
        result = subprocess.run(
            ["poetry", "build", "-f", "wheel"],
            cwd=str(PROJECT_ROOT),
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """py.typed marker must be included in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            py_typed_files = [n for n in names if n.endswith("py.typed")]
            assert py_typed_files, f"py.typed not found in wheel. Contents: {names}"

    def test_no_pycache_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """__pycache__ directories must not be in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            pycache_files = [n for n in zf.namelist() if "__pycache__" in n]
            assert not pycache_files, f"__pycache__ found in wheel: {pycache_files}"

    def test_all_source_modules_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """All source modules must be present in the wheel."""
        expected_modules = [
            "json_pointer_tree/__init__.py",
            "json_pointer_tree/api.py",
            "json_pointer_tree/binding.py",
            "json_pointer_tree/codec.py",
            "json_pointer_tree/coercion.py",
            "json_pointer_tree/config.py",
            "json_pointer_tree/errors.py",
            "json_pointer_tree/mapper.py",
            "json_pointer_tree/serializer.py",
            "json_pointer_tree/temporal.py",
            "json_pointer_tree/pointer/__init__.py",
            "json_pointer_tree/pointer/cache.py",
            "json_pointer_tree/pointer/navigator.py",
            "json_pointer_tree/pointer/parser.py",
            "json_pointer_tree/tree/__init__.py",
            "json_pointer_tree/tree/builder.py",
            "json_pointer_tree/tree/nodes.py",
            "json_pointer_tree/integrations/__init__.py",
            "json_pointer_tree/integrations/_pytest_plugin.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert any(module in n for n in names), (
                    f"Module {module} not found in wheel"
                )

    def test_metadata_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """Wheel metadata must include correct package info."""
        with zipfile.ZipFile(wheel_path) as zf:
            metadata_files = [n for n in zf.namelist() if "METADATA" in n]
            assert metadata_files, "No METADATA found in wheel"
            metadata = zf.read(metadata_files[0]).decode()
            assert "json-pointer-tree" in metadata.lower()
            assert "0.1.0" in metadata


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self):  # type: ignore[no-untyped-def]
        """pytest11 entry point must be registered for json-pointer-tree."""
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")

        plugin_eps = [ep for ep in pytest11_eps if "json_pointer_tree" in str(ep.value)]
        assert plugin_eps, (
            f"No pytest11 entry point found for json-pointer-tree. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self):  # type: ignore[no-untyped-def]
        """assert_pointer_value fixture must be importable from plugin."""
        import importlib

        mod = importlib.import_module("json_pointer_tree.integrations._pytest_plugin")
        assert hasattr(mod, "assert_pointer_value")
        assert callable(mod.assert_pointer_value)

    def test_plugin_discovery_via_pytest(self):  # type: ignore[no-untyped-def]
        """pytest --fixtures should list assert_pointer_value."""
        result = subprocess.run(
            [sys.executable, "-m", "pytest", "--fixtures", "-q"],
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
        )
        assert "assert_pointer_value" in result.stdout, (
            f"Fixture not found in pytest fixtures list. stdout: {result.stdout[:500]}"
        )


class TestPackageMetadata:
    """Verify pyproject.toml metadata completeness."""

    def test_version(self):  # type: ignore[no-untyped-def]
        """Package version must be 0.1.0."""
        import json_pointer_tree

        assert json_pointer_tree.__version__ == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        """__all__ must include the documented public API."""
        import json_pointer_tree

        expected = {
            "MISSING",
            "ConversionError",
            "JsonMapper",
            "JsonNode",
            "JsonTreeError",
            "NodeType",
            "SerializationError",
            "TreeConfig",
            "TreeDecodeError",
            "WriteFailure",
            "get_by_pointer",
            "parse_pointer",
            "set_by_pointer",
            "to_node",
        }
        actual = set(json_pointer_tree.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
