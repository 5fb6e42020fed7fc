"""Packaging correctness verification for json-form-tree.

Tests validate that:
- The base install imports cleanly and the engine works end to end
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
    """Verify the base install exposes the engine entry points."""

    def test_import_json_form_tree(self):  # type: ignore[no-untyped-def]
        """Top-level import succeeds."""
        import json_form_tree

        assert hasattr(json_form_tree, "read")
        assert hasattr(json_form_tree, "set_at_path")
        assert hasattr(json_form_tree, "insert_element")
        assert hasattr(json_form_tree, "remove_element")
        assert hasattr(json_form_tree, "traverse")

    def test_set_at_path_basic(self):  # type: ignore[no-untyped-def]
        """set_at_path() works on a plain dict."""
        from json_form_tree import set_at_path

        assert set_at_path({"a": 1}, ("a",), 2) == {"a": 2}

    def test_schema_builder_basic(self):  # type: ignore[no-untyped-def]
        """SchemaBuilder output feeds synthesize()."""
        from json_form_tree import SchemaBuilder, synthesize

        schema = SchemaBuilder().build_fields({"n": {"type": "number"}})
        assert synthesize(schema) == {"n": 0}


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        dist_dir = PROJECT_ROOT / "dist"
        result = subprocess.run(
            ["poetry", "build", "-f", "wheel"],
            cwd=str(PROJECT_ROOT),
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("json_form_tree-*.whl"), key=lambda p: p.stat().st_mtime)
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
            "json_form_tree/__init__.py",
            "json_form_tree/accessor.py",
            "json_form_tree/binding.py",
            "json_form_tree/cache.py",
            "json_form_tree/config.py",
            "json_form_tree/mutator.py",
            "json_form_tree/paths.py",
            "json_form_tree/protocols.py",
            "json_form_tree/records.py",
            "json_form_tree/session.py",
            "json_form_tree/sync.py",
            "json_form_tree/synthesizer.py",
            "json_form_tree/schema/__init__.py",
            "json_form_tree/schema/builder.py",
            "json_form_tree/schema/nodes.py",
            "json_form_tree/integrations/__init__.py",
            "json_form_tree/integrations/_pytest_plugin.py",
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
            assert "json-form-tree" in metadata.lower() or "json_form_tree" in metadata.lower()
            assert "0.1.0" in metadata


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self):  # type: ignore[no-untyped-def]
        """pytest11 entry point must be registered for json-form-tree."""
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")

        form_eps = [ep for ep in pytest11_eps if "json_form_tree" in str(ep.value)]
        assert form_eps, (
            f"No pytest11 entry point found for json-form-tree. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self):  # type: ignore[no-untyped-def]
        """assert_not_mutated fixture must be importable from plugin."""
        import importlib

        mod = importlib.import_module("json_form_tree.integrations._pytest_plugin")
        assert hasattr(mod, "assert_not_mutated")
        assert callable(mod.assert_not_mutated)


class TestPackageMetadata:
    """Verify pyproject.toml metadata completeness."""

    def test_version(self):  # type: ignore[no-untyped-def]
        """Package version must be 0.1.0."""
        import json_form_tree

        assert json_form_tree.__version__ == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        """__all__ must include the documented public API."""
        import json_form_tree

        expected = {
            "AppendRecord",
            "BindingConfig",
            "Boundary",
            "ChoiceNode",
            "ContainerNode",
            "FieldRecord",
            "FlagNode",
            "FormSession",
            "GroupRecord",
            "LongTextNode",
            "MISSING",
            "Missing",
            "NodeKind",
            "Option",
            "RemoveRecord",
            "RepeatedNode",
            "ScalarKind",
            "ScalarNode",
            "SchemaBuilder",
            "Synchronizer",
            "TraversalConfig",
            "clone",
            "insert_element",
            "read",
            "remove_element",
            "set_at_path",
            "synthesize",
            "traverse",
        }
        actual = set(json_form_tree.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
