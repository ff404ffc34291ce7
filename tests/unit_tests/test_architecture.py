"""Run the repository boundary checks as part of the unit suite."""

from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "check_architecture.py"


def _load_checker():
    module_spec = importlib.util.spec_from_file_location("check_architecture", SCRIPT)
    assert module_spec is not None and module_spec.loader is not None
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


def test_source_tree_respects_boundaries(capsys: pytest.CaptureFixture[str]) -> None:
    """Ensure use-cases, adapters and CLI keep to their import boundaries."""
    _load_checker().main()
    assert "Architecture checks passed." in capsys.readouterr().out


def test_checker_flags_tool_use_in_application(tmp_path: Path) -> None:
    """Ensure a direct cwebp call from a use-case module is reported."""
    checker = _load_checker()
    offender = tmp_path / "use_cases.py"
    offender.write_text("from webp_converter.adapters.encoders import CwebpEncoder\n")

    with pytest.raises(SystemExit, match="CwebpEncoder"):
        checker._assert_no_imports(offender, ["CwebpEncoder"])
