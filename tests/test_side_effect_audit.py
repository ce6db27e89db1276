"""Guardrails to detect stray console output in source files."""

from __future__ import annotations

from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src" / "callspy"


def _files_with_pattern(pattern: str) -> set[Path]:
    return {path.relative_to(PROJECT_ROOT) for path in SRC_ROOT.rglob("*.py") if pattern in path.read_text()}


def test_print_calls_limited_to_render_module() -> None:
    """Ensure console output stays inside the rendering helpers."""

    expected = {Path("src/callspy/render.py")}
    assert _files_with_pattern("print(") == expected


def test_no_interactive_input_in_library() -> None:
    assert _files_with_pattern("input(") == set()
