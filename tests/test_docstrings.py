"""Tests that every module, class and function in the package is documented."""

import ast
from pathlib import Path

import pytest

import mcp_daisy_days

SOURCE_FILES = sorted(Path(mcp_daisy_days.__file__).parent.glob("*.py"))


@pytest.mark.parametrize("path", SOURCE_FILES, ids=lambda path: path.name)
def test_definitions_have_docstrings(path: Path) -> None:
    """Test that no class or function is missing a docstring."""
    tree = ast.parse(path.read_text(encoding="utf-8"))
    missing = [
        f"{path.name}:{node.lineno} {node.name}"
        for node in ast.walk(tree)
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef))
        and ast.get_docstring(node) is None
    ]

    assert ast.get_docstring(tree) is not None
    assert missing == []
