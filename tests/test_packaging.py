"""Tests that every third-party import is declared in pyproject.toml."""

import ast
import re
import sys
import os

import pytest

ROOT = os.path.join(os.path.dirname(__file__), "..")
PACKAGE = os.path.join(ROOT, "botapi")

# Import name → distribution name, where they differ.
DISTRIBUTIONS = {"dotenv": "python-dotenv", "pydantic_core": "pydantic-core"}


def _declared() -> set:
    with open(os.path.join(ROOT, "pyproject.toml"), encoding="utf-8") as fh:
        text = fh.read()
    block = re.search(r"^dependencies = \[(.*?)^\]", text, re.S | re.M).group(1)
    return {re.split(r"[<>=!~\[ ]", item)[0].lower() for item in re.findall(r'"([^"]+)"', block)}


def _imported(path: str) -> set:
    with open(path, encoding="utf-8") as fh:
        tree = ast.parse(fh.read())
    names = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            names.update(alias.name.split(".")[0] for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
            names.add(node.module.split(".")[0])
    return names


# ── Dependencies ─────────────────────────────────────────────────────────────


class TestDeclaredDependencies:
    """Runtime imports resolve to declared distributions."""

    @pytest.mark.parametrize("module", sorted(f for f in os.listdir(PACKAGE) if f.endswith(".py")))
    def test_imports_declared(self, module: str) -> None:
        third_party = {
            name
            for name in _imported(os.path.join(PACKAGE, module))
            if name not in sys.stdlib_module_names and name not in ("botapi", "__future__")
        }
        declared = _declared()
        missing = {name for name in third_party if DISTRIBUTIONS.get(name, name) not in declared}
        assert not missing

    def test_pydantic_core_declared(self) -> None:
        assert "pydantic-core" in _declared()
