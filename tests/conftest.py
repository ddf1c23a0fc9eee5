"""Shared test fixtures for ccscan."""

from __future__ import annotations

import os
import textwrap
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

import pytest

from ccscan.api import score_source
from ccscan.scanning.treesitter_parser import TreeSitterParser


@dataclass
class FakeNode:
    """Minimal stand-in for a tree-sitter node: a kind tag plus children."""

    type: str
    children: list["FakeNode"] = field(default_factory=list)
    name: Optional[str] = None
    start_point: tuple[int, int] = (0, 0)
    end_point: tuple[int, int] = (0, 0)

    @property
    def text(self) -> Optional[bytes]:
        return self.name.encode() if self.name is not None else None

    def child_by_field_name(self, name: str) -> Optional["FakeNode"]:
        if name == "name" and self.name is not None:
            return FakeNode("identifier", name=self.name)
        if name == "body":
            return next((c for c in self.children if c.type == "block"), None)
        return None


@pytest.fixture
def parser() -> TreeSitterParser:
    return TreeSitterParser()


@pytest.fixture
def parse(parser: TreeSitterParser) -> Callable[[str], object]:
    """Parse dedented source and return the root node."""

    def _parse(source: str):
        return parser.parse(textwrap.dedent(source).encode()).root_node

    return _parse


@pytest.fixture
def scores() -> Callable[[str], dict[str, int]]:
    """Score dedented source and map qualified name -> score."""

    def _scores(source: str) -> dict[str, int]:
        return {fn.qualified_name: fn.score for fn in score_source(textwrap.dedent(source))}

    return _scores


SIMPLE_SOURCE = """\
def simple():
    return True
"""

COMPLEX_SOURCE = """\
def complex():
    if True:
        for i in range(10):
            while i > 0:
                try:
                    pass
                except Exception:
                    pass
"""

NESTED_SOURCE = """\
def nested():
    if True and False:
        pass
"""

BROKEN_SOURCE = """\
def broken(:
    return
"""


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    """A small source tree with excluded directories and one broken file.

    Layout (scores in parentheses):
        complex.py       complex (6)
        simple.py        simple (1)
        subdir/nested.py nested (3)
        subdir/broken.py syntax error
        venv/ignored.py  excluded
        __pycache__/x.py excluded
        notes.txt        not a source file
    """
    files = {
        "simple.py": SIMPLE_SOURCE,
        "complex.py": COMPLEX_SOURCE,
        "subdir/nested.py": NESTED_SOURCE,
        "subdir/broken.py": BROKEN_SOURCE,
        "venv/ignored.py": "def ignored():\n    pass\n",
        "__pycache__/cached.py": "def cached():\n    pass\n",
        "notes.txt": "def not_python():\n    pass\n",
    }
    for rel, content in files.items():
        target = tmp_path / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
    return tmp_path


@pytest.fixture
def node() -> Callable[..., FakeNode]:
    """Factory for hand-built syntax trees: node(kind, *children, name=None)."""

    def _node(kind: str, *children: FakeNode, name: Optional[str] = None, line: int = 0) -> FakeNode:
        return FakeNode(
            kind, list(children), name=name, start_point=(line, 0), end_point=(line, 0)
        )

    return _node


@pytest.fixture
def locked_subdir(tmp_path, monkeypatch) -> Path:
    """Make the directory walk report ``locked/`` as unlistable.

    ``chmod`` cannot make a directory unreadable for root, so the walk itself
    is replaced. ``ok.py`` is still listed at the top level.
    """
    (tmp_path / "ok.py").write_text("def ok():\n    return 1\n")

    def _walk(top, onerror=None, followlinks=False):
        if onerror is not None:
            onerror(PermissionError(13, "Permission denied", os.path.join(top, "locked")))
        yield str(top), [], ["ok.py"]

    monkeypatch.setattr("ccscan.scanning.discovery.os.walk", _walk)
    return tmp_path
