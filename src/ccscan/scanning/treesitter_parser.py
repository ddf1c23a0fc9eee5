"""Tree-sitter parser wrapper.

This is the syntax tree provider: it turns Python source bytes into a
tree-sitter tree and rejects trees that contain syntax errors.

Usage:
    parser = TreeSitterParser()
    tree = parser.parse(code_bytes, path)
    for unit in locate_functions(tree.root_node, path):
        ...
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Optional

import tree_sitter
import tree_sitter_python

from ..exceptions import FileAccessError, FileParseError
from ..logging_config import get_logger

logger = get_logger(__name__)

LANGUAGE_NAME = "python"


def _load_language() -> tree_sitter.Language:
    # tree-sitter >= 0.22 grammars return a PyCapsule; wrap it in Language()
    return tree_sitter.Language(tree_sitter_python.language())


PYTHON_LANGUAGE = _load_language()


class TreeSitterParser:
    """Wrapper around tree-sitter for parsing Python files.

    tree-sitter ``Parser`` objects are not safe to share between threads, so
    each thread that calls :meth:`parse` gets its own parser instance.
    """

    def __init__(self) -> None:
        self._local = threading.local()

    def _parser(self) -> tree_sitter.Parser:
        parser: Optional[tree_sitter.Parser] = getattr(self._local, "parser", None)
        if parser is None:
            parser = tree_sitter.Parser(PYTHON_LANGUAGE)
            self._local.parser = parser
        return parser

    def parse(self, code: bytes, path: Path | str = "<string>") -> tree_sitter.Tree:
        """Parse code and return its syntax tree.

        Args:
            code: Source code as bytes
            path: File path, used in error reports only

        Returns:
            Tree whose root node contains no syntax errors

        Raises:
            FileParseError: If the parser fails or the tree contains errors
        """
        try:
            tree = self._parser().parse(code)
        except (ValueError, TypeError) as e:
            raise FileParseError(Path(path), f"tree-sitter failed: {e}")

        root = tree.root_node
        if root.has_error:
            line = first_error_line(root)
            where = f" at line {line}" if line is not None else ""
            raise FileParseError(Path(path), f"syntax error{where}")
        return tree

    def parse_file(self, path: Path) -> tree_sitter.Tree:
        """Read a file from disk and parse it.

        Raises:
            FileAccessError: If the file cannot be read
            FileParseError: If the file does not parse cleanly
        """
        try:
            code = path.read_bytes()
        except OSError as e:
            raise FileAccessError(path, f"Cannot read file: {e}")
        logger.debug(f"Parsing {path} ({len(code)} bytes)")
        return self.parse(code, path)


def first_error_line(root: Any) -> Optional[int]:
    """Return the 1-indexed line of the first ERROR or MISSING node, if any."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return int(node.start_point[0]) + 1
        if node.has_error:
            stack.extend(reversed(node.children))
    return None
