"""Source scanning: file discovery, parsing and node-kind rules."""

from .discovery import discover_files
from .node_kinds import DECISION_KINDS, FUNCTION_KINDS, is_function_boundary
from .treesitter_parser import TreeSitterParser

__all__ = [
    "DECISION_KINDS",
    "FUNCTION_KINDS",
    "TreeSitterParser",
    "discover_files",
    "is_function_boundary",
]
