from .bst import BinarySearchTree
from .exceptions import (
    Diagnostic,
    DiagnosticKind,
    DuplicateKeyError,
    NotFoundError,
    TreeError,
)
from .frequencies import load_frequencies, parse_frequencies
from .huffman_core import HuffmanLogic, HuffmanNodeData
from .huffman_service import HuffmanTree
from .node import BinaryNode, Node, iter_linked
from .render import breadth_first_levels, breadth_first_lines

__all__ = [
    "BinaryNode",
    "BinarySearchTree",
    "Diagnostic",
    "DiagnosticKind",
    "DuplicateKeyError",
    "HuffmanLogic",
    "HuffmanNodeData",
    "HuffmanTree",
    "Node",
    "NotFoundError",
    "TreeError",
    "breadth_first_levels",
    "breadth_first_lines",
    "iter_linked",
    "load_frequencies",
    "parse_frequencies",
]
