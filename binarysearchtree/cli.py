#!/usr/bin/env python3
"""
Command-line driver for the binary search tree and Huffman tree.

Run with:
    binarysearchtree bst ohua panuhunuhu kahaha oama --delete ohua
    binarysearchtree huffman frequencies.txt --text kapiolani
"""
import argparse
import logging
import sys

from .bst import BinarySearchTree
from .exceptions import TreeError
from .frequencies import load_frequencies
from .huffman_service import HuffmanTree

logger = logging.getLogger(__name__)


def run_bst(args):
    """Build a tree from the given items, then apply searches and deletions."""
    convert = int if args.numeric else str
    tree = BinarySearchTree()
    for item in args.items:
        tree.insert(convert(item))

    print("Breadth-First Display of Tree:")
    for line in tree.breadth_first_lines():
        print(line)
    print(f"preorder traversal:\n{', '.join(map(str, tree.preorder()))}")
    print(f"inorder traversal:\n{tree}")
    print(f"postorder traversal:\n{', '.join(map(str, tree.postorder()))}")

    for key in args.search:
        print(f"Got: {tree.search(convert(key))}")

    for key in args.delete:
        tree.delete(convert(key))
        print(f"After removing {key}:")
        for line in tree.breadth_first_lines():
            print(line)
    return 0


def run_huffman(args):
    """Build a Huffman tree from a frequency file and round-trip some text."""
    tree = HuffmanTree(load_frequencies(args.frequency_file))
    tree.generate_codes()
    for line in tree.format_code_table():
        print(line)

    if args.show_tree:
        for line in tree.prefix_lines():
            print(line)

    if args.text is not None:
        encoded = tree.encode(args.text)
        print(f"{args.text} encoded in HuffmanTree: {encoded}")
        decoded = tree.decode(encoded)
        print(f"{encoded} decoded from HuffmanTree: {decoded}")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog="binarysearchtree",
        description="Binary search tree and Huffman tree demonstrations",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    bst = subparsers.add_parser("bst", help="Insert items into a binary search tree")
    bst.add_argument("items", nargs="+", help="Items to insert, in order")
    bst.add_argument("--numeric", action="store_true", help="Treat items and keys as integers")
    bst.add_argument("--search", action="append", default=[], metavar="KEY", help="Key to look up (repeatable)")
    bst.add_argument("--delete", action="append", default=[], metavar="KEY", help="Key to remove (repeatable)")
    bst.set_defaults(handler=run_bst)

    huffman = subparsers.add_parser("huffman", help="Build Huffman codes from a frequency file")
    huffman.add_argument("frequency_file", help="File of '<character> <frequency>' lines")
    huffman.add_argument("--text", default=None, help="Text to encode and decode")
    huffman.add_argument("--show-tree", action="store_true", help="Print every node with its code prefix")
    huffman.set_defaults(handler=run_huffman)
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        return args.handler(args)
    except (TreeError, OSError, ValueError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
