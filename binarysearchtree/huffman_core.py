import heapq
import logging
from itertools import count

from .node import BinaryNode

logger = logging.getLogger(__name__)


class HuffmanNodeData:
    """Character and frequency carried by a Huffman tree node.

    Merged (internal) nodes carry ``character=None``.
    """

    __slots__ = ("character", "frequency")

    def __init__(self, character, frequency):
        self.character = character
        self.frequency = frequency

    def __lt__(self, other):
        return self.frequency < other.frequency

    def __eq__(self, other):
        if not isinstance(other, HuffmanNodeData):
            return NotImplemented
        return self.character == other.character and self.frequency == other.frequency

    def __hash__(self):
        return hash((self.character, self.frequency))

    def __str__(self):
        character = "" if self.character is None else self.character
        return f"{character}:{self.frequency}"

    def __repr__(self):
        return f"HuffmanNodeData({self.character!r}, {self.frequency!r})"


class HuffmanLogic:
    def build_tree(self, frequencies):
        # Ties on frequency are broken by creation order: leaves in the
        # mapping's iteration order, then merged nodes as they are made.
        order = count()
        priority_queue = [
            (freq, next(order), BinaryNode(HuffmanNodeData(char, freq)))
            for char, freq in frequencies.items()
        ]
        heapq.heapify(priority_queue)

        # Iteratively merge the two lightest nodes
        while len(priority_queue) > 1:
            left_freq, _, left = heapq.heappop(priority_queue)
            right_freq, _, right = heapq.heappop(priority_queue)
            merged = BinaryNode(HuffmanNodeData(None, left_freq + right_freq), left, right)
            heapq.heappush(priority_queue, (merged.data.frequency, next(order), merged))

        root = priority_queue[0][2] if priority_queue else None
        logger.debug("Built Huffman tree from %d symbols", len(frequencies))
        return root

    def generate_codes(self, node, current_code="", codes=None):
        if codes is None:
            codes = {}
        if node is None:
            return codes
        if node.is_leaf():
            if node.data.character is not None:
                # A lone root leaf still needs a one-bit code.
                codes[node.data.character] = current_code or "0"
            return codes
        self.generate_codes(node.left, current_code + "0", codes)
        self.generate_codes(node.right, current_code + "1", codes)
        return codes

    def find_frequency(self, node, character):
        if node is None:
            return 0
        if node.is_leaf():
            return node.data.frequency if node.data.character == character else 0
        return self.find_frequency(node.left, character) or self.find_frequency(
            node.right, character
        )

    def iter_prefixed(self, node, prefix=""):
        """Yield ``(path, data)`` for every node in pre-order."""
        if node is None:
            return
        yield prefix, node.data
        yield from self.iter_prefixed(node.left, prefix + "0")
        yield from self.iter_prefixed(node.right, prefix + "1")
