import logging

from .exceptions import Diagnostic, DiagnosticKind
from .huffman_core import HuffmanLogic
from .render import breadth_first_lines

logger = logging.getLogger(__name__)


class HuffmanTree:
    """
    Huffman tree built from a ``{character: frequency}`` mapping.

    The code map stays empty until :meth:`generate_codes` is called.
    Characters without a code and bits other than ``'0'``/``'1'`` are
    skipped; each skip is logged and appended to :attr:`diagnostics`,
    which holds the skips of the latest encode or decode call only.
    """

    def __init__(self, frequencies):
        self.logic = HuffmanLogic()
        self.root = self.logic.build_tree(frequencies)
        self.codes = {}
        self.diagnostics = []

    def generate_codes(self):
        self.codes.clear()
        self.logic.generate_codes(self.root, "", self.codes)
        return self.codes

    def _report(self, kind, detail):
        logger.warning(detail)
        self.diagnostics.append(Diagnostic(kind, detail))

    def encode(self, text):
        self.diagnostics = []
        encoded = []
        for char in text:
            code = self.codes.get(char)
            if code is None:
                self._report(
                    DiagnosticKind.UNKNOWN_SYMBOL,
                    f"Character {char!r} not found in Huffman codes.",
                )
                continue
            encoded.append(code)
        return "".join(encoded)

    def decode(self, bits):
        self.diagnostics = []
        if self.root is None:
            return ""
        decoded = []
        lone_leaf = self.root.is_leaf()
        current = self.root
        for bit in bits:
            if bit not in "01" or (lone_leaf and bit == "1"):
                self._report(
                    DiagnosticKind.INVALID_BIT,
                    f"Invalid bit in encoded data: {bit!r}",
                )
                continue
            if not lone_leaf:
                current = current.left if bit == "0" else current.right
            if current.is_leaf():
                decoded.append(current.data.character)
                current = self.root
        # Bits left over mid-path are dropped.
        return "".join(decoded)

    def compress(self, text):
        """Encode ``text`` and pack the bits, prefixed by a padding-count byte."""
        encoded_str = self.encode(text)
        if not encoded_str:
            return b""

        # Pad to a whole number of bytes
        padding = (8 - len(encoded_str) % 8) % 8
        encoded_str += "0" * padding

        b = bytearray([padding])
        for i in range(0, len(encoded_str), 8):
            byte = encoded_str[i:i + 8]
            b.append(int(byte, 2))
        return bytes(b)

    def decompress(self, data):
        if not data:
            return ""
        padding = data[0]
        if padding > 7 or len(data) == 1:
            raise ValueError(f"Corrupt header: padding={padding}, length={len(data)}")
        bits = "".join(format(byte, "08b") for byte in data[1:])
        if padding:
            bits = bits[:-padding]
        return self.decode(bits)

    def frequency(self, character):
        return self.logic.find_frequency(self.root, character)

    def code_table(self):
        """Rows of ``(character, frequency, code)`` sorted by code length, then code."""
        return [
            (char, self.frequency(char), code)
            for char, code in sorted(self.codes.items(), key=lambda kv: (len(kv[1]), kv[1]))
        ]

    def format_code_table(self):
        lines = [
            "Huffman Codes:",
            "Character | Frequency | Code",
            "----------|-----------|-----",
        ]
        for char, freq, code in self.code_table():
            lines.append(f"    {char}     | {freq:>9} | {code}")
        return lines

    def prefix_lines(self):
        return [prefix + str(data) for prefix, data in self.logic.iter_prefixed(self.root)]

    def render_lines(self):
        return list(breadth_first_lines(self.root))
