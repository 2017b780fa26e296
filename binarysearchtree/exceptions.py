from enum import Enum
from typing import NamedTuple


class TreeError(Exception):
    """Base class for structural tree errors."""


class DuplicateKeyError(TreeError):
    def __init__(self, key):
        super().__init__(f"No duplicate items are allowed: {key!r}")
        self.key = key


class NotFoundError(TreeError, KeyError):
    def __init__(self, key):
        super().__init__(f"Item not found: {key!r}")
        self.key = key

    def __str__(self):
        return self.args[0]


class DiagnosticKind(Enum):
    MALFORMED_RECORD = "malformed_record"
    UNKNOWN_SYMBOL = "unknown_symbol"
    INVALID_BIT = "invalid_bit"


class Diagnostic(NamedTuple):
    """A recoverable anomaly: the offending unit was skipped."""

    kind: DiagnosticKind
    detail: str
