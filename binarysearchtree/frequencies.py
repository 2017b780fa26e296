"""Reader for ``<character> <frequency>`` tables."""

import logging

from .exceptions import DiagnosticKind

logger = logging.getLogger(__name__)


def parse_frequencies(lines):
    """
    Build a ``{character: frequency}`` mapping from text records.

    Args:
        lines: iterable of lines, one ``<token><whitespace><integer>`` record each.
            The character is the first character of the token.

    Returns:
        dict in record order. Blank lines are ignored; malformed records are
        logged and skipped; a repeated character keeps its last frequency.
    """
    frequencies = {}
    for number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) != 2:
            _skip(number, line, "expected 2 fields")
            continue
        try:
            frequency = int(parts[1])
        except ValueError:
            _skip(number, line, "invalid frequency format")
            continue
        if frequency < 0:
            _skip(number, line, "negative frequency")
            continue
        character = parts[0][0]
        if character in frequencies:
            logger.warning("Line %d: duplicate character %r, keeping the last frequency", number, character)
        frequencies[character] = frequency
    return frequencies


def _skip(number, line, reason):
    logger.warning("%s at line %d (%s): %r", DiagnosticKind.MALFORMED_RECORD.value, number, reason, line)


def load_frequencies(path):
    with open(path, encoding="utf-8") as f:
        return parse_frequencies(f)
