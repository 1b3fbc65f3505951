"""Read a sequence count followed by that many sequences from a line source."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, TextIO

from .errors import InvalidCountError, MissingInputError

LOGGER = logging.getLogger(__name__)

_COUNT_PATTERN = re.compile(r"[+-]?\d+")


def parse_count(token: str) -> int:
    """Parse the sequence count line into a positive integer."""
    stripped = token.strip()
    if not _COUNT_PATTERN.fullmatch(stripped):
        raise InvalidCountError("Invalid number format. Please enter a valid integer.")
    count = int(stripped)
    if count <= 0:
        raise InvalidCountError("Number of sequences must be a positive integer")
    return count


def _prompt(stream: Optional[TextIO], message: str) -> None:
    if stream is None:
        return
    stream.write(message + "\n")
    stream.flush()


def read_sequences(lines: Iterable[str], prompt: Optional[TextIO] = None) -> List[str]:
    """Consume a count line and then exactly that many sequence lines.

    Lines past the last expected sequence are left unread.
    """
    source = iter(lines)

    _prompt(prompt, "Enter the number of sequences:")
    try:
        count_line = next(source)
    except StopIteration:
        raise MissingInputError("No input found for number of sequences") from None
    count = parse_count(count_line)
    LOGGER.debug("Expecting %s sequences", count)

    sequences: List[str] = []
    for index in range(1, count + 1):
        _prompt(prompt, f"Enter sequence {index}:")
        try:
            line = next(source)
        except StopIteration:
            raise MissingInputError(f"No input found for sequence {index}") from None
        sequences.append(line.strip())
    return sequences
