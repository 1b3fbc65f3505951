"""Exception types raised by the analysis functions and the input reader."""

from __future__ import annotations


class SequenceStatsError(Exception):
    """Base class for every error surfaced by this package."""


class InvalidArgumentError(SequenceStatsError, ValueError):
    """A collection-taking operation received no collection."""


class InvalidCharacterError(SequenceStatsError, ValueError):
    """A strand holds a base that has no Watson-Crick complement."""

    def __init__(self, character: str, position: int) -> None:
        super().__init__(f"Invalid nucleotide: {character}")
        self.character = character
        self.position = position


class InvalidCountError(SequenceStatsError, ValueError):
    """The sequence count is not a positive integer."""


class MissingInputError(SequenceStatsError, EOFError):
    """Input ran out before every expected line was read."""
