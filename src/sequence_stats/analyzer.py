"""Descriptive statistics over a collection of nucleotide sequences."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence

from .errors import InvalidArgumentError

NUCLEOTIDES = "ACGT"
GC_BASES = frozenset("GC")
AT_BASES = frozenset("AT")


def _require_collection(sequences: Optional[Sequence[Optional[str]]]) -> None:
    if sequences is None:
        raise InvalidArgumentError("Sequences collection cannot be None")
    if isinstance(sequences, str):
        raise InvalidArgumentError("Expected a collection of sequences, not a single string")


def calculate_nucleotide_frequencies(sequences: Sequence[Optional[str]]) -> Dict[str, int]:
    """Count A/C/G/T across all sequences, ignoring case and other characters.

    ``None`` entries contribute nothing. The returned mapping only holds the
    nucleotides that occur, in alphabetical order.
    """
    _require_collection(sequences)
    counts: Counter = Counter()
    for sequence in sequences:
        if sequence is None:
            continue
        counts.update(ch for ch in sequence.upper() if ch in NUCLEOTIDES)
    return {base: counts[base] for base in NUCLEOTIDES if counts[base]}


def _content_for_all(sequences: Sequence[Optional[str]], targets: Iterable[str]) -> List[float]:
    _require_collection(sequences)
    contents: List[float] = []
    for sequence in sequences:
        if not sequence:
            # None and "" both have nothing to measure.
            contents.append(0.0)
            continue
        matches = sum(1 for ch in sequence.upper() if ch in targets)
        contents.append(matches * 100.0 / len(sequence))
    return contents


def calculate_gc_content_for_all(sequences: Sequence[Optional[str]]) -> List[float]:
    """Return the GC percentage of each sequence, position-aligned with the input."""
    return _content_for_all(sequences, GC_BASES)


def calculate_at_content_for_all(sequences: Sequence[Optional[str]]) -> List[float]:
    """Return the AT percentage of each sequence, position-aligned with the input."""
    return _content_for_all(sequences, AT_BASES)


def calculate_sequence_length_distribution(sequences: Sequence[Optional[str]]) -> Dict[int, int]:
    """Map each sequence length to the number of sequences having it.

    ``None`` entries are skipped, while empty strings land in the ``0`` bucket.
    """
    _require_collection(sequences)
    lengths = Counter(len(sequence) for sequence in sequences if sequence is not None)
    return dict(sorted(lengths.items()))


def find_most_common_nucleotides(sequences: Sequence[Optional[str]]) -> List[str]:
    """Return every nucleotide sharing the highest frequency, alphabetically."""
    _require_collection(sequences)
    frequencies = calculate_nucleotide_frequencies(sequences)
    if not frequencies:
        return []
    top = max(frequencies.values())
    return [base for base, count in frequencies.items() if count == top]
