"""Orchestration helpers for a single analysis run."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .analyzer import (
    calculate_at_content_for_all,
    calculate_gc_content_for_all,
    calculate_nucleotide_frequencies,
    calculate_sequence_length_distribution,
    find_most_common_nucleotides,
)
from .errors import InvalidArgumentError, InvalidCharacterError
from .utils_seq import generate_complementary_strand

LOGGER = logging.getLogger(__name__)

ON_INVALID_CHOICES = ("continue", "abort")


@dataclass(slots=True)
class AnalysisConfig:
    normalize_case: bool = False
    on_invalid: str = "continue"

    def __post_init__(self) -> None:
        if self.on_invalid not in ON_INVALID_CHOICES:
            raise ValueError(
                f"`on_invalid` must be one of {', '.join(ON_INVALID_CHOICES)}; got {self.on_invalid!r}."
            )


@dataclass(slots=True)
class ComplementResult:
    index: int
    sequence: Optional[str]
    complement: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def complement_all(
    sequences: Sequence[Optional[str]], config: AnalysisConfig
) -> tuple[List[ComplementResult], bool]:
    """Complement every sequence, turning failures into result entries.

    Returns the results and whether the run stopped early under the
    ``abort`` policy.
    """
    results: List[ComplementResult] = []
    for index, sequence in enumerate(sequences, start=1):
        try:
            complement = generate_complementary_strand(
                sequence, normalize_case=config.normalize_case
            )
        except (InvalidCharacterError, InvalidArgumentError) as exc:
            LOGGER.warning("Sequence %s has no complement: %s", index, exc)
            results.append(ComplementResult(index=index, sequence=sequence, error=str(exc)))
            if config.on_invalid == "abort":
                return results, True
            continue
        results.append(ComplementResult(index=index, sequence=sequence, complement=complement))
    return results, False


def run_analysis(
    sequences: Sequence[Optional[str]], config: Optional[AnalysisConfig] = None
) -> dict:
    """Compute every statistic for ``sequences`` and collect them in a summary."""
    config = config or AnalysisConfig()
    if sequences is None:
        raise InvalidArgumentError("Sequences collection cannot be None")

    frequencies = calculate_nucleotide_frequencies(sequences)
    LOGGER.info("Sequences analysed: %s", len(sequences))
    LOGGER.info("Nucleotides counted: %s", sum(frequencies.values()))

    complements, aborted = complement_all(sequences, config)
    failures = sum(1 for result in complements if not result.ok)
    if failures:
        LOGGER.info("Sequences without complement: %s", failures)

    return {
        "sequence_count": len(sequences),
        "sequences": list(sequences),
        "frequencies": frequencies,
        "gc_content": calculate_gc_content_for_all(sequences),
        "at_content": calculate_at_content_for_all(sequences),
        "length_distribution": calculate_sequence_length_distribution(sequences),
        "most_common": find_most_common_nucleotides(sequences),
        "complements": complements,
        "aborted": aborted,
    }
