"""Strand complementation helpers."""

from __future__ import annotations

from typing import Optional

from .errors import InvalidArgumentError, InvalidCharacterError

COMPLEMENT = str.maketrans("ACGT", "TGCA")
COMPLEMENT_BASES = frozenset("ACGT")


def generate_complementary_strand(strand: Optional[str], normalize_case: bool = False) -> str:
    """Return the Watson-Crick complement of ``strand``.

    Only uppercase ``A/C/G/T`` are accepted unless ``normalize_case`` is set,
    in which case each base is uppercased first. The first base without a
    complement raises :class:`InvalidCharacterError` carrying that base and
    its index in ``strand`` as given; nothing is returned for a partially
    valid strand.
    """
    if strand is None:
        raise InvalidArgumentError("Strand cannot be None")
    bases = []
    for position, base in enumerate(strand):
        # upper() may widen a character ("ß" -> "SS"), which never matches.
        key = base.upper() if normalize_case else base
        if key not in COMPLEMENT_BASES:
            raise InvalidCharacterError(base, position)
        bases.append(key)
    return "".join(bases).translate(COMPLEMENT)
