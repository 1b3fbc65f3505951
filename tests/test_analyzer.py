import pytest

from sequence_stats.analyzer import (
    calculate_at_content_for_all,
    calculate_gc_content_for_all,
    calculate_nucleotide_frequencies,
    calculate_sequence_length_distribution,
    find_most_common_nucleotides,
)
from sequence_stats.errors import InvalidArgumentError

LONG_A = "A" * 68
LONG_T = "T" * 63

SCENARIOS = [
    pytest.param(
        ["ATCG", "GATTACA", "CCGG"],
        {"A": 4, "C": 4, "G": 4, "T": 3},
        [50.0, 28.571428571428573, 100.0],
        [50.0, 71.42857142857143, 0.0],
        {4: 2, 7: 1},
        ["A", "C", "G"],
        id="basic",
    ),
    pytest.param(
        ["AAAA", "TTTT", "CCCC", "GGGG"],
        {"A": 4, "C": 4, "G": 4, "T": 4},
        [0.0, 0.0, 100.0, 100.0],
        [100.0, 100.0, 0.0, 0.0],
        {4: 4},
        ["A", "C", "G", "T"],
        id="single-nucleotide-sequences",
    ),
    pytest.param(
        ["ATCG", "GATTACA", "", "CCGG", ""],
        {"A": 4, "C": 4, "G": 4, "T": 3},
        [50.0, 28.571428571428573, 0.0, 100.0, 0.0],
        [50.0, 71.42857142857143, 0.0, 0.0, 0.0],
        {0: 2, 4: 2, 7: 1},
        ["A", "C", "G"],
        id="empty-sequences",
    ),
    pytest.param(
        ["ATCGATCG", "ATCGATCG", "ATCGATCG"],
        {"A": 6, "C": 6, "G": 6, "T": 6},
        [50.0, 50.0, 50.0],
        [50.0, 50.0, 50.0],
        {8: 3},
        ["A", "C", "G", "T"],
        id="identical-sequences",
    ),
    pytest.param(
        ["ATCGXYZF", "TACG1234"],
        {"A": 2, "C": 2, "G": 2, "T": 2},
        [25.0, 25.0],
        [25.0, 25.0],
        {8: 2},
        ["A", "C", "G", "T"],
        id="non-nucleotide-characters",
    ),
    pytest.param(
        [LONG_A, LONG_T],
        {"A": 68, "T": 63},
        [0.0, 0.0],
        [100.0, 100.0],
        {63: 1, 68: 1},
        ["A"],
        id="long-sequences",
    ),
]


@pytest.mark.parametrize(
    "sequences, frequencies, gc, at, lengths, most_common", SCENARIOS
)
def test_scenarios(sequences, frequencies, gc, at, lengths, most_common):
    assert calculate_nucleotide_frequencies(sequences) == frequencies
    assert calculate_gc_content_for_all(sequences) == gc
    assert calculate_at_content_for_all(sequences) == at
    assert calculate_sequence_length_distribution(sequences) == lengths
    assert find_most_common_nucleotides(sequences) == most_common


@pytest.mark.parametrize(
    "func",
    [
        calculate_nucleotide_frequencies,
        calculate_gc_content_for_all,
        calculate_at_content_for_all,
        calculate_sequence_length_distribution,
        find_most_common_nucleotides,
    ],
)
def test_none_collection_is_rejected(func):
    with pytest.raises(InvalidArgumentError):
        func(None)


def test_bare_string_is_not_a_collection():
    with pytest.raises(InvalidArgumentError):
        calculate_nucleotide_frequencies("ATCG")


class TestFrequencies:
    def test_empty_collection(self):
        assert calculate_nucleotide_frequencies([]) == {}

    def test_lowercase_is_counted(self):
        assert calculate_nucleotide_frequencies(["atcg", "Gg"]) == {"A": 1, "C": 1, "G": 3, "T": 1}

    def test_none_entries_are_skipped(self):
        assert calculate_nucleotide_frequencies([None, "AA", None]) == {"A": 2}

    def test_keys_are_alphabetical(self):
        frequencies = calculate_nucleotide_frequencies(["TGCA"])
        assert list(frequencies) == ["A", "C", "G", "T"]

    def test_total_never_exceeds_total_length(self):
        sequences = ["ATCGN", "xxGC", "", "tt"]
        total = sum(calculate_nucleotide_frequencies(sequences).values())
        assert total < sum(len(s) for s in sequences)
        assert total == 8

    def test_total_equals_total_length_for_pure_nucleotides(self):
        sequences = ["ATCG", "gattaca", "", "CCGG"]
        total = sum(calculate_nucleotide_frequencies(sequences).values())
        assert total == sum(len(s) for s in sequences) == 15


class TestContent:
    def test_none_and_empty_yield_zero(self):
        assert calculate_gc_content_for_all([None]) == [0.0]
        assert calculate_gc_content_for_all([""]) == [0.0]
        assert calculate_at_content_for_all([None, ""]) == [0.0, 0.0]

    def test_full_precision_is_kept(self):
        assert calculate_gc_content_for_all(["GAAAAAA"]) == [100.0 / 7]
        assert calculate_gc_content_for_all(["GATTACA"])[0] == 28.571428571428573

    def test_case_insensitive(self):
        assert calculate_gc_content_for_all(["gcAT"]) == [50.0]

    def test_other_characters_count_towards_length(self):
        assert calculate_gc_content_for_all(["GNNN"]) == [25.0]

    def test_output_is_position_aligned(self):
        sequences = ["GG", None, "AT", ""]
        assert calculate_gc_content_for_all(sequences) == [100.0, 0.0, 0.0, 0.0]
        assert calculate_at_content_for_all(sequences) == [0.0, 0.0, 100.0, 0.0]

    @pytest.mark.parametrize("sequence", ["ATCG", "GATTACA", "ggcc", "ATNNGC", "X"])
    def test_gc_plus_at_is_at_most_hundred(self, sequence):
        gc = calculate_gc_content_for_all([sequence])[0]
        at = calculate_at_content_for_all([sequence])[0]
        if set(sequence.upper()) <= set("ACGT"):
            assert gc + at == pytest.approx(100.0)
        else:
            assert gc + at < 100.0


class TestLengthDistribution:
    def test_none_is_skipped_but_empty_counts(self):
        assert calculate_sequence_length_distribution([None]) == {}
        assert calculate_sequence_length_distribution([""]) == {0: 1}

    def test_keys_are_ascending(self):
        distribution = calculate_sequence_length_distribution(["AAAAAAA", "A", "AAA", "A"])
        assert list(distribution.items()) == [(1, 2), (3, 1), (7, 1)]


class TestMostCommon:
    def test_empty_when_nothing_counted(self):
        assert find_most_common_nucleotides([]) == []
        assert find_most_common_nucleotides(["", None, "XYZ"]) == []

    def test_single_winner(self):
        assert find_most_common_nucleotides(["GGGA"]) == ["G"]

    def test_every_member_has_the_maximum(self):
        sequences = ["ATTGCC", "cgTA"]
        frequencies = calculate_nucleotide_frequencies(sequences)
        most_common = find_most_common_nucleotides(sequences)
        top = max(frequencies.values())
        assert all(frequencies[base] == top for base in most_common)
        assert all(frequencies[base] < top for base in frequencies if base not in most_common)

    def test_no_state_between_calls(self):
        assert find_most_common_nucleotides(["AAA"]) == ["A"]
        assert find_most_common_nucleotides(["TT"]) == ["T"]
