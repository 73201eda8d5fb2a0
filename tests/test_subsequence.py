"""Tests for the longest common subsequence and spliced motifs."""

import pytest

from motifkit.exceptions import AlphabetError
from motifkit.matching import find_subsequence_indices, lcs_length, longest_common_subsequence
from motifkit.sequence import RNA, Sequence


def is_subsequence(candidate: str, text: str) -> bool:
    remaining = iter(text)
    return all(symbol in remaining for symbol in candidate)


class TestLongestCommonSubsequence:
    def test_rosalind_sample(self):
        a, b = "AACCTTGG", "ACACTGTGA"
        result = longest_common_subsequence(a, b)
        assert len(result) == 6
        assert is_subsequence(result, a)
        assert is_subsequence(result, b)

    def test_no_common_subsequence(self):
        assert longest_common_subsequence("ACAA", "TTTTTGGGGG") == ""

    @pytest.mark.parametrize("a, b", [("", ""), ("", "ACGT"), ("ACGT", "")])
    def test_empty_inputs(self, a, b):
        assert longest_common_subsequence(a, b) == ""

    def test_identity(self):
        assert longest_common_subsequence("GATTACA", "GATTACA") == "GATTACA"

    def test_tie_prefers_dropping_from_first(self):
        # Both "A" and "C" are optimal; moving up first keeps b's trailing A
        assert longest_common_subsequence("AC", "CA") == "A"

    @pytest.mark.parametrize(
        "a, b",
        [
            ("AACCTTGG", "ACACTGTGA"),
            ("GATTACA", "TAGACCA"),
            ("ACGTTGCA", "TGCA"),
            ("AAAA", "AA"),
        ],
    )
    def test_length_is_symmetric(self, a, b):
        forward = longest_common_subsequence(a, b)
        backward = longest_common_subsequence(b, a)
        assert len(forward) == len(backward)
        assert is_subsequence(forward, a) and is_subsequence(forward, b)

    def test_accepts_sequences(self):
        result = longest_common_subsequence(Sequence("ACGT"), Sequence("AGT"))
        assert result == "AGT"


class TestLcsLength:
    @pytest.mark.parametrize(
        "a, b",
        [
            ("AACCTTGG", "ACACTGTGA"),
            ("ACAA", "TTTTTGGGGG"),
            ("", "ACGT"),
            ("GATTACA", "TAGACCA"),
        ],
    )
    def test_matches_witness_length(self, a, b):
        assert lcs_length(a, b) == len(longest_common_subsequence(a, b))
        assert lcs_length(a, b) == lcs_length(b, a)

    def test_rosalind_sample(self):
        assert lcs_length("AACCTTGG", "ACACTGTGA") == 6


class TestFindSubsequenceIndices:
    def test_rosalind_sample(self):
        assert find_subsequence_indices("ACGTACGTGACG", "GTA") == [2, 3, 4]

    def test_not_a_subsequence(self):
        assert find_subsequence_indices("ACGT", "TA") is None

    def test_empty_motif(self):
        assert find_subsequence_indices("ACGT", "") == []

    def test_indices_spell_motif(self):
        text, motif = "GATTACAGATTACA", "GTCGA"
        indices = find_subsequence_indices(text, motif)
        assert indices == sorted(set(indices))
        assert "".join(text[i] for i in indices) == motif


class TestAlphabetMismatch:
    def test_lcs_rejects_mixed_alphabets(self):
        with pytest.raises(AlphabetError):
            longest_common_subsequence(Sequence("ACGT"), Sequence("ACGU", RNA))

    def test_lcs_length_rejects_mixed_alphabets(self):
        with pytest.raises(AlphabetError):
            lcs_length(Sequence("ACGT"), Sequence("ACGU", RNA))

    def test_spliced_motif_rejects_mixed_alphabets(self):
        with pytest.raises(AlphabetError):
            find_subsequence_indices(Sequence("ACGT"), Sequence("AC", RNA))

    def test_plain_strings_are_unchecked(self):
        assert longest_common_subsequence("ACGT", Sequence("ACGU", RNA)) == "ACG"
