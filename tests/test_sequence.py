"""Tests for alphabets and sequences."""

import pytest

from motifkit.exceptions import AlphabetError, InvalidSymbol, NoComplementDefined
from motifkit.sequence import DNA, PROTEIN, RNA, Alphabet, Sequence, as_text, shared_alphabet


class TestAlphabet:
    def test_membership(self):
        assert "A" in DNA
        assert "U" not in DNA
        assert "U" in RNA
        assert "AC" not in DNA

    def test_complement_is_involution(self):
        for alphabet in (DNA, RNA):
            for symbol in alphabet.symbols:
                assert alphabet.complement_of(alphabet.complement_of(symbol)) == symbol

    def test_protein_has_no_complement(self):
        assert not PROTEIN.has_complement
        with pytest.raises(NoComplementDefined) as excinfo:
            PROTEIN.complement_of("A")
        assert excinfo.value.alphabet == "protein"

    def test_rejects_duplicate_symbols(self):
        with pytest.raises(AlphabetError):
            Alphabet(name="bad", symbols="AAC")

    def test_rejects_partial_complement(self):
        with pytest.raises(AlphabetError):
            Alphabet(name="bad", symbols="ACG", complement={"A": "C", "C": "A"})

    def test_rejects_non_involutive_complement(self):
        with pytest.raises(AlphabetError):
            Alphabet(
                name="bad",
                symbols="ACG",
                complement={"A": "C", "C": "G", "G": "A"},
            )

    def test_complement_is_part_of_identity(self):
        paired = Alphabet(name="X", symbols="AT", complement={"A": "T", "T": "A"})
        unpaired = Alphabet(name="X", symbols="AT")
        assert paired != unpaired
        assert hash(paired) != hash(unpaired)
        assert paired == Alphabet(name="X", symbols="AT", complement={"T": "A", "A": "T"})
        assert len({paired, unpaired}) == 2

    def test_complement_is_read_only(self):
        with pytest.raises(TypeError):
            DNA.complement["A"] = "G"


class TestSequence:
    def test_construction_and_access(self):
        seq = Sequence("GATTACA")
        assert len(seq) == 7
        assert seq[0] == "G"
        assert seq[1:4] == Sequence("ATT")
        assert list(seq) == list("GATTACA")
        assert str(seq) == "GATTACA"

    def test_invalid_symbol_reports_position(self):
        with pytest.raises(InvalidSymbol) as excinfo:
            Sequence("ACGUA")
        assert excinfo.value.symbol == "U"
        assert excinfo.value.position == 3
        assert "position=3" in str(excinfo.value)

    def test_empty_sequence(self):
        assert len(Sequence("")) == 0

    def test_structural_equality(self):
        assert Sequence("ACGT") == Sequence("ACGT")
        assert Sequence("ACGT") != Sequence("ACGA")
        assert hash(Sequence("ACGT")) == hash(Sequence("ACGT"))
        assert len({Sequence("AC"), Sequence("AC")}) == 1

    def test_reverse_complement(self):
        assert Sequence("AAAACCCGGT").reverse_complement() == Sequence("ACCGGGTTTT")
        assert Sequence("AACG", RNA).reverse_complement() == Sequence("CGUU", RNA)

    def test_reverse_complement_requires_complement(self):
        with pytest.raises(NoComplementDefined):
            Sequence("MAMA", PROTEIN).reverse_complement()

    def test_counts(self):
        assert Sequence("ATTCCC").counts() == [1, 3, 0, 2]

    def test_as_text(self):
        assert as_text(Sequence("ACG")) == "ACG"
        assert as_text("ACG") == "ACG"

    def test_transcribe(self):
        rna = Sequence("GATGGAACTTGACTACGTAAATT").transcribe()
        assert rna == Sequence("GAUGGAACUUGACUACGUAAAUU", RNA)
        assert rna.alphabet == RNA

    def test_transcribe_requires_dna(self):
        with pytest.raises(AlphabetError):
            Sequence("ACGU", RNA).transcribe()


class TestSharedAlphabet:
    def test_same_alphabet(self):
        assert shared_alphabet([Sequence("AC"), Sequence("GT")]) == DNA

    def test_strings_carry_no_alphabet(self):
        assert shared_alphabet(["AC", "GU"]) is None
        assert shared_alphabet(["ACGU", Sequence("ACGU", RNA)]) == RNA

    def test_mixed_alphabets(self):
        with pytest.raises(AlphabetError) as excinfo:
            shared_alphabet([Sequence("ACGT"), Sequence("ACGU", RNA)])
        assert excinfo.value.alphabet == "RNA"
