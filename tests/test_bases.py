"""Tests for base classification and complementation."""

import random

import pytest

from codonkit.errors import InvalidBaseError
from codonkit.sequence import complement_base, is_valid_base, reverse_complement

LENIENT_CHARS = "ACGTNRYSWKMBDHVacgtnryswkmbdhv"


class TestIsValidBase:
    """is_valid_base unit tests."""

    @pytest.mark.parametrize("base", list("ACGTacgt"))
    def test_strict_accepts_unambiguous(self, base):
        assert is_valid_base(base, strict=True)
        assert is_valid_base(base, strict=False)

    @pytest.mark.parametrize("base", list("NRYSWKMBDHVnryswkmbdhv"))
    def test_ambiguity_codes_lenient_only(self, base):
        assert not is_valid_base(base, strict=True)
        assert is_valid_base(base, strict=False)

    @pytest.mark.parametrize("base", ["U", "X", "-", " ", "", "AT"])
    def test_rejects_other(self, base):
        assert not is_valid_base(base, strict=True)
        assert not is_valid_base(base, strict=False)


class TestComplementBase:
    """complement_base unit tests."""

    def test_strict(self):
        assert [complement_base(b) for b in "ACGTN"] == list("TGCAN")

    def test_strict_upper_cases(self):
        assert [complement_base(b) for b in "acgtn"] == list("TGCAN")

    @pytest.mark.parametrize("base", ["R", "y", "-", " ", "U"])
    def test_strict_rejects(self, base):
        with pytest.raises(InvalidBaseError) as excinfo:
            complement_base(base, strict=True)
        assert excinfo.value.base == base
        assert excinfo.value.strict is True

    def test_lenient_iupac_pairs(self):
        pairs = {"R": "Y", "K": "M", "B": "V", "D": "H"}
        for a, b in pairs.items():
            assert complement_base(a, strict=False) == b
            assert complement_base(b, strict=False) == a
            assert complement_base(a.lower(), strict=False) == b.lower()

    def test_lenient_self_complementary(self):
        for base in "NSWnsw":
            assert complement_base(base, strict=False) == base

    def test_lenient_passthrough(self):
        assert complement_base(" ", strict=False) == " "
        assert complement_base("\n", strict=False) == " "
        assert complement_base("\r", strict=False) == "\r"
        assert complement_base("-", strict=False) == "-"

    @pytest.mark.parametrize("base", ["X", "U", "*", "\t"])
    def test_lenient_rejects(self, base):
        with pytest.raises(InvalidBaseError):
            complement_base(base, strict=False)


class TestReverseComplement:
    """reverse_complement unit tests."""

    def test_example(self):
        assert reverse_complement("ATGC") == "GCAT"

    def test_palindrome(self):
        assert reverse_complement("ACGT") == "ACGT"

    def test_empty(self):
        assert reverse_complement("") == ""

    def test_ambiguity_and_gaps(self):
        assert reverse_complement("AACR") == "YGTT"
        assert reverse_complement("ac-g") == "c-gt"

    def test_length_preserved(self, random_sequences):
        for seq in random_sequences:
            assert len(reverse_complement(seq)) == len(seq)

    def test_involution(self, random_sequences):
        samples = random_sequences + [LENIENT_CHARS, LENIENT_CHARS + " -\r"]
        for seq in samples:
            assert reverse_complement(reverse_complement(seq)) == seq

    def test_involution_random_lenient(self):
        """Random mixed-case strings of every lenient character round trip."""
        alphabet = LENIENT_CHARS + "- \r"
        rng = random.Random(7)
        for _ in range(200):
            seq = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 60)))
            assert reverse_complement(reverse_complement(seq)) == seq

    def test_strict_mode(self):
        assert reverse_complement("acgN", strict=True) == "NCGT"
        with pytest.raises(InvalidBaseError):
            reverse_complement("ACR", strict=True)
