"""Tests for substitution matrices and score lookups."""

import numpy as np
import pytest

from codonkit.errors import MatrixFormatError, ResidueNotFoundError
from codonkit.scoring import (
    SubstitutionMatrix,
    BLOSUM62,
    BLOSUM62_TEXT,
    load_blosum62,
    parse_substitution_matrix,
    score,
    score_pair,
)

SMALL_TABLE = """# toy matrix
A  B  *
A  2 -1 -3
B -1  3 -3
* -3 -3  1
"""


class TestBlosum62:
    """Lookups against the bundled BLOSUM62 matrix."""

    def test_alphabet(self):
        assert "".join(BLOSUM62.alphabet) == "ARNDCQEGHILKMFPSTWYVBZX*"
        assert BLOSUM62.matrix.shape == (24, 24)

    def test_examples(self):
        assert score(BLOSUM62, "A", "A") == 4
        assert score(BLOSUM62, "W", "A") == -3
        assert score(BLOSUM62, "W", "W") == 11
        assert score(BLOSUM62, "C", "C") == 9

    def test_unknown_residue_is_wildcard(self):
        assert score(BLOSUM62, "?", "?") == 1
        assert score(BLOSUM62, "?", "A") == -4
        assert score(BLOSUM62, "A", "?") == -4
        assert score(BLOSUM62, "?", "*") == 1

    def test_returns_python_int(self):
        assert type(score(BLOSUM62, "A", "R")) is int

    def test_symmetric(self):
        assert np.array_equal(BLOSUM62.matrix, BLOSUM62.matrix.T)

    def test_method_form(self):
        assert BLOSUM62.score("K", "R") == score(BLOSUM62, "K", "R") == 2

    @pytest.mark.parametrize("pair", [("J", "A"), ("A", "J"), ("a", "A"), ("", "A")])
    def test_residue_not_found(self, pair):
        with pytest.raises(ResidueNotFoundError) as excinfo:
            score(BLOSUM62, *pair)
        assert excinfo.value.residue in pair

    def test_residue_not_found_is_key_error(self):
        with pytest.raises(KeyError):
            score(BLOSUM62, "O", "A")

    def test_read_only(self):
        with pytest.raises(ValueError):
            BLOSUM62.matrix[0, 0] = 100
        assert score(BLOSUM62, "A", "A") == 4

    def test_loaded_once(self):
        assert load_blosum62() is BLOSUM62
        assert load_blosum62() is load_blosum62()


class TestScorePair:
    """score_pair unit tests."""

    def test_sum(self):
        assert score_pair(BLOSUM62, "MK", "MK") == 10
        assert score_pair(BLOSUM62, "MKT", "MRT") == 12
        assert score_pair(BLOSUM62, "", "") == 0

    def test_unknown_positions(self):
        assert score_pair(BLOSUM62, "M?", "M?") == 6

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="equal length"):
            score_pair(BLOSUM62, "MK", "M")


class TestParseSubstitutionMatrix:
    """parse_substitution_matrix unit tests."""

    def test_small_table(self):
        matrix = parse_substitution_matrix(SMALL_TABLE)
        assert matrix.alphabet == ("A", "B", "*")
        assert score(matrix, "B", "B") == 3
        assert score(matrix, "?", "B") == -3
        assert score(matrix, "?", "?") == 1

    def test_missing_wildcard(self):
        matrix = parse_substitution_matrix("A B\nA 1 0\nB 0 1\n")
        with pytest.raises(ResidueNotFoundError) as excinfo:
            score(matrix, "?", "A")
        assert excinfo.value.residue == "*"

    def test_round_trip_of_bundled_text(self):
        reparsed = parse_substitution_matrix(BLOSUM62_TEXT)
        assert reparsed.alphabet == BLOSUM62.alphabet
        assert np.array_equal(reparsed.matrix, BLOSUM62.matrix)

    def test_empty(self):
        with pytest.raises(MatrixFormatError, match="header"):
            parse_substitution_matrix("# only comments\n")

    def test_missing_row(self):
        with pytest.raises(MatrixFormatError, match="rows"):
            parse_substitution_matrix("A B\nA 1 0\n")

    def test_wrong_label(self):
        with pytest.raises(MatrixFormatError, match="labelled"):
            parse_substitution_matrix("A B\nA 1 0\nC 0 1\n")

    def test_wrong_width(self):
        with pytest.raises(MatrixFormatError, match="scores"):
            parse_substitution_matrix("A B\nA 1 0\nB 0\n")

    def test_non_integer(self):
        with pytest.raises(MatrixFormatError, match="Non-integer"):
            parse_substitution_matrix("A B\nA 1 0\nB 0 x\n")


class TestSubstitutionMatrix:
    """Building SubstitutionMatrix directly from plain data."""

    def test_list_alphabet(self):
        matrix = SubstitutionMatrix(alphabet=["A", "*"], matrix=np.array([[4, -4], [-4, 1]]))
        assert matrix.alphabet == ("A", "*")
        assert score(matrix, "?", "?") == 1
        assert score(matrix, "A", "?") == -4

    def test_nested_list_matrix(self):
        matrix = SubstitutionMatrix(alphabet=("A", "*"), matrix=[[4, -4], [-4, 1]])
        assert matrix.matrix.shape == (2, 2)
        assert score(matrix, "A", "A") == 4

    def test_caller_array_left_writeable(self):
        arr = np.array([[4, -4], [-4, 1]])
        matrix = SubstitutionMatrix(alphabet=("A", "*"), matrix=arr)
        arr[0, 0] = 100
        assert score(matrix, "A", "A") == 4
        with pytest.raises(ValueError):
            matrix.matrix[0, 0] = 100

    def test_shape_mismatch(self):
        with pytest.raises(MatrixFormatError, match="shape"):
            SubstitutionMatrix(alphabet=["A", "B", "*"], matrix=[[1, 0], [0, 1]])

    def test_non_integer_cells(self):
        with pytest.raises(MatrixFormatError, match="integer"):
            SubstitutionMatrix(alphabet=["A", "*"], matrix=[["x", 0], [0, 1]])
