"""
Amino acid substitution matrices.

Parses whitespace-separated score tables in the NCBI/matblas layout and
looks up substitution scores. BLOSUM62 is parsed once at import and shared
read-only.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Tuple

import numpy as np

from codonkit.errors import MatrixFormatError, ResidueNotFoundError
from codonkit.utils.config import STOP_RESIDUE, UNKNOWN_RESIDUE
from codonkit.utils.logging import get_logger

logger = get_logger("scoring")

BLOSUM62_TEXT = """#
#  Matrix made by matblas from blosum62.iij
#  * column uses minimum score
#  BLOSUM Clustered Scoring Matrix in 1/2 Bit Units
#  Blocks Database = /data/blocks_5.0/blocks.dat
#  Cluster Percentage: >= 62
#  Entropy =   0.6979, Expected =  -0.5209
A  R  N  D  C  Q  E  G  H  I  L  K  M  F  P  S  T  W  Y  V  B  Z  X  *
A  4 -1 -2 -2  0 -1 -1  0 -2 -1 -1 -1 -1 -2 -1  1  0 -3 -2  0 -2 -1  0 -4
R -1  5  0 -2 -3  1  0 -2  0 -3 -2  2 -1 -3 -2 -1 -1 -3 -2 -3 -1  0 -1 -4
N -2  0  6  1 -3  0  0  0  1 -3 -3  0 -2 -3 -2  1  0 -4 -2 -3  3  0 -1 -4
D -2 -2  1  6 -3  0  2 -1 -1 -3 -4 -1 -3 -3 -1  0 -1 -4 -3 -3  4  1 -1 -4
C  0 -3 -3 -3  9 -3 -4 -3 -3 -1 -1 -3 -1 -2 -3 -1 -1 -2 -2 -1 -3 -3 -2 -4
Q -1  1  0  0 -3  5  2 -2  0 -3 -2  1  0 -3 -1  0 -1 -2 -1 -2  0  3 -1 -4
E -1  0  0  2 -4  2  5 -2  0 -3 -3  1 -2 -3 -1  0 -1 -3 -2 -2  1  4 -1 -4
G  0 -2  0 -1 -3 -2 -2  6 -2 -4 -4 -2 -3 -3 -2  0 -2 -2 -3 -3 -1 -2 -1 -4
H -2  0  1 -1 -3  0  0 -2  8 -3 -3 -1 -2 -1 -2 -1 -2 -2  2 -3  0  0 -1 -4
I -1 -3 -3 -3 -1 -3 -3 -4 -3  4  2 -3  1  0 -3 -2 -1 -3 -1  3 -3 -3 -1 -4
L -1 -2 -3 -4 -1 -2 -3 -4 -3  2  4 -2  2  0 -3 -2 -1 -2 -1  1 -4 -3 -1 -4
K -1  2  0 -1 -3  1  1 -2 -1 -3 -2  5 -1 -3 -1  0 -1 -3 -2 -2  0  1 -1 -4
M -1 -1 -2 -3 -1  0 -2 -3 -2  1  2 -1  5  0 -2 -1 -1 -1 -1  1 -3 -1 -1 -4
F -2 -3 -3 -3 -2 -3 -3 -3 -1  0  0 -3  0  6 -4 -2 -2  1  3 -1 -3 -3 -1 -4
P -1 -2 -2 -1 -3 -1 -1 -2 -2 -3 -3 -1 -2 -4  7 -1 -1 -4 -3 -2 -2 -1 -2 -4
S  1 -1  1  0 -1  0  0  0 -1 -2 -2  0 -1 -2 -1  4  1 -3 -2 -2  0  0  0 -4
T  0 -1  0 -1 -1 -1 -1 -2 -2 -1 -1 -1 -1 -2 -1  1  5 -2 -2  0 -1 -1  0 -4
W -3 -3 -4 -4 -2 -2 -3 -2 -2 -3 -2 -3 -1  1 -4 -3 -2 11  2 -3 -4 -3 -2 -4
Y -2 -2 -2 -3 -2 -1 -2 -3  2 -1 -1 -2 -1  3 -3 -2 -2  2  7 -1 -3 -2 -1 -4
V  0 -3 -3 -3 -1 -2 -2 -3 -3  3  1 -2  1 -1 -2 -2  0 -3 -1  4 -3 -2 -1 -4
B -2 -1  3  4 -3  0  1 -1  0 -3 -4  0 -3 -3 -2  0 -1 -4 -3 -3  4  1 -1 -4
Z -1  0  0  1 -3  3  4 -2  0 -3 -3  1 -1 -3 -1  0 -1 -3 -2 -2  1  4 -1 -4
X  0 -1 -1 -1 -2 -1 -1 -1 -1 -1 -1 -1 -1 -1 -2  0  0 -2 -1 -1 -1 -1 -1 -4
* -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4  1
"""


@dataclass(frozen=True, eq=False)
class SubstitutionMatrix:
    """
    A square substitution score table.

    Attributes:
        alphabet: Residue codes labelling rows and columns, in order.
            Any sequence is accepted and stored as a tuple.
        matrix: Integer scores, shape (len(alphabet), len(alphabet)).
            Nested lists or arrays are accepted; a read-only int32 copy
            is stored.
    """
    alphabet: Tuple[str, ...]
    matrix: np.ndarray

    def __post_init__(self):
        # Own a private copy so the caller's array stays writeable
        object.__setattr__(self, "alphabet", tuple(self.alphabet))
        try:
            matrix = np.array(self.matrix, dtype=np.int32)
        except (TypeError, ValueError) as exc:
            raise MatrixFormatError(f"Matrix is not an integer table: {exc}") from exc
        object.__setattr__(self, "matrix", matrix)

        n = len(self.alphabet)
        if self.matrix.shape != (n, n):
            raise MatrixFormatError(
                f"Matrix shape {self.matrix.shape} does not match alphabet of {n}"
            )
        self.matrix.flags.writeable = False

    @property
    def index(self) -> Dict[str, int]:
        return _alphabet_index(self.alphabet)

    def score(self, from_residue: str, to_residue: str) -> int:
        return score(self, from_residue, to_residue)


@lru_cache(maxsize=None)
def _alphabet_index(alphabet: Tuple[str, ...]) -> Dict[str, int]:
    return {code: i for i, code in enumerate(alphabet)}


def parse_substitution_matrix(text: str) -> SubstitutionMatrix:
    """
    Parse a substitution matrix table.

    The table has a header line of residue codes followed by one row per
    code; each row starts with its code and then lists the integer
    scores. Lines starting with '#' and blank lines are skipped.

    Args:
        text: Table contents

    Returns:
        Parsed SubstitutionMatrix

    Raises:
        MatrixFormatError: If the header, a row label, a row length or a
            score is malformed
    """
    lines = [
        line for line in text.splitlines()
        if line.strip() and not line.startswith("#")
    ]
    if not lines:
        raise MatrixFormatError("No header line found")

    alphabet = tuple(lines[0].split())
    rows = lines[1:]
    if len(rows) != len(alphabet):
        raise MatrixFormatError(
            f"Expected {len(alphabet)} rows, found {len(rows)}"
        )

    matrix = np.zeros((len(alphabet), len(alphabet)), dtype=np.int32)
    for j, (code, row) in enumerate(zip(alphabet, rows)):
        cols = row.split()
        if cols[0] != code:
            raise MatrixFormatError(
                f"Row {j} is labelled {cols[0]!r}, expected {code!r}"
            )
        values = cols[1:]
        if len(values) != len(alphabet):
            raise MatrixFormatError(
                f"Row {code!r} has {len(values)} scores, expected {len(alphabet)}"
            )
        try:
            matrix[j, :] = [int(v) for v in values]
        except ValueError as exc:
            raise MatrixFormatError(f"Non-integer score in row {code!r}: {exc}") from exc

    logger.debug("Parsed %dx%d substitution matrix", len(alphabet), len(alphabet))
    return SubstitutionMatrix(alphabet=alphabet, matrix=matrix)


@lru_cache(maxsize=1)
def load_blosum62() -> SubstitutionMatrix:
    """Return the shared BLOSUM62 matrix, parsing it on first use."""
    return parse_substitution_matrix(BLOSUM62_TEXT)


BLOSUM62 = load_blosum62()


def _normalize(residue: str) -> str:
    return STOP_RESIDUE if residue == UNKNOWN_RESIDUE else residue


def score(matrix: SubstitutionMatrix, from_residue: str, to_residue: str) -> int:
    """
    Look up the score for substituting one residue with another.

    The untranslatable marker '?' is scored as '*' on either side.

    Args:
        matrix: Substitution matrix
        from_residue: Original residue code
        to_residue: Replacement residue code

    Returns:
        Integer substitution score

    Raises:
        ResidueNotFoundError: If a residue is not in the matrix alphabet

    Example:
        >>> score(BLOSUM62, "W", "A")
        -3
        >>> score(BLOSUM62, "?", "?")
        1
    """
    index = matrix.index
    alphabet = "".join(matrix.alphabet)
    frm = _normalize(from_residue)
    to = _normalize(to_residue)
    if frm not in index:
        raise ResidueNotFoundError(frm, alphabet)
    if to not in index:
        raise ResidueNotFoundError(to, alphabet)
    return int(matrix.matrix[index[frm], index[to]])


def score_pair(matrix: SubstitutionMatrix, protein_a: str, protein_b: str) -> int:
    """
    Sum substitution scores position by position over two proteins.

    This is an ungapped comparison; both proteins must have the same length.

    Raises:
        ValueError: If the proteins differ in length
        ResidueNotFoundError: If a residue is not in the matrix alphabet
    """
    if len(protein_a) != len(protein_b):
        raise ValueError("Proteins must be of equal length")

    return sum(score(matrix, a, b) for a, b in zip(protein_a, protein_b))
