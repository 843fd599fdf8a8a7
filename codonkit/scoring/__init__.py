"""
Substitution scoring for amino acids.

Provides the BLOSUM62 matrix, a parser for matblas-style score tables,
and residue-pair score lookups.
"""

from codonkit.scoring.matrix import (
    SubstitutionMatrix,
    parse_substitution_matrix,
    load_blosum62,
    score,
    score_pair,
    BLOSUM62,
    BLOSUM62_TEXT,
)

__all__ = [
    "SubstitutionMatrix",
    "parse_substitution_matrix",
    "load_blosum62",
    "score",
    "score_pair",
    "BLOSUM62",
    "BLOSUM62_TEXT",
]
