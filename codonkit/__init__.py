"""
codonkit: Nucleotide and protein sequence primitives for genomics tooling

This package provides tools for:
- Codon translation with the standard genetic code
- Strict and IUPAC-aware reverse complementation
- Six-frame open reading frame detection
- BLOSUM substitution scoring
- FASTA I/O for feeding sequences to the scanner

Built on top of NumPy for the substitution matrices.
"""

__version__ = "0.1.0"
__author__ = "codonkit Contributors"

from codonkit.errors import (
    CodonkitError,
    InvalidBaseError,
    InvalidAminoAcidError,
    ResidueNotFoundError,
    MatrixFormatError,
    DuplicateRecordError,
)

from codonkit.sequence import (
    is_valid_base,
    complement_base,
    reverse_complement,
    translate_codon,
    translate,
    AminoAcid,
    letter_to_symbol,
    trigram_to_symbol,
    letter_to_trigram,
)

from codonkit.orf import (
    CodingRegion,
    Strand,
    find_coding_regions,
    try_trim_to_first_start,
    select_canonical_orfs,
)

from codonkit.scoring import (
    SubstitutionMatrix,
    parse_substitution_matrix,
    score,
    BLOSUM62,
)

from codonkit.io import (
    read_fasta,
    write_fasta,
    load_reference,
    FastaRecord,
)

from codonkit.utils import ScanConfig

__all__ = [
    # Errors
    "CodonkitError",
    "InvalidBaseError",
    "InvalidAminoAcidError",
    "ResidueNotFoundError",
    "MatrixFormatError",
    "DuplicateRecordError",
    # Sequence primitives
    "is_valid_base",
    "complement_base",
    "reverse_complement",
    "translate_codon",
    "translate",
    "AminoAcid",
    "letter_to_symbol",
    "trigram_to_symbol",
    "letter_to_trigram",
    # ORFs
    "CodingRegion",
    "Strand",
    "find_coding_regions",
    "try_trim_to_first_start",
    "select_canonical_orfs",
    # Scoring
    "SubstitutionMatrix",
    "parse_substitution_matrix",
    "score",
    "BLOSUM62",
    # I/O
    "read_fasta",
    "write_fasta",
    "load_reference",
    "FastaRecord",
    # Config
    "ScanConfig",
]
