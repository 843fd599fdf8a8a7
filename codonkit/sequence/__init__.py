"""
Nucleotide and amino acid primitives.

This module provides functions for:
- Base classification and (reverse) complementation
- Codon translation with the standard genetic code
- Symbolic amino acids with trigrams and hydrophobicity
"""

from codonkit.sequence.bases import (
    is_valid_base,
    complement_base,
    reverse_complement,
    STRICT_BASES,
    LENIENT_BASES,
)

from codonkit.sequence.codons import (
    translate_codon,
    translate,
    CODON_TABLE,
    START_CODONS,
    STOP_CODONS,
)

from codonkit.sequence.amino_acids import (
    AminoAcid,
    AminoAcidProperties,
    AMINO_ACID_PROPERTIES,
    letter_to_symbol,
    trigram_to_symbol,
    letter_to_trigram,
    protein_to_trigrams,
    mean_hydrophobicity,
)

__all__ = [
    "is_valid_base",
    "complement_base",
    "reverse_complement",
    "STRICT_BASES",
    "LENIENT_BASES",
    "translate_codon",
    "translate",
    "CODON_TABLE",
    "START_CODONS",
    "STOP_CODONS",
    "AminoAcid",
    "AminoAcidProperties",
    "AMINO_ACID_PROPERTIES",
    "letter_to_symbol",
    "trigram_to_symbol",
    "letter_to_trigram",
    "protein_to_trigrams",
    "mean_hydrophobicity",
]
