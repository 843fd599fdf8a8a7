"""
Codon translation using the standard genetic code.

The table is stored as a single 64-character string indexed by the
2-bit codes of the three bases (T=0, C=1, A=2, G=3).
"""

from codonkit.errors import InvalidBaseError
from codonkit.utils.config import UNKNOWN_RESIDUE

# Standard genetic code, TAA/TAG/TGA -> '*'
CODON_TABLE = "FFLLSSSSYY**CC*WLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG"

BASE_INDEX = {
    "T": 0, "C": 1, "A": 2, "G": 3,
    "t": 0, "c": 1, "a": 2, "g": 3,
}

START_CODONS = {"ATG"}
STOP_CODONS = {"TAA", "TAG", "TGA"}


def _base_index(base: str) -> int:
    try:
        return BASE_INDEX[base]
    except KeyError:
        raise InvalidBaseError(base, strict=True, context="translate_codon") from None


def translate_codon(codon: str) -> str:
    """
    Translate a single codon to an amino acid letter.

    Args:
        codon: Exactly three bases (either case)

    Returns:
        Amino acid letter, '*' for stop, '?' if any base is N

    Raises:
        ValueError: If the codon is not three characters long
        InvalidBaseError: If a base is not A/C/G/T/N

    Example:
        >>> translate_codon("ATG")
        'M'
        >>> translate_codon("tga")
        '*'
        >>> translate_codon("ANG")
        '?'
    """
    if len(codon) != 3:
        raise ValueError(f"Codon must be 3 bases, got {codon!r}")

    if any(base in "Nn" for base in codon):
        return UNKNOWN_RESIDUE

    index = _base_index(codon[0]) * 16 + _base_index(codon[1]) * 4 + _base_index(codon[2])
    return CODON_TABLE[index]


def translate(sequence: str) -> str:
    """
    Translate a DNA sequence to protein.

    Codons are read from offset 0 in non-overlapping windows; a trailing
    partial codon (1 or 2 bases) is dropped. Stop codons are kept as '*'.

    Args:
        sequence: DNA sequence

    Returns:
        Amino acid sequence of length len(sequence) // 3

    Example:
        >>> translate("ATGGCC")
        'MA'
        >>> translate("ATGAAATAGC")
        'MK*'
    """
    return "".join(
        translate_codon(sequence[i:i + 3])
        for i in range(0, len(sequence) - 2, 3)
    )
