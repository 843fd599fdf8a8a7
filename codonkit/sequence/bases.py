"""
Nucleotide base classification and complementation.

Two modes are supported throughout:
- strict: only the unambiguous bases A, C, G, T (either case)
- lenient: additionally the IUPAC ambiguity codes, plus a few
  whitespace/gap characters that survive reverse complementation
"""

from codonkit.errors import InvalidBaseError

STRICT_BASES = frozenset("ACGTacgt")

IUPAC_AMBIGUITY_CODES = "NRYSWKMBDHV"

LENIENT_BASES = STRICT_BASES | frozenset(
    IUPAC_AMBIGUITY_CODES + IUPAC_AMBIGUITY_CODES.lower()
)

# Strict complements always come back upper case
STRICT_COMPLEMENT = {
    "A": "T", "T": "A", "G": "C", "C": "G",
    "a": "T", "t": "A", "g": "C", "c": "G",
    "N": "N", "n": "N",
}

# IUPAC pairing, case preserved
DNA_COMPLEMENT = {
    "A": "T", "T": "A", "G": "C", "C": "G",
    "a": "t", "t": "a", "g": "c", "c": "g",
    "N": "N", "n": "n",
    "R": "Y", "Y": "R", "S": "S", "W": "W",
    "K": "M", "M": "K", "B": "V", "V": "B",
    "D": "H", "H": "D",
    "r": "y", "y": "r", "s": "s", "w": "w",
    "k": "m", "m": "k", "b": "v", "v": "b",
    "d": "h", "h": "d",
    # whitespace and gaps pass through
    " ": " ", "\n": " ", "\r": "\r", "-": "-",
}


def is_valid_base(base: str, strict: bool = True) -> bool:
    """
    Check whether a character is a DNA base.

    Args:
        base: Single character
        strict: If True, accept only A/C/G/T; otherwise also IUPAC codes

    Returns:
        True if the character is accepted under the given mode

    Example:
        >>> is_valid_base("g")
        True
        >>> is_valid_base("R")
        False
        >>> is_valid_base("R", strict=False)
        True
    """
    if strict:
        return base in STRICT_BASES
    return base in LENIENT_BASES


def complement_base(base: str, strict: bool = True) -> str:
    """
    Complement a single base.

    Args:
        base: Single character
        strict: If True, only A/C/G/T/N are accepted and the result is
            upper case. Otherwise every IUPAC code is accepted, case is
            preserved, and ' ', '\\r', '-' pass through ('\\n' becomes ' ').

    Returns:
        The complementary base

    Raises:
        InvalidBaseError: If the character is not accepted in this mode
    """
    table = STRICT_COMPLEMENT if strict else DNA_COMPLEMENT
    try:
        return table[base]
    except KeyError:
        raise InvalidBaseError(base, strict=strict, context="complement_base") from None


def reverse_complement(sequence: str, strict: bool = False) -> str:
    """
    Get the reverse complement of a DNA sequence.

    Args:
        sequence: DNA sequence string
        strict: Complement mode passed to complement_base

    Returns:
        Reverse complement sequence, same length as the input

    Example:
        >>> reverse_complement("ATGC")
        'GCAT'
        >>> reverse_complement("AACR")
        'YGTT'
    """
    complemented = "".join(complement_base(base, strict) for base in sequence)
    return complemented[::-1]
