"""
Symbolic amino acid representation.

The 20 standard residues, selenocysteine and the terminator form a closed
set of 22 values. Each carries a one-letter code, a trigram and, where
known, a hydrophobicity value.

Hydrophobicity uses the normalized consensus scale of
Eisenberg D., Schwarz E., Komarony M., Wall R.,
J. Mol. Biol. 179:125-142 (1984).
"""

from enum import Enum
from typing import Dict, NamedTuple, Optional

from codonkit.errors import InvalidAminoAcidError


class AminoAcidProperties(NamedTuple):
    """Attributes attached to each amino acid symbol."""
    trigram: str
    letter: str
    hydrophobicity: Optional[float]


class AminoAcid(Enum):
    """The 22 amino acid symbols, including selenocysteine and End."""
    Arg = "Arg"
    His = "His"
    Lys = "Lys"
    Asp = "Asp"
    Glu = "Glu"
    Ser = "Ser"
    Thr = "Thr"
    Asn = "Asn"
    Gln = "Gln"
    Cys = "Cys"
    Sec = "Sec"
    Gly = "Gly"
    Pro = "Pro"
    Ala = "Ala"
    Val = "Val"
    Ile = "Ile"
    Leu = "Leu"
    Met = "Met"
    Phe = "Phe"
    Tyr = "Tyr"
    Trp = "Trp"
    End = "End"

    @property
    def properties(self) -> AminoAcidProperties:
        return AMINO_ACID_PROPERTIES[self]

    @property
    def letter(self) -> str:
        return AMINO_ACID_PROPERTIES[self].letter

    @property
    def trigram(self) -> str:
        return AMINO_ACID_PROPERTIES[self].trigram

    @property
    def hydrophobicity(self) -> Optional[float]:
        return AMINO_ACID_PROPERTIES[self].hydrophobicity


AMINO_ACID_PROPERTIES: Dict[AminoAcid, AminoAcidProperties] = {
    AminoAcid.Ala: AminoAcidProperties("Ala", "A", 0.620),
    AminoAcid.Arg: AminoAcidProperties("Arg", "R", -2.530),
    AminoAcid.Asn: AminoAcidProperties("Asn", "N", -0.780),
    AminoAcid.Asp: AminoAcidProperties("Asp", "D", -0.900),
    AminoAcid.Cys: AminoAcidProperties("Cys", "C", 0.290),
    AminoAcid.Gln: AminoAcidProperties("Gln", "Q", -0.850),
    AminoAcid.Glu: AminoAcidProperties("Glu", "E", -0.740),
    AminoAcid.Gly: AminoAcidProperties("Gly", "G", 0.480),
    AminoAcid.His: AminoAcidProperties("His", "H", -0.400),
    AminoAcid.Ile: AminoAcidProperties("Ile", "I", 1.380),
    AminoAcid.Leu: AminoAcidProperties("Leu", "L", 1.060),
    AminoAcid.Lys: AminoAcidProperties("Lys", "K", -1.500),
    AminoAcid.Met: AminoAcidProperties("Met", "M", 0.640),
    AminoAcid.Phe: AminoAcidProperties("Phe", "F", 1.190),
    AminoAcid.Pro: AminoAcidProperties("Pro", "P", 0.120),
    AminoAcid.Ser: AminoAcidProperties("Ser", "S", -0.180),
    AminoAcid.Thr: AminoAcidProperties("Thr", "T", -0.050),
    AminoAcid.Trp: AminoAcidProperties("Trp", "W", 0.810),
    AminoAcid.Tyr: AminoAcidProperties("Tyr", "Y", 0.260),
    AminoAcid.Val: AminoAcidProperties("Val", "V", 1.080),
    # Not covered by the Eisenberg scale
    AminoAcid.Sec: AminoAcidProperties("Sec", "U", None),
    AminoAcid.End: AminoAcidProperties("End", "*", None),
}

_BY_LETTER = {props.letter: symbol for symbol, props in AMINO_ACID_PROPERTIES.items()}
_BY_TRIGRAM = {props.trigram: symbol for symbol, props in AMINO_ACID_PROPERTIES.items()}


def letter_to_symbol(letter: str) -> AminoAcid:
    """
    Convert a one-letter code to its symbol.

    Example:
        >>> letter_to_symbol("W")
        <AminoAcid.Trp: 'Trp'>
    """
    try:
        return _BY_LETTER[letter]
    except KeyError:
        raise InvalidAminoAcidError(letter) from None


def trigram_to_symbol(trigram: str) -> AminoAcid:
    """Convert a trigram such as "Trp" or "End" to its symbol."""
    try:
        return _BY_TRIGRAM[trigram]
    except KeyError:
        raise InvalidAminoAcidError(trigram) from None


def letter_to_trigram(letter: str) -> str:
    """
    Convert a one-letter code to a trigram.

    Example:
        >>> letter_to_trigram("W")
        'Trp'
        >>> letter_to_trigram("*")
        'End'
    """
    return letter_to_symbol(letter).trigram


def protein_to_trigrams(protein: str, separator: str = "-") -> str:
    """Render a protein as joined trigrams, e.g. "MK*" -> "Met-Lys-End"."""
    return separator.join(letter_to_trigram(letter) for letter in protein)


def mean_hydrophobicity(protein: str) -> float:
    """
    Average Eisenberg hydrophobicity over the residues that have one.

    Residues without a value (Sec, End) are skipped. Returns 0.0 when no
    residue contributes.

    Raises:
        InvalidAminoAcidError: If the protein contains an unknown letter,
            including the untranslatable marker '?'
    """
    values = [
        letter_to_symbol(letter).hydrophobicity
        for letter in protein
    ]
    values = [v for v in values if v is not None]
    if not values:
        return 0.0
    return sum(values) / len(values)
