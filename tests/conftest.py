"""Shared test fixtures for codonkit tests."""

import random

import pytest


# Standard genetic code, written out codon by codon
REFERENCE_CODE = {
    "TTT": "F", "TTC": "F", "TTA": "L", "TTG": "L",
    "TCT": "S", "TCC": "S", "TCA": "S", "TCG": "S",
    "TAT": "Y", "TAC": "Y", "TAA": "*", "TAG": "*",
    "TGT": "C", "TGC": "C", "TGA": "*", "TGG": "W",
    "CTT": "L", "CTC": "L", "CTA": "L", "CTG": "L",
    "CCT": "P", "CCC": "P", "CCA": "P", "CCG": "P",
    "CAT": "H", "CAC": "H", "CAA": "Q", "CAG": "Q",
    "CGT": "R", "CGC": "R", "CGA": "R", "CGG": "R",
    "ATT": "I", "ATC": "I", "ATA": "I", "ATG": "M",
    "ACT": "T", "ACC": "T", "ACA": "T", "ACG": "T",
    "AAT": "N", "AAC": "N", "AAA": "K", "AAG": "K",
    "AGT": "S", "AGC": "S", "AGA": "R", "AGG": "R",
    "GTT": "V", "GTC": "V", "GTA": "V", "GTG": "V",
    "GCT": "A", "GCC": "A", "GCA": "A", "GCG": "A",
    "GAT": "D", "GAC": "D", "GAA": "E", "GAG": "E",
    "GGT": "G", "GGC": "G", "GGA": "G", "GGG": "G",
}


@pytest.fixture
def reference_code():
    """Codon -> amino acid letter for all 64 codons."""
    return REFERENCE_CODE


@pytest.fixture
def random_sequences():
    """Reproducible random DNA sequences of varied length, some with N."""
    rng = random.Random(1234)
    sequences = []
    for length in list(range(0, 12)) + [50, 97, 150, 301]:
        alphabet = "ACGT" if length % 2 else "ACGTN"
        sequences.append("".join(rng.choice(alphabet) for _ in range(length)))
    return sequences


@pytest.fixture
def orf_sequence():
    """A short sequence with a forward ORF at 2..7 (ATG AAA TAG)."""
    return "CCATGAAATAGGG"
