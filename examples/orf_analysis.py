#!/usr/bin/env python3
"""
Example: ORF Analysis with codonkit

This example walks through the codonkit primitives:
- Reverse complementation, strict and IUPAC-aware
- Codon translation
- Six-frame coding region scanning
- Canonical ORF selection
- BLOSUM62 substitution scoring
"""

import sys
sys.path.insert(0, '..')

from codonkit.sequence import (
    reverse_complement,
    translate,
    protein_to_trigrams,
    mean_hydrophobicity,
)
from codonkit.orf import find_coding_regions, select_canonical_orfs, Strand
from codonkit.scoring import BLOSUM62, score, score_pair
from codonkit.io import FastaRecord, wrap


def demo_reverse_complement():
    """Demonstrate reverse complement."""
    print("\n" + "=" * 60)
    print("REVERSE COMPLEMENT")
    print("=" * 60)

    seq = "ATGCGATCGA"
    rc = reverse_complement(seq)

    print(f"\nOriginal:   5'-{seq}-3'")
    print(f"Rev Comp:   5'-{rc}-3'")

    ambiguous = "ACGRYKMN-acg"
    print(f"\nIUPAC-aware: {ambiguous} -> {reverse_complement(ambiguous)}")

    palindrome = "GAATTC"  # EcoRI site
    print(f"\nEcoRI site is palindromic: {palindrome == reverse_complement(palindrome)}")


def demo_translation():
    """Demonstrate DNA to protein translation."""
    print("\n" + "=" * 60)
    print("TRANSLATION")
    print("=" * 60)

    # GFP start
    dna = "ATGGTGAGCAAGGGCGAGGAGCTGTTCACCGGGGTGGTGCCCATCCTGGTCGAGCTGGACGGCGACGTAAACGGCCACAAGTTCAGCGTGTCCGGCGAGGGCGAGGGCGATGCCACCTACGGCAAGCTGACCCTGAAGTTCATCTGA"

    protein = translate(dna)
    print(f"\nDNA sequence ({len(dna)} bp), protein ({len(protein)} aa):")
    print(wrap(protein), end="")
    print(f"First residues: {protein_to_trigrams(protein[:5])}")
    print(f"Mean hydrophobicity: {mean_hydrophobicity(protein.rstrip('*')):.3f}")

    print(f"\nCodons with N translate to '?': {translate('ATGNNNTAA')}")


def demo_orf_finding():
    """Demonstrate six-frame ORF finding."""
    print("\n" + "=" * 60)
    print("ORF FINDING")
    print("=" * 60)

    seq = "NNNNATGAAACCCGGGTTTAAATGCCCAAAGGGTTTTGATCGATCGATG"
    print(f"\nSequence: {seq}")

    regions = find_coding_regions(seq)
    print(f"\nFound {len(regions)} coding regions in six frames")
    for region in regions[:5]:
        strand = "+" if region.strand is Strand.FORWARD else "-"
        stop = "stop" if region.terminated else "open"
        print(f"  {strand}{region.phase} {region.left}-{region.right} {stop}: {region.protein}")

    orfs = select_canonical_orfs(regions)
    print(f"\nCanonical ORFs (start to stop): {len(orfs)}")
    records = []
    for i, orf in enumerate(orfs, 1):
        strand = "+" if orf.is_forward else "-"
        records.append(FastaRecord(
            id=f"orf{i}",
            description=f"orf{i} {strand}{orf.phase} {orf.left}..{orf.right}",
            sequence=orf.protein,
        ))
    for record in records:
        print(record.to_fasta(), end="")


def demo_scoring():
    """Demonstrate BLOSUM62 substitution scores."""
    print("\n" + "=" * 60)
    print("SUBSTITUTION SCORING")
    print("=" * 60)

    for a, b in [("A", "A"), ("W", "A"), ("K", "R"), ("?", "?")]:
        print(f"  {a} -> {b}: {score(BLOSUM62, a, b)}")

    print(f"\nUngapped score MKTAYIAK vs MKPAYIAK: {score_pair(BLOSUM62, 'MKTAYIAK', 'MKPAYIAK')}")


def main():
    print("=" * 60)
    print("codonkit ORF Analysis Demo")
    print("=" * 60)

    demo_reverse_complement()
    demo_translation()
    demo_orf_finding()
    demo_scoring()

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
