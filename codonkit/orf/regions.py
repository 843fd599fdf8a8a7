"""
Coding regions found by the six-frame scanner.

A CodingRegion is an immutable span of codons read in one frame. Its
coordinates always refer to the original (forward) input sequence, even
when it was read on the reverse strand.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from codonkit.utils.config import ScanConfig, START_RESIDUE


class Strand(Enum):
    """Reading direction of a frame."""
    FORWARD = "+"
    REVERSE = "-"


@dataclass(frozen=True)
class CodingRegion:
    """
    A stop-delimited (or sequence-end bounded) stretch of one reading frame.

    Attributes:
        strand: Strand the region was read on
        left: 0-based inclusive start in the original sequence
        right: 0-based inclusive end in the original sequence. For a
            zero-length region this is left - 1, so its endpoints may fall
            just outside [0, len(sequence)): right == -1 for a forward stop
            at position 0, left == len(sequence) for a reverse stop at the
            3' end.
        transcript: Nucleotides in reading direction (reverse complemented
            for the reverse strand), excluding any stop codon
        protein: Translation of transcript
        terminated: True if the region ended at an in-frame stop codon
        phase: Frame phase (0, 1 or 2) the region was read in
    """
    strand: Strand
    left: int
    right: int
    transcript: str
    protein: str
    terminated: bool
    phase: int = 0

    def __len__(self) -> int:
        return len(self.transcript)

    @property
    def is_forward(self) -> bool:
        return self.strand is Strand.FORWARD

    def try_trim_to_first_start(self, start: str = START_RESIDUE) -> Optional["CodingRegion"]:
        """
        Trim the region so it begins at its first start residue.

        The 5' end moves toward the 3' end by three nucleotides per dropped
        residue: left for forward regions, right for reverse ones.

        Args:
            start: Start residue letter

        Returns:
            The trimmed region, or None if the protein has no start residue
        """
        offset = self.protein.find(start)
        if offset < 0:
            return None
        shift = 3 * offset
        return replace(
            self,
            left=self.left + shift if self.is_forward else self.left,
            right=self.right if self.is_forward else self.right - shift,
            transcript=self.transcript[shift:],
            protein=self.protein[offset:],
        )


def region_sort_key(region: CodingRegion) -> Tuple[int, int, int, int]:
    """
    Ordering key: longest protein first, then forward before reverse,
    then phase, then left coordinate.
    """
    return (
        -len(region.protein),
        0 if region.is_forward else 1,
        region.phase,
        region.left,
    )


def sort_regions(regions: Iterable[CodingRegion]) -> List[CodingRegion]:
    """Sort regions by decreasing protein length with a deterministic tie-break."""
    return sorted(regions, key=region_sort_key)


def try_trim_to_first_start(
    region: CodingRegion,
    start: str = START_RESIDUE
) -> Optional[CodingRegion]:
    """Function form of CodingRegion.try_trim_to_first_start."""
    return region.try_trim_to_first_start(start)


def select_canonical_orfs(
    regions: Iterable[CodingRegion],
    config: Optional[ScanConfig] = None
) -> List[CodingRegion]:
    """
    Select ORFs running from a start residue to a stop codon.

    Non-terminated regions are discarded, the rest are trimmed to their
    first start residue (regions without one are dropped), and the result
    is ordered by decreasing protein length.

    Args:
        regions: Regions from find_coding_regions
        config: Start residue and minimum protein length

    Returns:
        Trimmed, terminated regions, longest first

    Example:
        >>> from codonkit.orf import find_coding_regions
        >>> orfs = select_canonical_orfs(find_coding_regions("CCATGAAATAG"))
        >>> orfs[0].protein
        'MK'
    """
    if config is None:
        config = ScanConfig()

    trimmed = []
    for region in regions:
        if not region.terminated:
            continue
        candidate = region.try_trim_to_first_start(config.start_residue)
        if candidate is None:
            continue
        if len(candidate.protein) < config.min_protein_length:
            continue
        trimmed.append(candidate)

    return sort_regions(trimmed)
