"""
Six-frame coding region scanner.

Each of the three phases is read on both strands. A frame is translated
once, then cut at every stop codon: each stop closes a terminated region,
and whatever follows the last stop becomes a final open region.

Phase is measured from the 5' end of the strand being read. On the forward
strand the first `phase` bases are skipped; on the reverse strand the last
`phase` bases of the input are dropped before reverse complementing.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

from codonkit.orf.regions import CodingRegion, Strand, sort_regions
from codonkit.sequence.bases import reverse_complement
from codonkit.sequence.codons import translate
from codonkit.utils.config import ScanConfig, STOP_RESIDUE
from codonkit.utils.logging import get_logger

logger = get_logger("orf")

PHASES = (0, 1, 2)
STRANDS = (Strand.FORWARD, Strand.REVERSE)
FRAMES: Tuple[Tuple[int, Strand], ...] = tuple(
    (phase, strand) for phase in PHASES for strand in STRANDS
)


def frame_sequence(sequence: str, strand: Strand, phase: int) -> str:
    """
    Get the nucleotides of one reading frame in reading direction.

    Args:
        sequence: Original input sequence
        strand: Strand to read
        phase: Number of 5' bases to skip (0, 1 or 2)

    Returns:
        Frame sequence starting at the first codon of the frame

    Example:
        >>> frame_sequence("AACCGGT", Strand.FORWARD, 1)
        'ACCGGT'
        >>> frame_sequence("AACCGGT", Strand.REVERSE, 1)
        'CCGGTT'
    """
    if phase not in PHASES:
        raise ValueError(f"phase must be 0, 1 or 2, got {phase}")
    if strand is Strand.FORWARD:
        return sequence[phase:]
    return reverse_complement(sequence[:len(sequence) - phase])


def _region_bounds(
    seq_length: int,
    strand: Strand,
    phase: int,
    frame_offset: int,
    n_codons: int
) -> Tuple[int, int]:
    """Map a frame-relative span back to original-sequence coordinates."""
    span = 3 * n_codons
    if strand is Strand.FORWARD:
        left = phase + frame_offset
        return left, left + span - 1
    right = seq_length - 1 - phase - frame_offset
    return right - span + 1, right


def scan_frame(sequence: str, strand: Strand, phase: int) -> List[CodingRegion]:
    """
    Split one reading frame into coding regions at its stop codons.

    Every stop codon closes a terminated region (the stop itself is not
    included). If codons remain after the last stop they form one final
    region with terminated=False. A frame that translates to nothing
    yields no regions.

    Args:
        sequence: Original input sequence
        strand: Strand to read
        phase: Frame phase (0, 1 or 2)

    Returns:
        Regions in reading order

    Example:
        >>> [r.protein for r in scan_frame("ATGAAATAGCCC", Strand.FORWARD, 0)]
        ['MK', 'P']
    """
    mrna = frame_sequence(sequence, strand, phase)
    protein = translate(mrna)
    seq_length = len(sequence)

    regions = []
    cursor = 0
    while cursor < len(protein):
        stop = protein.find(STOP_RESIDUE, cursor)
        terminated = stop >= 0
        end = stop if terminated else len(protein)

        left, right = _region_bounds(seq_length, strand, phase, 3 * cursor, end - cursor)
        regions.append(CodingRegion(
            strand=strand,
            left=left,
            right=right,
            transcript=mrna[3 * cursor:3 * end],
            protein=protein[cursor:end],
            terminated=terminated,
            phase=phase,
        ))

        if not terminated:
            break
        cursor = stop + 1

    return regions


def find_coding_regions(
    sequence: str,
    config: Optional[ScanConfig] = None
) -> List[CodingRegion]:
    """
    Find coding regions in all six frames of a sequence.

    Regions are not trimmed to a start codon; use select_canonical_orfs or
    CodingRegion.try_trim_to_first_start for that.

    Args:
        sequence: DNA sequence (A/C/G/T/N, either case)
        config: Scan options; max_workers > 1 scans frames on a thread pool

    Returns:
        All regions ordered by decreasing protein length, ties broken by
        strand (forward first), phase, then left coordinate

    Raises:
        InvalidBaseError: If the sequence contains a base that cannot be
            translated

    Example:
        >>> regions = find_coding_regions("ATGAAATAG")
        >>> [r.protein for r in regions[:2]]
        ['LFH', 'MK']
        >>> (regions[1].left, regions[1].right, regions[1].terminated)
        (0, 5, True)
    """
    if config is None:
        config = ScanConfig()

    if config.max_workers > 1:
        with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
            per_frame = list(pool.map(
                lambda frame: scan_frame(sequence, frame[1], frame[0]),
                FRAMES,
            ))
    else:
        per_frame = [scan_frame(sequence, strand, phase) for phase, strand in FRAMES]

    regions = [region for frame_regions in per_frame for region in frame_regions]
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Scanned %d bp: %d regions (%d terminated)",
            len(sequence),
            len(regions),
            sum(region.terminated for region in regions),
        )
    return sort_regions(regions)
