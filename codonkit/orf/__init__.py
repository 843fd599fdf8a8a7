"""
Open reading frame detection.

This module provides:
- Six-frame scanning into stop-delimited coding regions
- The CodingRegion model and start-codon trimming
- Selection of canonical (start to stop) ORFs
"""

from codonkit.orf.regions import (
    CodingRegion,
    Strand,
    try_trim_to_first_start,
    select_canonical_orfs,
    sort_regions,
)

from codonkit.orf.scanner import (
    find_coding_regions,
    scan_frame,
    frame_sequence,
    FRAMES,
)

__all__ = [
    "CodingRegion",
    "Strand",
    "try_trim_to_first_start",
    "select_canonical_orfs",
    "sort_regions",
    "find_coding_regions",
    "scan_frame",
    "frame_sequence",
    "FRAMES",
]
