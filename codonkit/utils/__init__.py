"""
Shared helpers for codonkit.

- Logger factory
- Scan configuration and module-level defaults
"""

from codonkit.utils.config import (
    ScanConfig,
    START_RESIDUE,
    STOP_RESIDUE,
    UNKNOWN_RESIDUE,
    FASTA_LINE_WIDTH,
)
from codonkit.utils.logging import get_logger

__all__ = [
    "ScanConfig",
    "START_RESIDUE",
    "STOP_RESIDUE",
    "UNKNOWN_RESIDUE",
    "FASTA_LINE_WIDTH",
    "get_logger",
]
