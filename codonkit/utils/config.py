"""Configuration for ORF scanning."""

from dataclasses import dataclass
from typing import Dict, Union

# Module-level defaults
START_RESIDUE = "M"
STOP_RESIDUE = "*"
UNKNOWN_RESIDUE = "?"
FASTA_LINE_WIDTH = 60


@dataclass(frozen=True)
class ScanConfig:
    """
    Options for six-frame scanning and canonical ORF selection.

    Attributes:
        start_residue: Residue a canonical ORF must begin with
        min_protein_length: Canonical ORFs with shorter proteins are dropped
        max_workers: Threads used to scan frames; 1 scans sequentially
    """
    start_residue: str = START_RESIDUE
    min_protein_length: int = 0
    max_workers: int = 1

    def __post_init__(self):
        if len(self.start_residue) != 1 or not self.start_residue.isalpha():
            raise ValueError(
                f"start_residue must be a single letter, got {self.start_residue!r}"
            )
        if self.min_protein_length < 0:
            raise ValueError("min_protein_length must be >= 0")
        if self.max_workers < 1:
            raise ValueError("max_workers must be >= 1")

    def as_dict(self) -> Dict[str, Union[int, str]]:
        return {
            "start_residue": self.start_residue,
            "min_protein_length": self.min_protein_length,
            "max_workers": self.max_workers,
        }
