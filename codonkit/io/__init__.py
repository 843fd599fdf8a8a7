"""
FASTA I/O for sequences fed to the ORF scanner.

- Streaming and in-memory parsing
- Reference dictionaries keyed by record name
- Line-wrapped output
"""

from codonkit.io.fasta import (
    FastaRecord,
    parse_fasta_string,
    read_fasta,
    load_reference,
    load_reference_string,
    write_fasta,
    strip_whitespace,
    wrap,
)

__all__ = [
    "FastaRecord",
    "parse_fasta_string",
    "read_fasta",
    "load_reference",
    "load_reference_string",
    "write_fasta",
    "strip_whitespace",
    "wrap",
]
