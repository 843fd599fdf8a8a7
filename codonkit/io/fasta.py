"""
FASTA reading and writing.

Sequences are returned as plain strings ready for find_coding_regions.
Both plain text and gzip-compressed files are supported.
"""

import gzip
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Union

from codonkit.errors import DuplicateRecordError
from codonkit.utils.config import FASTA_LINE_WIDTH
from codonkit.utils.logging import get_logger

logger = get_logger("io")

_WHITESPACE = str.maketrans("", "", "\n\r ")


@dataclass
class FastaRecord:
    """
    Represents a single FASTA record.

    Attributes:
        id: Sequence identifier (first word after '>')
        description: Full description line (everything after '>')
        sequence: The nucleotide/protein sequence
    """
    id: str
    description: str
    sequence: str

    def __len__(self) -> int:
        return len(self.sequence)

    def to_fasta(self, line_width: int = FASTA_LINE_WIDTH) -> str:
        """Format as FASTA string with wrapped sequence lines."""
        return f">{self.description}\n{wrap(self.sequence, line_width)}"


def strip_whitespace(sequence: str) -> str:
    """
    Remove newlines, carriage returns and spaces from a sequence.

    Example:
        >>> strip_whitespace("ACG T\\r\\nAC")
        'ACGTAC'
    """
    return sequence.translate(_WHITESPACE)


def wrap(sequence: str, line_width: int = FASTA_LINE_WIDTH) -> str:
    """
    Break a sequence into lines of at most line_width characters.

    Every line, including the last, ends with a newline.

    Example:
        >>> wrap("ACGTACG", line_width=3)
        'ACG\\nTAC\\nG\\n'
    """
    if line_width < 1:
        raise ValueError("line_width must be >= 1")
    lines = [
        sequence[i:i + line_width]
        for i in range(0, len(sequence), line_width)
    ]
    return "\n".join(lines or [""]) + "\n"


def _open_file(filepath: Union[str, Path], mode: str = "rt"):
    """Open a file, handling gzip compression if needed."""
    filepath = Path(filepath)
    if filepath.suffix == ".gz":
        return gzip.open(filepath, mode)
    return open(filepath, mode)


def _make_record(header: str, lines: List[str], uppercase: bool) -> FastaRecord:
    seq = strip_whitespace("".join(lines))
    if uppercase:
        seq = seq.upper()
    seq_id = header.split()[0] if header else ""
    return FastaRecord(id=seq_id, description=header, sequence=seq)


def _parse_lines(lines: Iterable[str], uppercase: bool) -> Iterator[FastaRecord]:
    current_header = None
    current_sequence: List[str] = []

    for line in lines:
        line = line.strip("\n\r ")
        if not line:
            continue

        if line.startswith(">"):
            if current_header is not None:
                yield _make_record(current_header, current_sequence, uppercase)
            current_header = line[1:].strip()
            current_sequence = []
        elif current_header is not None:
            current_sequence.append(line)

    if current_header is not None:
        yield _make_record(current_header, current_sequence, uppercase)


def parse_fasta_string(
    content: str,
    uppercase: bool = False
) -> Iterator[FastaRecord]:
    """
    Parse FASTA format from a string.

    Sequence lines before the first header are ignored.

    Args:
        content: FASTA formatted string
        uppercase: Convert sequences to uppercase

    Yields:
        FastaRecord objects
    """
    yield from _parse_lines(content.split("\n"), uppercase)


def read_fasta(
    filepath: Union[str, Path],
    uppercase: bool = False
) -> Iterator[FastaRecord]:
    """
    Stream sequences from a FASTA file one record at a time.

    Args:
        filepath: Path to FASTA file (.fasta, .fa, .fna, or .gz)
        uppercase: Convert sequences to uppercase

    Yields:
        FastaRecord objects

    Example:
        >>> for record in read_fasta("contigs.fasta"):
        ...     print(f"{record.id}: {len(record)} bp")
    """
    with _open_file(filepath, "rt") as f:
        yield from _parse_lines(f, uppercase)


def _to_reference(records: Iterable[FastaRecord]) -> Dict[str, str]:
    reference: Dict[str, str] = {}
    for record in records:
        if record.id in reference:
            raise DuplicateRecordError(record.id)
        reference[record.id] = record.sequence
    logger.debug("Loaded %d reference sequences", len(reference))
    return reference


def load_reference_string(content: str) -> Dict[str, str]:
    """
    Load FASTA content into a dictionary keyed by sequence name.

    The name is the first word of each header line.

    Raises:
        DuplicateRecordError: If two records share a name
    """
    return _to_reference(parse_fasta_string(content))


def load_reference(filepath: Union[str, Path]) -> Dict[str, str]:
    """
    Load a FASTA file into a dictionary keyed by sequence name.

    Raises:
        DuplicateRecordError: If two records share a name
    """
    return _to_reference(read_fasta(filepath))


def write_fasta(
    records: Union[FastaRecord, List[FastaRecord], Iterator[FastaRecord]],
    filepath: Union[str, Path],
    line_width: int = FASTA_LINE_WIDTH,
    compress: bool = False
) -> None:
    """
    Write sequences to a FASTA file.

    Args:
        records: Single record or iterable of FastaRecord objects
        filepath: Output file path
        line_width: Number of characters per sequence line
        compress: If True, write gzip-compressed file

    Example:
        >>> records = [FastaRecord("orf1", "orf1 +0 12..95", "MKT")]
        >>> write_fasta(records, "orfs.fasta")
    """
    if isinstance(records, FastaRecord):
        records = [records]

    filepath = Path(filepath)
    if compress and not filepath.suffix == ".gz":
        filepath = Path(str(filepath) + ".gz")

    opener = gzip.open if compress or filepath.suffix == ".gz" else open

    with opener(filepath, "wt") as f:
        for record in records:
            f.write(record.to_fasta(line_width))
