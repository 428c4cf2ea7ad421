"""FASTA output with optional windowing.

Each record can be trimmed to a window given by a 1-based offset and a
maximum length. BED-style headers (``>chr1:1000-2000``) are rewritten so
the coordinates describe the window; any other header is written as is.
Sequences are wrapped at a fixed line width.
"""

from dataclasses import replace
from typing import Iterator, Optional, TextIO

from fastatools.fasta.headers import parse_header
from fastatools.fasta.index import FastaRecord

LINE_WIDTH = 50


def format_header(
    header: str,
    offset: int = 1,
    length: Optional[int] = None,
    sequence_length: int = 0
) -> str:
    """
    Rewrite a header line for a trimmed sequence.

    Args:
        header: Header line as read from the file
        offset: 1-based start of the window
        length: Window length, or None for "to the end"
        sequence_length: Length of the untrimmed sequence

    Returns:
        Header line ending in a newline

    Example:
        >>> format_header(">chr1:1000-2000\\n", offset=101, length=50)
        '>chr1:1100-1150\\n'
    """
    parsed = parse_header(header)

    if parsed.is_bed:
        interval = parsed.interval
        start = interval.start + (offset - 1)
        # BED end is exclusive
        end = start + length if length is not None else start + sequence_length
        header = replace(interval, start=start, end=end).format()

    if not header.endswith('\n'):
        header += '\n'
    return header


def trim_sequence(sequence: str, offset: int = 1, length: Optional[int] = None) -> str:
    """Return the window of ``sequence`` starting at 1-based ``offset``.

    Windows running past the end are cut short; an offset beyond the end
    gives an empty string.
    """
    if offset == 1 and length is None:
        return sequence
    start = offset - 1
    if length is None:
        return sequence[start:]
    return sequence[start:start + length]


def wrap_sequence(sequence: str, width: int = LINE_WIDTH) -> Iterator[str]:
    """Yield ``sequence`` in newline-terminated lines of ``width`` characters."""
    for i in range(0, len(sequence), width):
        yield sequence[i:i + width] + '\n'


def write_record(
    out: TextIO,
    record: FastaRecord,
    offset: int = 1,
    length: Optional[int] = None,
    width: int = LINE_WIDTH
) -> int:
    """
    Write one record, windowed and wrapped.

    Args:
        out: Text stream to write to
        record: Record re-read from the source
        offset: 1-based start of the window
        length: Window length, or None for the rest of the sequence
        width: Characters per sequence line

    Returns:
        Number of sequence characters written
    """
    out.write(format_header(record.header, offset, length, len(record.sequence)))

    sequence = trim_sequence(record.sequence, offset, length)
    out.writelines(wrap_sequence(sequence, width))
    return len(sequence)
