"""FASTA header parsing.

Every header yields a record identifier (the first whitespace-delimited
token after ``>``). Headers in UCSC BED interval form, e.g.
``>chr1:1000-2000 some comment``, are additionally decomposed so that
their coordinates can be adjusted when a sequence is trimmed.
"""

import re
from dataclasses import dataclass
from typing import Optional

HEADER_MARKER = '>'

# chromosome token, 0-based start, end; everything after the end is kept
BED_HEADER_PATTERN = re.compile(r'^>((?i:chr)[A-Za-z0-9]+):(\d+)-(\d+)')


class HeaderFormatError(Exception):
    """Raised when a line handed to the parser is not a FASTA header.

    Attributes:
        line: The offending line
    """

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Not a FASTA header line: {line.rstrip()!r}")


@dataclass
class GenomicInterval:
    """BED-style location decoded from a header.

    Attributes:
        chrom: Chromosome token as spelled in the header (e.g. "chr1")
        start: 0-based start
        end: End coordinate (exclusive)
        trailing: Text after the end coordinate, line terminator included
    """
    chrom: str
    start: int
    end: int
    trailing: str = ''

    def format(self) -> str:
        return f">{self.chrom}:{self.start}-{self.end}{self.trailing}"


@dataclass
class FastaHeader:
    """Parsed FASTA header line."""
    line: str
    identifier: str
    interval: Optional[GenomicInterval] = None

    @property
    def is_bed(self) -> bool:
        return self.interval is not None


def parse_identifier(line: str) -> str:
    """Return the record identifier of a header line ('' for a bare marker)."""
    fields = line[len(HEADER_MARKER):].split(None, 1)
    return fields[0] if fields else ''


def parse_header(line: str) -> FastaHeader:
    """
    Parse a raw header line.

    Args:
        line: Header line including the '>' marker and any terminator

    Returns:
        FastaHeader with the identifier, and the genomic interval when the
        header is in BED form

    Raises:
        HeaderFormatError: If the line does not start with '>'

    Example:
        >>> parse_header(">chr1:1000-2000 exon\\n").interval
        GenomicInterval(chrom='chr1', start=1000, end=2000, trailing=' exon\\n')
    """
    if not line.startswith(HEADER_MARKER):
        raise HeaderFormatError(line)

    interval = None
    match = BED_HEADER_PATTERN.match(line)
    if match:
        interval = GenomicInterval(
            chrom=match.group(1),
            start=int(match.group(2)),
            end=int(match.group(3)),
            trailing=line[match.end():]
        )

    return FastaHeader(line=line, identifier=parse_identifier(line), interval=interval)
