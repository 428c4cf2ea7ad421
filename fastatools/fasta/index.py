"""Byte-offset index over a FASTA file with random-access record reads.

The index is built in a single forward pass and records, for every header
line, the byte offset of its first byte. Records are later re-read by
seeking to that offset, so the underlying stream must be seekable.
Non-seekable sources (pipes, /dev/stdin) are buffered into memory first.

Architecture:
    1. build_index: one pass over a binary stream -> FastaIndex
    2. IndexedFasta: owns the open handle and the index for one run
    3. IndexedFasta.read_at / read_record: seek and reassemble a record

Example:
    >>> with IndexedFasta.open(Path("sequences.fasta")) as fasta:
    ...     record = fasta.read_record("seq_1")
    ...     print(record.header, len(record.sequence))
"""

import io
import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Dict, List

from fastatools.fasta.headers import parse_identifier

logger = logging.getLogger('fastatools.fasta.index')

HEADER_PREFIX = b'>'
ENCODING = 'utf-8'

# Undecodable bytes round-trip through str and back to the same bytes.
ENCODING_ERRORS = 'surrogateescape'


class RecordNotFoundError(Exception):
    """Raised when a record identifier is not present in the index.

    Attributes:
        identifier: The identifier that was looked up
    """

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Can't find target {identifier}.")


@dataclass(frozen=True)
class RecordEntry:
    """Position of one record in the source file.

    Attributes:
        identifier: Record identifier from the header line
        offset: Byte offset of the header line's first byte
    """
    identifier: str
    offset: int


@dataclass
class FastaRecord:
    """A record re-read from the source.

    Attributes:
        header: Header line exactly as in the file (terminator kept)
        sequence: Concatenated sequence lines, terminators stripped

    Bytes that are not valid UTF-8 are kept as surrogate escapes; write
    with ``errors=ENCODING_ERRORS`` to get the original bytes back.
    """
    header: str
    sequence: str


@dataclass
class FastaIndex:
    """Identifier-to-offset index plus the records in file order.

    ``entries`` has one item per header line. ``offsets`` maps each
    identifier to its offset; when an identifier is repeated the last
    occurrence wins there, while ``entries`` still keeps every record.
    """
    entries: List[RecordEntry] = field(default_factory=list)
    offsets: Dict[str, int] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, identifier: str) -> bool:
        return identifier in self.offsets

    @property
    def identifiers(self) -> List[str]:
        """Identifiers in file-encounter order."""
        return [entry.identifier for entry in self.entries]

    def offset_of(self, identifier: str) -> int:
        try:
            return self.offsets[identifier]
        except KeyError:
            raise RecordNotFoundError(identifier) from None


def build_index(handle: BinaryIO) -> FastaIndex:
    """Scan a binary FASTA stream and record the offset of each header.

    Args:
        handle: Binary stream positioned at its start

    Returns:
        Populated FastaIndex. The stream is left at end-of-file.
    """
    index = FastaIndex()
    byte = 0

    for line in handle:
        if line.startswith(HEADER_PREFIX):
            identifier = parse_identifier(line.decode(ENCODING, errors=ENCODING_ERRORS))
            index.entries.append(RecordEntry(identifier=identifier, offset=byte))
            index.offsets[identifier] = byte
        byte += len(line)

    if len(index.offsets) != len(index.entries):
        counts = Counter(index.identifiers)
        for identifier, count in counts.items():
            if count > 1:
                logger.warning(
                    f"Duplicate record identifier {identifier!r} ({count} records); "
                    f"lookups by identifier use the last one"
                )

    logger.debug(f"Indexed {len(index.entries)} records ({byte} bytes)")
    return index


class IndexedFasta:
    """An open FASTA source together with its byte-offset index.

    Built once per run. Records are fetched by seeking back into the
    same handle, so reads interleave freely with output.
    """

    def __init__(self, handle: BinaryIO, name: str = '<stream>'):
        self.name = name
        if not handle.seekable():
            logger.info(f"{name} is not seekable; buffering input in memory")
            source = handle
            handle = io.BytesIO(source.read())
            source.close()
        self._handle = handle
        self._handle.seek(0)
        self.index = build_index(self._handle)

    @classmethod
    def open(cls, fasta_file: Path) -> 'IndexedFasta':
        """Open and index a FASTA file."""
        fasta_file = Path(fasta_file)
        logger.info(f"Indexing {fasta_file}")
        handle = open(fasta_file, 'rb')
        try:
            return cls(handle, name=str(fasta_file))
        except Exception:
            handle.close()
            raise

    def __enter__(self) -> 'IndexedFasta':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __len__(self) -> int:
        return len(self.index)

    def close(self):
        self._handle.close()

    def read_at(self, offset: int) -> FastaRecord:
        """
        Re-read the record whose header starts at ``offset``.

        Sequence lines are concatenated with their line terminators
        removed, up to the next header line or end of file.

        Args:
            offset: Byte offset of a header line

        Returns:
            FastaRecord with the verbatim header and the full sequence
        """
        self._handle.seek(offset)
        header = self._handle.readline().decode(ENCODING, errors=ENCODING_ERRORS)

        chunks = []
        for line in self._handle:
            if line.startswith(HEADER_PREFIX):
                break
            chunks.append(line.rstrip(b'\r\n'))

        sequence = b''.join(chunks).decode(ENCODING, errors=ENCODING_ERRORS)
        return FastaRecord(header=header, sequence=sequence)

    def read_record(self, identifier: str) -> FastaRecord:
        """
        Re-read a record by identifier.

        Raises:
            RecordNotFoundError: If the identifier was never indexed
        """
        return self.read_at(self.index.offset_of(identifier))

    def read_entry(self, entry: RecordEntry) -> FastaRecord:
        return self.read_at(entry.offset)
