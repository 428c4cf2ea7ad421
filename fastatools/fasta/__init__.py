"""FASTA indexing, selection, windowed output and JSON conversion"""

from fastatools.fasta.headers import (
    FastaHeader,
    GenomicInterval,
    HeaderFormatError,
    parse_header,
)
from fastatools.fasta.index import (
    FastaIndex,
    FastaRecord,
    IndexedFasta,
    RecordEntry,
    RecordNotFoundError,
    build_index,
)
from fastatools.fasta.selection import (
    Drand48,
    SelectionPartition,
    make_rng,
    select_partition,
    shuffle_in_place,
)
from fastatools.fasta.writer import (
    format_header,
    trim_sequence,
    wrap_sequence,
    write_record,
)
from fastatools.fasta.subsample import SubsampleOptions, SubsampleResult, subsample_fasta
from fastatools.fasta.to_json import fasta_to_json

__all__ = [
    'FastaHeader',
    'GenomicInterval',
    'HeaderFormatError',
    'parse_header',
    'FastaIndex',
    'FastaRecord',
    'IndexedFasta',
    'RecordEntry',
    'RecordNotFoundError',
    'build_index',
    'Drand48',
    'SelectionPartition',
    'make_rng',
    'select_partition',
    'shuffle_in_place',
    'format_header',
    'trim_sequence',
    'wrap_sequence',
    'write_record',
    'SubsampleOptions',
    'SubsampleResult',
    'subsample_fasta',
    'fasta_to_json',
]
