"""Subsample records from a FASTA file.

Index the file once, split the records into a sample and the rest, then
re-read each selected record by offset and write it, optionally trimmed,
to the sample stream, then the remaining records to the rest stream.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from fastatools.fasta.index import IndexedFasta, RecordEntry
from fastatools.fasta.selection import GENERATORS, select_partition
from fastatools.fasta.writer import LINE_WIDTH, write_record
from fastatools.utils.progress import ProgressReporter

logger = logging.getLogger('fastatools.fasta.subsample')


@dataclass
class SubsampleOptions:
    """Parameters of one subsample run.

    Attributes:
        n: Number of records in the sample
        seed: Random number seed (ignored when randomize is False)
        randomize: Shuffle before selecting; False keeps file order
        offset: 1-based start of the window written for each sequence
        length: Maximum characters written per sequence (None = no limit)
        line_width: Characters per output sequence line
        generator: Random generator name, see selection.make_rng()
    """
    n: int
    seed: int = 1
    randomize: bool = True
    offset: int = 1
    length: Optional[int] = None
    line_width: int = LINE_WIDTH
    generator: str = 'drand48'

    def __post_init__(self):
        if self.n < 0:
            raise ValueError(f"Sample size must be non-negative, got {self.n}")
        if self.offset < 1:
            raise ValueError(f"Offset is 1-based and must be >= 1, got {self.offset}")
        if self.length is not None and self.length < 0:
            raise ValueError(f"Length must be non-negative, got {self.length}")
        if self.line_width < 1:
            raise ValueError(f"Line width must be positive, got {self.line_width}")
        if self.generator not in GENERATORS:
            raise ValueError(
                f"Unknown random generator '{self.generator}'. "
                f"Expected one of: {', '.join(GENERATORS)}"
            )


@dataclass
class SubsampleResult:
    """Counts reported after a run."""
    total_records: int
    sample_count: int
    rest_count: int
    clamped: bool


def _write_entries(
    fasta: IndexedFasta,
    entries: Iterable[RecordEntry],
    out: TextIO,
    options: SubsampleOptions
) -> int:
    written = 0
    for entry in entries:
        record = fasta.read_entry(entry)
        write_record(out, record, options.offset, options.length, options.line_width)
        written += 1
    return written


def subsample_fasta(
    fasta: IndexedFasta,
    out: TextIO,
    options: SubsampleOptions,
    rest_out: Optional[TextIO] = None,
    progress: Optional[ProgressReporter] = None
) -> SubsampleResult:
    """
    Write a subsample of ``fasta`` to ``out``.

    Args:
        fasta: Open, indexed FASTA source
        out: Stream receiving the sample
        options: Selection and windowing parameters
        rest_out: Optional stream receiving the records not sampled
        progress: Progress reporter (default: disabled)

    Returns:
        SubsampleResult with record counts
    """
    if progress is None:
        progress = ProgressReporter(disable=True)

    partition = select_partition(
        fasta.index.entries,
        options.n,
        randomize=options.randomize,
        seed=options.seed,
        generator=options.generator
    )
    logger.info(
        f"Selected {len(partition.sample)} of {len(fasta)} records "
        f"({'seed ' + str(options.seed) if options.randomize else 'file order'})"
    )

    sample_bar = progress.create_sequence_bar(
        partition.sample, total=len(partition.sample), desc="Sample"
    )
    sample_count = _write_entries(fasta, sample_bar, out, options)

    rest_count = 0
    if rest_out is not None:
        rest_bar = progress.create_sequence_bar(
            partition.rest, total=len(partition.rest), desc="Rest"
        )
        rest_count = _write_entries(fasta, rest_bar, rest_out, options)
        logger.info(f"Wrote {rest_count} remaining records")

    return SubsampleResult(
        total_records=len(fasta),
        sample_count=sample_count,
        rest_count=rest_count,
        clamped=partition.clamped
    )
