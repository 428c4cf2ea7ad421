"""Subsample command implementation"""

import click
import sys
from pathlib import Path
import logging

from fastatools.fasta.index import ENCODING, ENCODING_ERRORS, IndexedFasta
from fastatools.fasta.subsample import SubsampleOptions, subsample_fasta
from fastatools.utils.progress import ProgressReporter

logger = logging.getLogger('fastatools.cli.subsample')


@click.command()
@click.argument('fasta_file', metavar='FASTA',
                type=click.Path(exists=True, dir_okay=False))
@click.argument('n', type=click.IntRange(min=0))
@click.option('--seed', '-seed', 'seed',
              type=int,
              help='Random number seed (default: from config, 1)')
@click.option('--norand', '-norand', 'norand',
              is_flag=True,
              help='Select the first N sequences in file order; overrides --seed')
@click.option('--rest', '-rest', 'rest',
              type=click.Path(dir_okay=False),
              help='File to receive the sequences not in the sample')
@click.option('--off', '-off', 'offset',
              type=click.IntRange(min=1),
              default=1,
              show_default=True,
              help='Print each sequence starting at this 1-based position')
@click.option('--len', '-len', 'length',
              type=click.IntRange(min=0),
              help='Print up to this many characters of each sequence '
                   '(default: entire sequence)')
@click.option('--output', '-o',
              type=click.File('w', encoding=ENCODING, errors=ENCODING_ERRORS,
                              lazy=False),
              default='-',
              help='Output file for the sample (default: stdout)')
@click.option('--no-progress',
              is_flag=True,
              help='Disable progress bars')
@click.pass_context
def subsample(ctx, fasta_file, n, seed, norand, rest, offset, length,
              output, no_progress):
    """
    Output a subsample of N sequences from a FASTA file.

    By default sequences are selected with a random number generator
    that is always seeded to 1, so the same subset is output on every
    run. Change the subset with --seed, or use --norand to take the
    first N sequences in file order. The remaining sequences can be
    written to a separate file with --rest, which is useful for
    cross-validation.

    Use --off and --len to output only a portion of each sequence.
    Headers in UCSC BED form (e.g. ">chr1:0-99999") are adjusted to
    the portion printed. Sequences are written 50 characters per line
    unless output.line_width is set in the configuration.

    Examples:

      # Reproducible random sample of 1000 sequences
      fastatools subsample reads.fasta 1000 > sample.fasta

      # Training/test split
      fastatools subsample reads.fasta 1000 -seed 7 -rest train.fasta > test.fasta

      # First 10 records, positions 101-150
      fastatools subsample regions.fasta 10 -norand -off 101 -len 50
    """
    config = ctx.obj['config']

    # Command-line values override the configuration file
    if seed is not None:
        config.set('sampling.seed', seed)
    if no_progress or ctx.obj.get('quiet', False):
        config.set('output.progress', False)

    seed = config.get('sampling.seed', 1)
    generator = config.get('sampling.generator', 'drand48')
    line_width = config.get('output.line_width', 50)
    progress = ProgressReporter(disable=not config.get('output.progress', True))

    logger.debug(
        f"subsample: n={n} seed={seed} norand={norand} rest={rest} "
        f"off={offset} len={length} generator={generator}"
    )

    try:
        options = SubsampleOptions(
            n=n,
            seed=seed,
            randomize=not norand,
            offset=offset,
            length=length,
            line_width=line_width,
            generator=generator
        )
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid settings: {e}")
        sys.exit(1)

    rest_handle = None
    if rest:
        try:
            rest_handle = open(rest, 'w', encoding=ENCODING, errors=ENCODING_ERRORS)
        except OSError as e:
            logger.error(f"Can't open file '{rest}': {e.strerror}")
            sys.exit(1)

    try:
        with IndexedFasta.open(Path(fasta_file)) as fasta:
            result = subsample_fasta(
                fasta,
                output,
                options,
                rest_out=rest_handle,
                progress=progress
            )

        logger.info(
            f"Wrote {result.sample_count} sequences"
            + (f" ({result.rest_count} to {rest})" if rest else "")
        )

    except Exception as e:
        logger.error(f"Subsample failed: {e}")
        if logger.getEffectiveLevel() == logging.DEBUG:
            logger.exception("Detailed error traceback:")
        sys.exit(1)
    finally:
        if rest_handle is not None:
            rest_handle.close()
