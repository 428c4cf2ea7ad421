"""FASTA to JSON command implementation"""

import click
import sys
import logging

from fastatools.fasta.to_json import fasta_to_json

logger = logging.getLogger('fastatools.cli.to_json')


@click.command(name='to-json')
@click.option('--fasta', '-f',
              type=click.File('r'),
              default='-',
              help='FASTA file. Reads from STDIN if not provided')
@click.option('--output', '-o',
              type=click.File('w', lazy=False),
              default='-',
              help='Output file (default: stdout)')
@click.option('--quote/--no-quote',
              default=True,
              show_default=True,
              help='Write each character as a double-quoted JSON string. '
                   '--no-quote writes bare characters (legacy, not valid JSON)')
def to_json(fasta, output, quote):
    """
    Convert FASTA to JSON.

    Writes a single object mapping each header to the list of
    characters in its sequence:

      {
      "seq1 description" : ["A","C","G","T"]
      }

    Example:
      fastatools to-json --fasta input.fasta > input.json
    """
    logger.debug(f"Reading FASTA from {getattr(fasta, 'name', '<stdin>')}")

    try:
        fasta_to_json(fasta, output, quote=quote)
    except Exception as e:
        logger.error(f"Conversion failed: {e}")
        if logger.getEffectiveLevel() == logging.DEBUG:
            logger.exception("Detailed error traceback:")
        sys.exit(1)
