"""Main Click CLI group and global options"""

import click
import sys
from pathlib import Path
from fastatools.core.logging_setup import setup_logging
from fastatools.core.config import Config
from fastatools import __version__

# Import command modules
from fastatools.cli import subsample
from fastatools.cli import to_json
from fastatools.cli import utils


@click.group(context_settings={'help_option_names': ['-h', '--help', '-help']})
@click.version_option(version=__version__, prog_name='fastatools')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose (DEBUG level) logging')
@click.option('--quiet', '-q', is_flag=True,
              help='Only report warnings and errors')
@click.option('--log-file', '-l', type=click.Path(),
              help='Path to log file')
@click.option('--config', '-c', type=click.Path(exists=True),
              help='Path to YAML configuration file')
@click.pass_context
def cli(ctx, verbose, quiet, log_file, config):
    """
    fastatools - FASTA subsampling and conversion

    Log messages and progress bars go to stderr; sequence data
    goes to stdout.

    Examples:

      # 100 records chosen with the default seed
      fastatools subsample input.fasta 100 > sample.fasta

      # First 100 records, remainder written to rest.fasta
      fastatools subsample input.fasta 100 -norand -rest rest.fasta

      # Positions 101-150 of every sequence
      fastatools subsample input.fasta 100 -off 101 -len 50

      # Convert to JSON
      fastatools to-json --fasta input.fasta > input.json

    For detailed help on a command:
      fastatools COMMAND --help
    """
    # Initialize context object
    ctx.ensure_object(dict)

    # Setup logging
    log_file_path = Path(log_file) if log_file else None
    logger = setup_logging(verbose=verbose, log_file=log_file_path, quiet=quiet)
    ctx.obj['logger'] = logger
    ctx.obj['quiet'] = quiet

    # Load configuration
    try:
        if config:
            cfg = Config.load(Path(config))
            logger.info(f"Loaded configuration from {config}")
        else:
            cfg = Config.load()  # Load default
            logger.debug("Using default configuration")

        ctx.obj['config'] = cfg
    except Exception as e:
        logger.error(f"Failed to load configuration: {e}")
        sys.exit(1)


# Register commands
cli.add_command(subsample.subsample)
cli.add_command(to_json.to_json)
cli.add_command(utils.utils)


if __name__ == '__main__':
    cli()
