"""Utility CLI commands"""

import click
import sys
from pathlib import Path
import logging

from fastatools.core.config import Config

logger = logging.getLogger('fastatools.cli.utils')


@click.group(name='utils')
def utils():
    """Utility commands for fastatools"""
    pass


@utils.command(name='generate-config')
@click.option('--output', '-o', type=click.Path(),
              default='fastatools_config.yaml',
              help='Output configuration file path')
def generate_config_cmd(output):
    """
    Generate a configuration file template.

    Creates a YAML configuration file with default values
    that can be customized and used with --config.

    Example:
      fastatools utils generate-config -o my_config.yaml
      fastatools --config my_config.yaml subsample input.fasta 100
    """
    try:
        # Load default config
        config = Config.load()

        # Save to specified location
        output_path = Path(output)
        config.save(output_path)

        print(f"Configuration template saved to {output_path}")
        print("\nEdit this file to customize fastatools settings,")
        print(f"then use it with: --config {output_path}")

    except Exception as e:
        logger.error(f"Failed to generate config: {e}")
        sys.exit(1)
