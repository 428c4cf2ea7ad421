"""
Entry point for fastatools CLI.
Allows execution via: python -m fastatools
"""

import sys
from fastatools.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
