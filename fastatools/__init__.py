"""
fastatools - FASTA subsampling and conversion utilities

Command-line tools for taking reproducible (seeded) subsamples of FASTA
files, trimming sequences with BED-aware header rewriting, and converting
FASTA records to JSON.
"""

__version__ = "1.0.0"
__author__ = "fastatools Team"

from fastatools.core.config import Config
from fastatools.core.logging_setup import setup_logging

__all__ = ["Config", "setup_logging", "__version__"]
