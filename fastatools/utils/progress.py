"""Progress reporting utilities using tqdm"""

from tqdm import tqdm
from typing import Optional, Iterable
import sys


class ProgressReporter:
    """
    Wrapper for tqdm progress bars.

    Bars are drawn on stderr so they never mix with FASTA written to
    stdout.
    """

    def __init__(self, disable: bool = False):
        """
        Initialize progress reporter.

        Args:
            disable: If True, disable all progress bars (quiet mode or CI)
        """
        self.disable = disable

    def create_bar(
        self,
        iterable: Optional[Iterable] = None,
        total: Optional[int] = None,
        desc: Optional[str] = None,
        unit: str = 'it',
        leave: bool = False,
        **kwargs
    ) -> tqdm:
        """
        Create a tqdm progress bar.

        Args:
            iterable: Optional iterable to wrap
            total: Total number of iterations (if iterable is None)
            desc: Description prefix for progress bar
            unit: Unit name (default: 'it')
            leave: Keep progress bar after completion
            **kwargs: Additional tqdm arguments

        Returns:
            tqdm progress bar object
        """
        return tqdm(
            iterable=iterable,
            total=total,
            desc=desc,
            unit=unit,
            leave=leave,
            disable=self.disable,
            file=sys.stderr,
            ncols=100,  # Fixed width for consistent display
            bar_format='{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}, {rate_fmt}]',
            **kwargs
        )

    def create_sequence_bar(
        self,
        iterable: Iterable,
        total: int,
        desc: str = "Writing sequences",
        **kwargs
    ) -> tqdm:
        """
        Create a progress bar over records being written.

        Args:
            iterable: Records to iterate over
            total: Number of records
            desc: Description
            **kwargs: Additional tqdm arguments

        Returns:
            tqdm progress bar
        """
        return self.create_bar(
            iterable,
            total=total,
            desc=desc,
            unit='seq',
            **kwargs
        )
