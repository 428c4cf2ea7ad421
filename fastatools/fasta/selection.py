"""Seeded record selection.

The sample is the first N items of the record list, taken either in file
order or after a seeded in-place shuffle. The default generator is
drand48, the 48-bit linear congruential generator behind Perl's ``rand``,
so a seed selects the same records as a Perl ``srand``/``rand``
shuffle of the same list.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, MutableSequence, Sequence, TypeVar

logger = logging.getLogger('fastatools.fasta.selection')

T = TypeVar('T')

GENERATORS = ('drand48', 'python')


class Drand48:
    """drand48 generator: X' = (a*X + c) mod 2**48, returns X' / 2**48.

    Seeding follows Perl's srand: the low 32 bits of the seed become the
    high bits of the state and the low 16 bits are 0x330E.
    """

    MULTIPLIER = 0x5DEECE66D
    INCREMENT = 0xB
    MASK = (1 << 48) - 1

    def __init__(self, seed: int = 1):
        self.seed(seed)

    def seed(self, seed: int):
        self._state = (((seed & 0xFFFFFFFF) << 16) | 0x330E) & self.MASK

    def random(self) -> float:
        """Return the next float in [0.0, 1.0)."""
        self._state = (self.MULTIPLIER * self._state + self.INCREMENT) & self.MASK
        return self._state / float(1 << 48)


def make_rng(seed: int, generator: str = 'drand48'):
    """
    Create a seeded random source.

    Args:
        seed: Random number seed
        generator: 'drand48' (Perl-compatible) or 'python' (Mersenne Twister)

    Returns:
        Object with a random() method returning floats in [0.0, 1.0)
    """
    if generator == 'drand48':
        return Drand48(seed)
    if generator == 'python':
        return random.Random(seed)
    raise ValueError(
        f"Unknown random generator '{generator}'. Expected one of: {', '.join(GENERATORS)}"
    )


def shuffle_in_place(items: MutableSequence[T], rng) -> None:
    """Shuffle ``items`` in place.

    Position i is swapped with a position drawn uniformly from
    [i, len(items)), one draw per position in forward order.
    """
    size = len(items)
    for i in range(size):
        j = i + int(rng.random() * (size - i))
        items[i], items[j] = items[j], items[i]


@dataclass
class SelectionPartition:
    """Result of a selection.

    Attributes:
        sample: The first ``n`` items after optional shuffling
        rest: The remaining items, in the same (possibly shuffled) order
        requested: Sample size asked for
        clamped: True when fewer items than requested were available
    """
    sample: List = field(default_factory=list)
    rest: List = field(default_factory=list)
    requested: int = 0
    clamped: bool = False


def select_partition(
    items: Sequence[T],
    n: int,
    randomize: bool = True,
    seed: int = 1,
    rng=None,
    generator: str = 'drand48'
) -> SelectionPartition:
    """
    Split items into a sample of size ``n`` and the rest.

    Args:
        items: Universe of items in file order (not modified)
        n: Requested sample size; clamped to len(items)
        randomize: Shuffle before splitting; when False ``seed`` is ignored
        seed: Seed for the generator
        rng: Pre-built random source, overrides ``seed``/``generator``
        generator: Generator name passed to make_rng()

    Returns:
        SelectionPartition
    """
    if n < 0:
        raise ValueError(f"Sample size must be non-negative, got {n}")

    ordered = list(items)
    total = len(ordered)

    clamped = total < n
    if clamped:
        logger.warning(f"not enough sequences ({total}); {n} requested.")
    size = min(n, total)

    if randomize:
        if rng is None:
            rng = make_rng(seed, generator)
        shuffle_in_place(ordered, rng)
        logger.debug(f"Shuffled {total} records (seed={seed}, generator={generator})")

    return SelectionPartition(
        sample=ordered[:size],
        rest=ordered[size:],
        requested=n,
        clamped=clamped
    )
