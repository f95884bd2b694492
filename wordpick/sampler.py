"""
Map raw entropy to word-pool indices.

Every draw reads `byte_width(L)` fresh bytes, so the raw value `r` lies in
0..256**byte_width(L)-1, which covers the pool size L at least once but is
rarely an exact multiple of it. Two obvious reductions are biased:

  1. `r % L` favours the front of the pool, because the top of the raw
     range wraps onto the lowest indices.

  2. `L * r // 256**byte_width(L)` picks some (predictable, given L)
     entries n times and all the others n+1 times (picket fence).

Instead, the raw values are added to a running sum which is never reset,
and the modulus is taken of that sum. The (n+1)-th index is therefore the
n-th index shifted by a random offset: consecutive picks are coupled, and
this is accepted as the price of avoiding a fixed positional bias.
"""
import logging
from typing import Iterator, List, Sequence

from . import util

log = logging.getLogger(__name__)


def bits_for(pool_size: int) -> int:
    """Return the number of bits needed to represent pool_size - 1 (at least 1)."""
    if pool_size < 1:
        raise ValueError('pool size must be positive, got {}'.format(pool_size))
    return max(1, (pool_size - 1).bit_length())


def byte_width(pool_size: int) -> int:
    """Return the minimal number of bytes whose value range covers `pool_size`."""
    return (bits_for(pool_size) + 7) // 8


class PerDrawEntropy:
    """Hardcore mode: read fresh entropy for every draw."""

    def __init__(self, source):
        """`source` must be an opened entropy source."""
        self.source = source

    def indices(self, pool_size: int, count: int) -> Iterator[int]:
        """Generate `count` indices in range(pool_size) from a running sum."""
        width = byte_width(pool_size)
        log.debug('drawing %d indices, %d bytes per draw', count, width)
        running_sum = 0  # arbitrary precision, so it never wraps
        for _ in range(count):
            r = util.bytes2num(self.source.read(width))
            running_sum += r
            yield running_sum % pool_size

    def __str__(self):
        """Human-readable representation."""
        return 'per-draw entropy from {}'.format(self.source)


class PrecomputedShuffle:
    """Simple mode: walk a pool that was shuffled once, up front."""

    def indices(self, pool_size: int, count: int) -> Iterator[int]:
        """Generate 0, 1, 2... wrapping around the pool."""
        for n in range(count):
            yield n % pool_size

    def __str__(self):
        """Human-readable representation."""
        return 'precomputed shuffle'


def sample(pool: Sequence[str], count: int, strategy) -> List[str]:
    """
    Select `count` words (with repetition) from `pool` using `strategy`.

    Any entropy failure propagates, so either all words are returned or none.
    """
    if count < 1:
        raise ValueError('word count must be positive, got {}'.format(count))
    if not pool:
        raise ValueError('cannot sample from an empty pool')

    pool_size = len(pool)
    words = [pool[index] for index in strategy.indices(pool_size, count)]
    assert len(words) == count, f"{len(words)=} != {count=}"
    return words
