"""Deterministic entropy for tests and dry runs.

NEVER use this source for real passphrases: its output is fully
determined by the seed.
"""

import logging
import random

from .. import util
from . import interface

log = logging.getLogger(__name__)


class SimulatedSource(interface.EntropySource):
    """Pseudorandom byte stream, reproducible from a seed."""

    def __init__(self, seed=0, limit=None):
        """Optionally stop supplying bytes after `limit` bytes in total."""
        super().__init__()
        self.seed = seed
        self.limit = limit
        self.consumed = 0

    def open(self):
        """Each opened stream owns its own generator."""
        log.warning('using simulated entropy (seed=%r): output is NOT secure', self.seed)
        self.consumed = 0
        return random.Random(self.seed)

    def close(self):
        """Nothing to release."""

    def read(self, size):
        """Return the next `size` pseudorandom bytes."""
        if self.limit is not None and self.consumed + size > self.limit:
            available = max(self.limit - self.consumed, 0)
            self.consumed += available
            raise interface.EntropyExhaustedError(self, size, available)
        self.consumed += size
        return util.num2bytes(self.conn.getrandbits(8 * size), size)

    def __str__(self):
        """Human-readable representation."""
        return 'simulator(seed={!r})'.format(self.seed)
