"""Entropy supplied by a character device or a regular file."""

import logging

from .. import util
from . import interface

log = logging.getLogger(__name__)

DEFAULT_PATH = '/dev/random'
BLOCKING_PATHS = ('/dev/random',)


class DeviceSource(interface.EntropySource):
    """Read raw bytes from a kernel random device (or any binary file)."""

    def __init__(self, path=DEFAULT_PATH):
        """Remember which device to open."""
        super().__init__()
        self.path = path

    @property
    def is_blocking(self):
        """True if reads may stall until the kernel gathers more entropy."""
        return self.path in BLOCKING_PATHS

    def open(self):
        """Open the device unbuffered, so no entropy is read ahead."""
        log.debug('opening %s', self.path)
        try:
            return open(self.path, 'rb', buffering=0)  # pylint: disable=consider-using-with
        except OSError as e:
            raise interface.EntropySourceUnavailableError(
                'Failed to read {}: {}'.format(self.path, e)) from e

    def read(self, size):
        """Read exactly `size` bytes, waiting on a blocking device if needed."""
        log.debug('reading %d bytes from %s', size, self.path)
        try:
            return util.recv(self.conn, size)
        except EOFError as e:
            received, = e.args
            raise interface.EntropyExhaustedError(self, size, received) from e

    def __str__(self):
        """Human-readable representation."""
        return self.path
