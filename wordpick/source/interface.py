"""Entropy source abstraction layer."""

import logging

log = logging.getLogger(__name__)


class Error(Exception):
    """Entropy-related error."""


class EntropySourceUnavailableError(Error):
    """Entropy source could not be opened."""


class EntropyExhaustedError(Error):
    """Entropy source failed to supply the requested bytes."""

    def __init__(self, source, requested, received=0):
        """Keep the byte counts for diagnostics."""
        super().__init__('{} supplied {} of {} requested bytes'.format(
            source, received, requested))
        self.requested = requested
        self.received = received


class EntropySource:
    """Abstract supplier of raw random bytes, consumed strictly in order."""

    def __init__(self):
        """C-tor."""
        self.conn = None

    def open(self):
        """Open the underlying stream, otherwise raise EntropySourceUnavailableError."""
        raise NotImplementedError()

    def close(self):
        """Close the underlying stream.

        By default, close the underlying connection. Overriding classes
        can perform their own cleanup.
        """
        self.conn.close()

    def __enter__(self):
        """Allow usage as context manager."""
        self.conn = self.open()
        return self

    def __exit__(self, *args):
        """Close and mark as released."""
        try:
            self.close()
        except Exception as e:  # pylint: disable=broad-except
            log.exception('close failed: %s', e)
        self.conn = None

    def read(self, size):
        """Return exactly `size` bytes, or raise EntropyExhaustedError."""
        raise NotImplementedError()

    def __str__(self):
        """Human-readable representation."""
        return '{}'.format(self.__class__.__name__)
