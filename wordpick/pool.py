"""Recover a pool of candidate words from a line-oriented dictionary."""
import logging
import os
import re
from typing import Iterable, Optional, Sequence, Tuple

log = logging.getLogger(__name__)

DICT_DIR = '/usr/share/dict'
# Ordered by preference; word counts are for lengths 3-8
DEFAULT_DICTIONARIES = tuple(os.path.join(DICT_DIR, name) for name in (
    'american-english',         # Ubuntu    ~40,000 words
    'american-english-large',   # Ubuntu    ~66,000 words
    'american-english-huge',    # Ubuntu   ~120,000 words
    'american-english-insane',  # Ubuntu   ~200,000 words
    'web2',                     # FreeBSD   ~85,000 words
    'words',                    # symlink in both Ubuntu/FreeBSD
))

_word_regexp = re.compile(r'[a-zA-Z]+')


class Error(Exception):
    """Dictionary-related error."""


class NoDictionaryFoundError(Error):
    """None of the candidate dictionaries is usable."""

    def __init__(self, tried):
        """Keep the list of tried paths for diagnostics."""
        super().__init__('Failed to locate a dictionary. I tried:\n  ' + '\n  '.join(tried))
        self.tried = list(tried)


class EmptyPoolError(Error):
    """No dictionary entry passed the filters."""

    def __init__(self, source, min_len, max_len):
        """Keep the source and bounds for diagnostics."""
        super().__init__('Failed to find any words of length {}-{}! Source: {}'.format(
            min_len, max_len, source))
        self.source = source
        self.min_len = min_len
        self.max_len = max_len


def find_dictionary(candidates: Optional[Sequence[str]] = None) -> str:
    """Return the first existing non-empty dictionary file."""
    if candidates is None:
        candidates = DEFAULT_DICTIONARIES
    for path in candidates:
        try:
            if os.path.getsize(path) > 0:
                log.debug('found dictionary: %s', path)
                return path
        except OSError:
            continue
    raise NoDictionaryFoundError(candidates)


def normalize_bounds(min_len: int, max_len: int) -> Tuple[int, int]:
    """Make sure min_len <= max_len, swapping (with a warning) if needed."""
    if min_len > max_len:
        log.warning('Swapping min/max... (%d > %d)', min_len, max_len)
        min_len, max_len = max_len, min_len
    return min_len, max_len


def build_pool(lines: Iterable[str], min_len: int, max_len: int,
               shuffler=None, source_name: Optional[str] = None) -> Tuple[str, ...]:
    """
    Filter dictionary lines into a tuple of unique lower-cased words.

    Only purely alphabetic entries of length min_len..max_len are kept.
    If `shuffler` (e.g. a `random.Random` instance) is given, the pool
    order is randomized with it; otherwise first-seen order is kept.
    """
    found = {}
    for line in lines:
        word = line.rstrip('\r\n')
        # Skip the entry if it is too short or too long:
        if not min_len <= len(word) <= max_len:
            continue
        # Only consider entries that are purely alphabetic:
        if not _word_regexp.fullmatch(word):
            continue
        # Ignore capitalization:
        found.setdefault(word.lower(), None)

    words = list(found)
    if not words:
        raise EmptyPoolError(source_name, min_len, max_len)
    if shuffler is not None:
        shuffler.shuffle(words)
    log.debug('recovered %d words of length %d-%d', len(words), min_len, max_len)
    return tuple(words)


def load_pool(path: str, min_len: int, max_len: int, shuffler=None) -> Tuple[str, ...]:
    """Load and filter the dictionary file at `path`."""
    try:
        file = open(path, encoding='utf-8', errors='replace')  # pylint: disable=consider-using-with
    except OSError as e:
        log.debug('failed to read %s: %s', path, e)
        raise NoDictionaryFoundError([path]) from e
    with file:
        return build_pool(file, min_len, max_len, shuffler=shuffler, source_name=path)
