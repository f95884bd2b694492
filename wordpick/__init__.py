"""Generate an unbiased list of dictionary words for passphrase construction."""
import argparse
import functools
import logging
import random
import sys

import configargparse

from . import formatting, pool, sampler, util
from .source import device, interface, simulator

__version__ = '0.1.0'

log = logging.getLogger(__name__)

DEFAULT_COUNT = 120
DEFAULT_MAX_LEN = 8
DEFAULT_MIN_LEN = 3
# Bytes of entropy used to seed the one-time pool shuffle
SEED_BYTES = 8


def _positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError('must be a positive integer: {!r}'.format(value))
    return number


def create_parser():
    """Create the command-line parser."""
    epilog = ('Words are drawn from a system dictionary using a cryptographic '
              'entropy source, in the spirit of https://xkcd.com/936/.')
    p = configargparse.ArgParser(
        default_config_files=['/etc/wordpick.config', '~/.config/wordpick.config'],
        description='Generate a random list of words to build passphrases from.',
        epilog=epilog)
    p.add_argument('-v', '--verbose', default=0, action='count')
    p.add_argument('--version', help='print the version info',
                   action='version', version='wordpick={}'.format(__version__))
    p.add_argument('--log-file', type=str, env_var='WORDPICK_LOG_FILE',
                   help='Path to the log file.')

    p.add_argument('count', nargs='?', type=_positive_int, default=DEFAULT_COUNT,
                   help='number of words to display (default: %(default)s)')
    p.add_argument('max_len', nargs='?', type=_positive_int, default=DEFAULT_MAX_LEN,
                   help='maximum word length (default: %(default)s)')
    p.add_argument('min_len', nargs='?', type=_positive_int, default=DEFAULT_MIN_LEN,
                   help='minimum word length (default: %(default)s)')
    p.add_argument('dictionary', nargs='?', default='',
                   help='dictionary file (default: first usable system dictionary)')

    p.add_argument('--source', type=str, default=device.DEFAULT_PATH,
                   env_var='WORDPICK_SOURCE',
                   help='Entropy device to read from (default: %(default)s).')
    p.add_argument('--simple', default=False, action='store_true',
                   env_var='WORDPICK_SIMPLE',
                   help='Use the entropy source only to shuffle the word list once, '
                        'instead of for every word.')
    p.add_argument('--simulate', type=int, default=None, metavar='SEED',
                   help='Use a deterministic pseudorandom source (INSECURE, for testing).')
    return p


def handle_errors(func):
    """Fail with non-zero exit code."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (pool.Error, interface.Error) as e:
            log.error('%s', e)
            return 1
    return wrapper


def create_source(args):
    """Select the entropy source requested on the command line."""
    if args.simulate is not None:
        return simulator.SimulatedSource(seed=args.simulate)
    return device.DeviceSource(path=args.source)


def _describe(words, min_len, max_len, path, entropy, strategy):
    note = ['Recovered {} words of length {}-{}'.format(len(words), min_len, max_len),
            '  Source: {}'.format(path)]
    if isinstance(strategy, sampler.PerDrawEntropy):
        note.append('  {} will be read {} bytes at a time for enhanced randomness'.format(
            entropy, sampler.byte_width(len(words))))
        if getattr(entropy, 'is_blocking', False):
            note.append("    This is a 'blocking' random source, it may take a while.")
            note.append("    You can speed up the process by 'doing things' in other windows.")
    return '\n'.join(note)


def run(args, stdout=None):
    """Pick the words and print them, wrapped to the terminal width."""
    stdout = stdout or sys.stdout
    min_len, max_len = pool.normalize_bounds(args.min_len, args.max_len)
    path = args.dictionary or pool.find_dictionary()

    entropy = create_source(args)
    with entropy:
        shuffler = random.Random(util.bytes2num(entropy.read(SEED_BYTES)))
        words = pool.load_pool(path, min_len, max_len, shuffler=shuffler)
        if args.simple:
            strategy = sampler.PrecomputedShuffle()
        else:
            strategy = sampler.PerDrawEntropy(entropy)
        log.warning(_describe(words, min_len, max_len, path, entropy, strategy))
        selected = sampler.sample(words, args.count, strategy)

    stdout.write(formatting.wrap_words(selected))
    return 0


@handle_errors
def main(argv=None):
    """Parse command-line arguments."""
    args = create_parser().parse_args(argv)
    util.setup_logging(verbosity=args.verbose, filename=args.log_file)
    return run(args)
