#!/usr/bin/env python3
"""
pass-phrase CLI
===============
Command-line interface for passphrase generation.

Usage:
    pass-phrase -n 5
    pass-phrase --adjectives adj.txt --nouns nouns.txt --verbs verbs.txt
    pass-phrase --mini-leet --separator - --capitalise -V
"""

import argparse
import logging
import sys

from passphrase import __version__
from passphrase.config import Config
from passphrase.errors import PassPhraseError
from passphrase.generator import generate
from passphrase.rng import get_rng


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def result(self, text: str):
        print(text)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pass-phrase',
        description='Generate memorable adjective-noun-verb-adjective-noun passphrases',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -n 5
  %(prog)s --adjectives adj.txt --nouns nouns.txt --verbs verbs.txt
  %(prog)s --min 3 --max 8 --valid-chars a-z
  %(prog)s --mini-leet --separator - --capitalise -V
"""
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress the verbose report')
    parser.add_argument('--debug', action='store_true', help='Log debug messages to stderr')

    # --- word files ---
    g = parser.add_argument_group('word files')
    g.add_argument('--adjectives', metavar='FILE', help='Adjectives word file')
    g.add_argument('--nouns', metavar='FILE', help='Nouns word file')
    g.add_argument('--verbs', metavar='FILE', help='Verbs word file')

    # --- filtering ---
    g = parser.add_argument_group('word filtering')
    g.add_argument('--min', dest='min_length', type=int, help='Minimum word length (default: 0)')
    g.add_argument('--max', dest='max_length', type=int, help='Maximum word length (default: 20)')
    g.add_argument('--valid-chars', dest='valid_chars',
                   help="Regex character class of allowed characters, e.g. 'a-z' (default: any)")
    g.add_argument('--leet', '-l', dest='make_leet', action='store_true', default=None,
                   help='Turn words into leet-speak')
    g.add_argument('--mini-leet', '-m', dest='make_mini_leet', action='store_true', default=None,
                   help='Swap letters for look-alike digits only')

    # --- output ---
    g = parser.add_argument_group('output')
    g.add_argument('-n', '--num', type=int, help='Number of passphrases (default: 1)')
    g.add_argument('-s', '--separator', help="Word separator (default: ' ')")
    g.add_argument('--uppercase', '-u', action='store_true', default=None,
                   help='Uppercase the output')
    g.add_argument('--lowercase', '-L', action='store_true', default=None,
                   help='Lowercase the output')
    g.add_argument('--capitalise', '--capitalize', '-C', dest='capitalise',
                   action='store_true', default=None, help='Capitalise each word')
    g.add_argument('--verbose', '-V', action='store_true', default=None,
                   help='Report word list sizes, entropy and cracking time')
    g.add_argument('--seed', type=int, help='Seed the random source for reproducible output')

    parser.add_argument('extra', nargs='*', help=argparse.SUPPRESS)
    return parser


# =============================================================================
# Main
# =============================================================================

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s %(name)s %(levelname)s: %(message)s',
            stream=sys.stderr,
        )

    out = Output(quiet=args.quiet)

    try:
        config = Config.from_settings(
            adjectives=args.adjectives,
            nouns=args.nouns,
            verbs=args.verbs,
            min_length=args.min_length,
            max_length=args.max_length,
            valid_chars=args.valid_chars,
            make_leet=args.make_leet,
            make_mini_leet=args.make_mini_leet,
            uppercase=args.uppercase,
            lowercase=args.lowercase,
            capitalise=args.capitalise,
            verbose=args.verbose,
            separator=args.separator,
            num=args.num,
            rand=get_rng(args.seed),
        )
        phrases = generate(config, args=args.extra, sink=out.print)
    except KeyboardInterrupt:
        out.print("\nCancelled.")
        return 130
    except PassPhraseError as e:
        out.error(str(e))
        return 1

    out.result(phrases)
    return 0


if __name__ == '__main__':
    sys.exit(main())
