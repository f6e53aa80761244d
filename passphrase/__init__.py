#!/usr/bin/env python3
"""
pass-phrase - Memorable Passphrase Generator
============================================

Builds passphrases like "brave otter juggles quiet lantern" from three word
lists, with optional leet-speak and an entropy estimate.

Quick Start
-----------
    from passphrase import Config, generate

    config = Config.from_settings(
        adjectives='adjectives.txt',
        nouns='nouns.txt',
        verbs='verbs.txt',
        num=5,
        capitalise=True,
    )
    print(generate(config))

Modules
-------
    passphrase.wordlist  - Word list loading and filtering
    passphrase.leet      - Leet-speak transforms
    passphrase.phrase    - Phrase assembly
    passphrase.entropy   - Entropy and cracking time estimates
    passphrase.config    - Options and validation
    passphrase.generator - Full generation pipeline

CLI Usage
---------
    python -m passphrase -n 5 --capitalise
    python -m passphrase --mini-leet -s - -V
"""

__version__ = "1.0.0"
__author__ = "pass-phrase"

from .config import (
    WORD_TYPES,
    Config,
    validate_options,
    find_wordfile,
)
from .entropy import (
    EntropyReport,
    WordListStats,
    build_report,
    cracking_time,
    verbose_reports,
    word_bits,
)
from .errors import (
    PassPhraseError,
    InvalidArgument,
    MissingWordFile,
    WordFileNotFound,
    WordFileDecodeError,
    EmptyResult,
)
from .generator import generate, load_wordlists
from .leet import LEET_LETTERS, MINI_LEET_LETTERS, leet, mini_leet
from .phrase import generate_passphrase, passphrase
from .rng import get_rng
from .wordlist import generate_wordlist

__all__ = [
    '__version__',
    # Options
    'WORD_TYPES',
    'Config',
    'validate_options',
    'find_wordfile',
    # Pipeline
    'generate',
    'load_wordlists',
    'generate_wordlist',
    'generate_passphrase',
    'passphrase',
    # Leet
    'LEET_LETTERS',
    'MINI_LEET_LETTERS',
    'leet',
    'mini_leet',
    # Entropy
    'EntropyReport',
    'WordListStats',
    'build_report',
    'cracking_time',
    'verbose_reports',
    'word_bits',
    # Errors
    'PassPhraseError',
    'InvalidArgument',
    'MissingWordFile',
    'WordFileNotFound',
    'WordFileDecodeError',
    'EmptyResult',
    # Random
    'get_rng',
]
