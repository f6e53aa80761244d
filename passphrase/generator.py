#!/usr/bin/env python3
"""
Passphrase Generator
====================
Runs the full pipeline: validate options, load the three word lists,
optionally report entropy, then build the phrases.

Usage:
    from passphrase import Config, generate

    config = Config.from_settings(adjectives='adjectives.txt', num=3)
    print(generate(config))
"""

import logging
from typing import Callable, Dict, List, Sequence

from .config import WORD_TYPES, Config, validate_options
from .entropy import verbose_reports
from .phrase import passphrase
from .wordlist import generate_wordlist

logger = logging.getLogger(__name__)


def load_wordlists(config: Config) -> Dict[str, List[str]]:
    """Load every word list named by an already validated config."""
    return {
        word_type: generate_wordlist(
            getattr(config, word_type),
            min_length=config.min_length,
            max_length=config.max_length,
            valid_chars=config.valid_chars,
            make_leet=config.make_leet,
            make_mini_leet=config.make_mini_leet,
            rand=config.rand,
        )
        for word_type in WORD_TYPES
    }


def generate(config: Config, args: Sequence[str] = (),
             sink: Callable[[str], None] = print) -> str:
    """
    Generate passphrases.

    Parameters
    ----------
    config : Config
        Generation options; validated here
    args : sequence of str
        Leftover positional arguments from the caller (must be empty)
    sink : callable
        Receives each verbose report line

    Returns
    -------
    str
        ``config.num`` phrases, one per line

    Raises
    ------
    PassPhraseError
        If validation or loading fails; nothing is generated in that case
    """
    config = validate_options(config, args)
    wordlists = load_wordlists(config)

    if config.verbose:
        verbose_reports(
            wordlists['adjectives'],
            wordlists['nouns'],
            wordlists['verbs'],
            config=config,
            sink=sink,
        )

    logger.debug(f"Generating {config.num} passphrase(s)")
    return passphrase(
        wordlists['adjectives'],
        wordlists['nouns'],
        wordlists['verbs'],
        separator=config.separator,
        num=config.num,
        uppercase=config.uppercase,
        lowercase=config.lowercase,
        capitalise=config.capitalise,
        rand=config.rand,
    )


__all__ = ['load_wordlists', 'generate']
