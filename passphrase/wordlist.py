#!/usr/bin/env python3
"""
Word List Loading
=================
Reads a word file (one word per line) and keeps the words that satisfy the
length and character constraints, optionally leet-transforming them.

The ``valid_chars`` option is placed inside a regex character class as-is,
so class syntax such as ``a-z`` or ``\\w`` is accepted. The default, ``.``,
stands for any character rather than a literal dot.

Blank lines are never candidates, even with ``min_length=0``: an empty word
would add an invisible phrase slot and inflate the reported entropy with a
choice nobody can tell apart from the separator. Files saved with a UTF-8
byte order mark are read as if it were absent.
"""

import logging
import re
from typing import List

from .errors import EmptyResult, InvalidArgument, WordFileDecodeError, WordFileNotFound
from .leet import leet, mini_leet
from .rng import get_rng
from .settings import resolve_path

logger = logging.getLogger(__name__)

ANY_CHAR = '.'


def build_char_pattern(valid_chars: str = ANY_CHAR) -> re.Pattern:
    """Compile the pattern every character of a candidate word must match."""
    char_class = ANY_CHAR if valid_chars == ANY_CHAR else f"[{valid_chars}]"
    try:
        return re.compile(f"{char_class}*")
    except re.error as e:
        raise InvalidArgument(
            f"Invalid valid characters '{valid_chars}': {e}"
        ) from e


def generate_wordlist(wordfile, min_length: int = 0, max_length: int = 20,
                      valid_chars: str = ANY_CHAR, make_leet: bool = False,
                      make_mini_leet: bool = False, rand=None) -> List[str]:
    """
    Load and filter a word list.

    Parameters
    ----------
    wordfile : str or Path
        Word file, one candidate per line
    min_length, max_length : int
        Inclusive word length bounds
    valid_chars : str
        Character class contents every character must match
    make_leet : bool
        Apply the full leet transform to accepted words
    make_mini_leet : bool
        Apply the mini leet transform (wins over ``make_leet``)
    rand : random.Random, optional
        Random source for the full leet transform

    Returns
    -------
    list of str
        Accepted words in file order

    Raises
    ------
    WordFileNotFound
        If the file cannot be opened
    WordFileDecodeError
        If the file is not UTF-8 text
    EmptyResult
        If no word passes the filter
    """
    rand = rand or get_rng()
    regexp = build_char_pattern(valid_chars)
    filepath = resolve_path(wordfile)

    words = []
    read = 0
    try:
        with open(filepath, 'r', encoding='utf-8-sig') as f:
            for line in f:
                read += 1
                word = line.strip()
                if not word or not min_length <= len(word) <= max_length:
                    continue
                if not regexp.fullmatch(word):
                    continue
                if make_mini_leet:
                    word = mini_leet(word)
                elif make_leet:
                    word = leet(word, rand)
                words.append(word)
    except OSError as e:
        raise WordFileNotFound(f"Could not find word file at {filepath}") from e
    except UnicodeDecodeError as e:
        raise WordFileDecodeError(
            f"Word file at {filepath} is not valid UTF-8 text."
        ) from e

    logger.debug(f"Loaded {len(words)}/{read} words from {filepath}")

    if not words:
        raise EmptyResult(
            f"Could not get enough words! This could be a result of either "
            f"{filepath} being too small, or your settings too strict."
        )
    return words


__all__ = ['build_char_pattern', 'generate_wordlist']
