#!/usr/bin/env python3
"""
Phrase Assembly
===============
Builds passphrases in the fixed pattern adjective-noun-verb-adjective-noun.
"""

from typing import Sequence

from .rng import get_rng


def generate_passphrase(adjectives: Sequence[str], nouns: Sequence[str],
                        verbs: Sequence[str], separator: str = ' ',
                        rand=None) -> str:
    """Generate a single adjective-noun-verb-adjective-noun phrase."""
    rand = rand or get_rng()
    return separator.join([
        rand.choice(adjectives),
        rand.choice(nouns),
        rand.choice(verbs),
        rand.choice(adjectives),
        rand.choice(nouns),
    ])


def capitalise_phrase(phrase: str, separator: str = ' ') -> str:
    """Capitalise every separator-delimited word of a phrase."""
    if not separator:
        return phrase.capitalize()
    return separator.join(part.capitalize() for part in phrase.split(separator))


def passphrase(adjectives: Sequence[str], nouns: Sequence[str],
               verbs: Sequence[str], separator: str = ' ', num: int = 1,
               uppercase: bool = False, lowercase: bool = False,
               capitalise: bool = False, rand=None) -> str:
    """
    Generate ``num`` passphrases, one per line.

    Parameters
    ----------
    adjectives, nouns, verbs : sequence of str
        Non-empty word collections
    separator : str
        Joins the words of each phrase
    num : int
        Number of phrases
    uppercase, lowercase : bool
        Fold the whole output; uppercase wins when both are set
    capitalise : bool
        Capitalise each word of each phrase
    rand : random.Random, optional
        Random source; a seeded one makes the output reproducible

    Returns
    -------
    str
        Phrases joined with newlines
    """
    rand = rand or get_rng()

    phrases = []
    for _ in range(num):
        phrase = generate_passphrase(adjectives, nouns, verbs, separator, rand)
        if capitalise:
            phrase = capitalise_phrase(phrase, separator)
        phrases.append(phrase)

    all_phrases = '\n'.join(phrases)

    if uppercase:
        return all_phrases.upper()
    if lowercase:
        return all_phrases.lower()
    return all_phrases


__all__ = ['generate_passphrase', 'capitalise_phrase', 'passphrase']
