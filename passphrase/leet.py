#!/usr/bin/env python3
"""
Leet-Speak Transforms
=====================
Two word transforms:

- leet():      stochastic, may lengthen the word ("f" -> "ph")
- mini_leet(): deterministic single-character digit swaps
"""

from types import MappingProxyType

from .rng import get_rng


# =============================================================================
# Substitution Tables
# =============================================================================

LEET_LETTERS = MappingProxyType({
    'a': ('4', '@'), 'b': ('8',), 'c': ('(',), 'e': ('3',),
    'f': ('ph', 'pH'), 'g': ('9', '6'), 'h': ('#',),
    'i': ('1', '!', '|'), 'l': ('!', '|'), 'o': ('0', '()'),
    'q': ('kw',), 's': ('5', '$'), 't': ('7',), 'x': ('><',),
    'y': ('j',), 'z': ('2',),
})

MINI_LEET_LETTERS = MappingProxyType({
    'a': '4', 'b': '8', 'e': '3', 'g': '6',
    'i': '1', 'o': '0', 's': '5', 't': '7', 'z': '2',
})


# =============================================================================
# Transforms
# =============================================================================

def leet(word: str, rand=None) -> str:
    """
    Turn a word into leet-speak.

    Each letter with substitutes is swapped 4 times in 5. A letter that is
    kept gets uppercased 9 times in 10. Words ending in "s" swap the last
    output character for "zz" half of the time.

    Parameters
    ----------
    word : str
        Word to transform
    rand : random.Random, optional
        Random source (defaults to the shared system source)

    Returns
    -------
    str
        Transformed word; not deterministic unless ``rand`` is seeded
    """
    rand = rand or get_rng()
    geek_word = []

    for letter in word:
        subs = LEET_LETTERS.get(letter.lower())
        if subs is None:
            geek_word.append(letter)
        elif rand.randint(1, 5) % 5 != 0:
            geek_word.append(rand.choice(subs))
        elif rand.randint(1, 10) % 10 != 0:
            geek_word.append(letter.upper())
        else:
            geek_word.append(letter)

    result = ''.join(geek_word)
    if word.endswith(('s', 'S')) and rand.randint(1, 2) % 2 == 0:
        result = result[:-1] + 'zz'
    return result


def mini_leet(word: str) -> str:
    """Swap letters for look-alike digits, one character for one character."""
    return ''.join(MINI_LEET_LETTERS.get(letter.lower(), letter) for letter in word)


__all__ = ['LEET_LETTERS', 'MINI_LEET_LETTERS', 'leet', 'mini_leet']
