#!/usr/bin/env python3
"""
Random Sources
==============
Word sampling and leet substitution both take an explicit random source.
Anything with ``choice`` and ``randint`` works; ``random.Random`` instances
seeded by the caller give reproducible phrases.

Usage:
    from passphrase.rng import get_rng

    rng = get_rng()          # shared system-backed source
    rng = get_rng(seed=42)   # fresh, reproducible source
"""

import random
import secrets
from typing import Optional


# Shared instance used when the caller supplies nothing
_system_random = secrets.SystemRandom()


def get_rng(seed: Optional[int] = None) -> random.Random:
    """
    Get a random source.

    Parameters
    ----------
    seed : int, optional
        When given, a new ``random.Random`` seeded with it is returned.

    Returns
    -------
    random.Random
        The shared ``SystemRandom`` instance, or a seeded generator.
    """
    if seed is not None:
        return random.Random(seed)
    return _system_random


__all__ = ['get_rng']
