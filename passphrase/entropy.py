#!/usr/bin/env python3
"""
Entropy Reporting
=================
Estimates how unpredictable a passphrase is from the sizes of the word
lists it was drawn from, and how long a brute-force attack would take.

Each word list contributes log2(len(list)) bits per slot. The phrase pattern
uses adjectives and nouns twice, so their bits count twice.

Usage:
    from passphrase.entropy import build_report

    report = build_report({'adjectives': adjs, 'nouns': nouns, 'verbs': verbs})
    for line in report.lines():
        print(line)
"""

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from .config import WORD_TYPES
from .settings import get_setting


# Word list used by each slot of the phrase pattern
PHRASE_PATTERN = ('adjectives', 'nouns', 'verbs', 'adjectives', 'nouns')

DEFAULT_GUESSES_PER_SECOND = 1000

MINUTE = 60
HOUR = MINUTE * 60
DAY = HOUR * 24
WEEK = DAY * 7
MONTH = DAY * 30  # Approximation
YEAR = DAY * 365


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class WordListStats:
    """Size and entropy of a single word list."""
    word_type: str
    length: int
    bits: float
    path: Optional[Path] = None

    @property
    def bits_label(self) -> str:
        """Exponent as shown in reports: whole numbers without decimals."""
        if self.bits % 1 == 0:
            return str(int(self.bits))
        return f"{self.bits:.2f}"


@dataclass
class EntropyReport:
    """Entropy estimate for a passphrase built from three word lists."""
    stats: Dict[str, WordListStats] = field(default_factory=dict)
    guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND

    @property
    def slot_bits(self) -> List[float]:
        return [self.stats[word_type].bits for word_type in PHRASE_PATTERN]

    @property
    def entropy(self) -> float:
        return combined_entropy(
            self.stats['adjectives'].bits,
            self.stats['nouns'].bits,
            self.stats['verbs'].bits,
        )

    @property
    def seconds(self) -> float:
        return estimate_seconds(self.entropy, self.guesses_per_second)

    @property
    def crack_time(self) -> str:
        return cracking_time(self.seconds)

    def lines(self) -> List[str]:
        """Render the report as human-readable lines."""
        lines = []
        for word_type in WORD_TYPES:
            s = self.stats[word_type]
            if s.path is not None:
                lines.append(f"The supplied {word_type} list is located at {s.path}.")
            lines.append(
                f"Your {word_type} word list contains {s.length} words, "
                f"or 2^{s.bits_label} words."
            )

        terms = ' + '.join(str(round(bits, 2)) for bits in self.slot_bits)
        lines.append(
            f"A passphrase from this list will have roughly "
            f"{int(self.entropy)} ({terms}) bits of entropy."
        )
        lines.append(
            f"Estimated time to crack this passphrase "
            f"(at {self.guesses_per_second:,.0f} guesses per second): {self.crack_time}"
        )
        lines.append("")
        return lines


# =============================================================================
# Calculations
# =============================================================================

def word_bits(count: int) -> float:
    """Bits of entropy contributed by one draw from ``count`` words."""
    return math.log2(count)


def combined_entropy(adjective_bits: float, noun_bits: float, verb_bits: float) -> float:
    """Total bits for the adjective-noun-verb-adjective-noun pattern."""
    return adjective_bits + noun_bits + verb_bits + adjective_bits + noun_bits


def estimate_seconds(entropy: float, guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND) -> float:
    """Seconds needed to try every combination (entropy truncated to whole bits)."""
    return (2 ** int(entropy)) / guesses_per_second


def cracking_time(seconds: float) -> str:
    """
    Describe a duration in seconds as a rough, human-readable bucket.

    Buckets are checked in order and the first match wins; counts are
    truncated, so 3700 seconds is "about 1 hours".
    """
    if seconds < MINUTE:
        return "less than a minute"
    if seconds < MINUTE * 5:
        return "less than 5 minutes"
    if seconds < MINUTE * 10:
        return "less than 10 minutes"
    if seconds < HOUR:
        return "less than an hour"
    if seconds < DAY:
        return f"about {int(seconds / HOUR)} hours"
    if seconds < DAY * 14:
        return f"about {int(seconds / DAY)} days"
    if seconds < MONTH * 2:
        return f"about {int(seconds / WEEK)} weeks"
    if seconds < YEAR * 2:
        return f"about {int(seconds / MONTH)} months"
    return f"about {int(seconds / YEAR)} years"


# =============================================================================
# Reports
# =============================================================================

def build_report(wordlists: Mapping[str, Sequence[str]],
                 paths: Optional[Mapping[str, Path]] = None,
                 guesses_per_second: Optional[float] = None) -> EntropyReport:
    """
    Build an entropy report for three word collections.

    Parameters
    ----------
    wordlists : mapping
        ``{'adjectives': [...], 'nouns': [...], 'verbs': [...]}``
    paths : mapping, optional
        Source file per word type, shown in the report
    guesses_per_second : float, optional
        Attack speed; defaults to ``report.guesses_per_second`` in app.yaml
    """
    if guesses_per_second is None:
        guesses_per_second = get_setting('report.guesses_per_second', DEFAULT_GUESSES_PER_SECOND)
    paths = paths or {}

    stats = {}
    for word_type in WORD_TYPES:
        words = wordlists[word_type]
        stats[word_type] = WordListStats(
            word_type=word_type,
            length=len(words),
            bits=word_bits(len(words)),
            path=paths.get(word_type),
        )
    return EntropyReport(stats=stats, guesses_per_second=guesses_per_second)


def verbose_reports(adjectives: Sequence[str], nouns: Sequence[str],
                    verbs: Sequence[str], config=None,
                    sink: Callable[[str], None] = print) -> EntropyReport:
    """Build the entropy report and write each of its lines to ``sink``."""
    paths = None
    if config is not None:
        paths = {word_type: getattr(config, word_type) for word_type in WORD_TYPES}

    report = build_report(
        {'adjectives': adjectives, 'nouns': nouns, 'verbs': verbs},
        paths=paths,
    )
    for line in report.lines():
        sink(line)
    return report


__all__ = [
    'WORD_TYPES',
    'PHRASE_PATTERN',
    'WordListStats',
    'EntropyReport',
    'word_bits',
    'combined_entropy',
    'estimate_seconds',
    'cracking_time',
    'build_report',
    'verbose_reports',
]
