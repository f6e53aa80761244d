#!/usr/bin/env python3
"""
Configuration Management
========================
Generation options and their validation.

Defaults come from ``configs/app.yaml``. ``validate_options()`` is the only
place options are checked; everything downstream trusts its result.
"""

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, List, Optional, Sequence

from .errors import InvalidArgument, MissingWordFile
from .rng import get_rng
from .settings import get_setting, resolve_path

logger = logging.getLogger(__name__)


WORD_TYPES = ('adjectives', 'nouns', 'verbs')

DEFAULT_SEARCH_PATHS = ['{word_type}.txt', '~/.pass-phrase/{word_type}.txt']


# =============================================================================
# Application Configuration
# =============================================================================

@dataclass
class Config:
    """Passphrase generation options."""
    adjectives: Optional[Path] = None
    nouns: Optional[Path] = None
    verbs: Optional[Path] = None
    min_length: int = 0
    max_length: int = 20
    valid_chars: str = '.'
    make_leet: bool = False
    make_mini_leet: bool = False
    uppercase: bool = False
    lowercase: bool = False
    capitalise: bool = False
    verbose: bool = False
    separator: str = ' '
    num: int = 1
    rand: Any = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        if self.rand is None:
            self.rand = get_rng()

    @classmethod
    def from_settings(cls, **overrides) -> 'Config':
        """
        Build a config from the ``defaults`` section of app.yaml.

        Keyword arguments override the file; ``None`` values are ignored so
        unset CLI flags fall through to the defaults.
        """
        known = {f.name for f in fields(cls)}
        defaults = get_setting('defaults', {}) or {}
        values = {k: v for k, v in defaults.items() if k in known}
        values.update({k: v for k, v in overrides.items() if v is not None})

        unknown = set(values) - known
        if unknown:
            raise InvalidArgument(f"Unknown options: {', '.join(sorted(unknown))}")
        return cls(**values)


# =============================================================================
# Word File Discovery
# =============================================================================

def default_wordfile_locations(word_type: str) -> List[Path]:
    """Candidate locations for a word file that was not given explicitly."""
    templates = get_setting('wordfiles.search_paths') or DEFAULT_SEARCH_PATHS
    return [resolve_path(t.format(word_type=word_type)) for t in templates]


def find_wordfile(word_type: str) -> Path:
    """Return the first existing default location for ``word_type``."""
    locations = default_wordfile_locations(word_type)
    for location in locations:
        if location.exists():
            logger.debug(f"Using default {word_type} word file {location}")
            return location
    raise MissingWordFile(
        f"Could not find {word_type} word file, or word file does not exist. "
        f"Looked in: {', '.join(str(p) for p in locations)}"
    )


# =============================================================================
# Validation
# =============================================================================

def validate_options(config: Config, args: Sequence[str] = ()) -> Config:
    """
    Check options and fill in word file locations.

    Parameters
    ----------
    config : Config
        Options as collected from the caller
    args : sequence of str
        Leftover positional arguments; any are an error

    Returns
    -------
    Config
        A normalized copy with absolute, existing word file paths

    Raises
    ------
    InvalidArgument
        If ``num`` is not positive, the length bounds are inverted or
        there are leftover arguments
    MissingWordFile
        If a word file does not exist
    """
    if config.num <= 0:
        raise InvalidArgument(
            "Little point running the script if you "
            "don't generate even a single passphrase."
        )

    if config.max_length < config.min_length:
        raise InvalidArgument(
            "The maximum length of a word can not be "
            "lesser then minimum length."
        )

    if args:
        raise InvalidArgument("Too many arguments.")

    wordfiles = {}
    for word_type in WORD_TYPES:
        location = getattr(config, word_type)
        if location is None:
            wordfiles[word_type] = find_wordfile(word_type)
            continue

        path = resolve_path(location)
        if not path.exists():
            raise MissingWordFile(
                f"Could not open the specified {word_type} word file at {path}."
            )
        wordfiles[word_type] = path

    return replace(config, **wordfiles)


__all__ = [
    'WORD_TYPES',
    'Config',
    'default_wordfile_locations',
    'find_wordfile',
    'validate_options',
]
