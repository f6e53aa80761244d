#!/usr/bin/env python3
"""
Errors
======
Every failure raised by the generation pipeline derives from PassPhraseError,
so callers can catch a single type and show the message to the user.
"""


class PassPhraseError(Exception):
    """Base class for pass-phrase errors."""


class InvalidArgument(PassPhraseError, ValueError):
    """A numeric or structural option is out of range."""


class MissingWordFile(PassPhraseError):
    """A configured or default word file does not exist."""


class WordFileNotFound(PassPhraseError, FileNotFoundError):
    """A word file could not be opened when it was read."""


class WordFileDecodeError(PassPhraseError):
    """A word file is not valid UTF-8 text."""


class EmptyResult(PassPhraseError):
    """No words survived filtering for a word list."""


__all__ = [
    'PassPhraseError',
    'InvalidArgument',
    'MissingWordFile',
    'WordFileNotFound',
    'WordFileDecodeError',
    'EmptyResult',
]
