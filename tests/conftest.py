"""Shared fixtures for pass-phrase tests."""

import random
import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


ADJECTIVES = ["big", "small"]
NOUNS = ["cat", "dog"]
VERBS = ["runs", "jumps"]


class ScriptedRandom:
    """Random source that replays fixed randint results and picks the first choice."""

    def __init__(self, randints=()):
        self.randints = list(randints)

    def randint(self, a, b):
        value = self.randints.pop(0)
        assert a <= value <= b
        return value

    def choice(self, seq):
        return seq[0]


def write_words(path: Path, words) -> Path:
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def wordfiles(tmp_path):
    """Small adjective, noun and verb files."""
    return {
        'adjectives': write_words(tmp_path / "adjectives.txt", ADJECTIVES),
        'nouns': write_words(tmp_path / "nouns.txt", NOUNS),
        'verbs': write_words(tmp_path / "verbs.txt", VERBS),
    }


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at an empty directory so ~/.pass-phrase is never found."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def rng():
    return random.Random(1234)
