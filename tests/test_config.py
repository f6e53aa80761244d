"""
Tests for Configuration
=======================
Tests for Config and validate_options() in passphrase/config.py.
"""

import random
from pathlib import Path

import pytest

from conftest import write_words
from passphrase.config import (
    Config,
    default_wordfile_locations,
    find_wordfile,
    validate_options,
)
from passphrase.errors import InvalidArgument, MissingWordFile


class TestConfigDefaults:
    """Tests for defaults loaded from app.yaml."""

    def test_from_settings(self):
        config = Config.from_settings()
        assert config.num == 1
        assert config.min_length == 0
        assert config.max_length == 20
        assert config.separator == " "
        assert config.valid_chars == "."
        assert config.make_leet is False
        assert config.rand is not None

    def test_overrides(self):
        config = Config.from_settings(num=3, separator="-")
        assert config.num == 3
        assert config.separator == "-"

    def test_none_overrides_ignored(self):
        config = Config.from_settings(num=None, separator=None)
        assert config.num == 1
        assert config.separator == " "

    def test_unknown_option(self):
        with pytest.raises(InvalidArgument):
            Config.from_settings(colour="red")

    def test_random_source_kept(self):
        rand = random.Random(1)
        assert Config.from_settings(rand=rand).rand is rand


class TestValidateNumbers:
    """Tests for numeric validation."""

    @pytest.mark.parametrize("num", [0, -1])
    def test_rejects_non_positive_num(self, wordfiles, num):
        with pytest.raises(InvalidArgument):
            validate_options(Config(num=num, **wordfiles))

    def test_rejects_inverted_lengths(self, wordfiles):
        with pytest.raises(InvalidArgument):
            validate_options(Config(min_length=10, max_length=5, **wordfiles))

    def test_equal_lengths_allowed(self, wordfiles):
        config = validate_options(Config(min_length=5, max_length=5, **wordfiles))
        assert config.min_length == config.max_length == 5

    def test_rejects_extra_arguments(self, wordfiles):
        with pytest.raises(InvalidArgument, match="Too many arguments"):
            validate_options(Config(**wordfiles), args=["stray"])


class TestValidateWordFiles:
    """Tests for word file resolution."""

    def test_explicit_paths_made_absolute(self, wordfiles, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = validate_options(Config(
            adjectives="adjectives.txt", nouns="nouns.txt", verbs="verbs.txt",
        ))
        assert config.adjectives == (tmp_path / "adjectives.txt").resolve()
        assert all(getattr(config, t).is_absolute() for t in ('adjectives', 'nouns', 'verbs'))

    def test_missing_explicit_file(self, wordfiles, tmp_path):
        missing = tmp_path / "missing.txt"
        with pytest.raises(MissingWordFile) as exc:
            validate_options(Config(adjectives=wordfiles['adjectives'],
                                    nouns=missing, verbs=wordfiles['verbs']))
        assert "nouns" in str(exc.value)
        assert str(missing.resolve()) in str(exc.value)

    def test_defaults_from_working_directory(self, wordfiles, tmp_path, monkeypatch, isolated_home):
        monkeypatch.chdir(tmp_path)
        config = validate_options(Config())
        assert config.verbs == (tmp_path / "verbs.txt").resolve()

    def test_defaults_from_home(self, tmp_path, monkeypatch, isolated_home):
        workdir = tmp_path / "work"
        workdir.mkdir()
        monkeypatch.chdir(workdir)
        store = isolated_home / ".pass-phrase"
        store.mkdir()
        for word_type in ('adjectives', 'nouns', 'verbs'):
            write_words(store / f"{word_type}.txt", ["word"])

        config = validate_options(Config())
        assert config.adjectives == (store / "adjectives.txt").resolve()

    def test_no_default_found(self, tmp_path, monkeypatch, isolated_home):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(MissingWordFile, match="adjectives") as exc:
            validate_options(Config())
        message = str(exc.value)
        assert str((tmp_path / "adjectives.txt").resolve()) in message
        assert str((isolated_home / ".pass-phrase" / "adjectives.txt").resolve()) in message

    def test_input_not_mutated(self, wordfiles, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        original = Config(adjectives="adjectives.txt", nouns="nouns.txt", verbs="verbs.txt")
        validate_options(original)
        assert original.adjectives == "adjectives.txt"

    def test_random_source_carried_over(self, wordfiles):
        rand = random.Random(3)
        assert validate_options(Config(rand=rand, **wordfiles)).rand is rand


class TestDiscovery:
    """Tests for default location helpers."""

    def test_locations_order(self, tmp_path, monkeypatch, isolated_home):
        monkeypatch.chdir(tmp_path)
        locations = default_wordfile_locations("nouns")
        assert locations == [
            (tmp_path / "nouns.txt").resolve(),
            (isolated_home / ".pass-phrase" / "nouns.txt").resolve(),
        ]

    def test_find_wordfile(self, wordfiles, tmp_path, monkeypatch, isolated_home):
        monkeypatch.chdir(tmp_path)
        assert find_wordfile("nouns") == Path(wordfiles['nouns']).resolve()
