"""Tests for loading targets and word lists."""

import io
import logging
from pathlib import Path

import pytest

from dnscewl.modules.permute.errors import ConfigurationError
from dnscewl.modules.permute.wordlists import load_word_sources, read_word_file


class TestReadWordFile:
    """Tests for read_word_file."""

    def test_reads_lines(self, wordlist) -> None:
        path = wordlist("words.txt", "dev", "stage")
        assert read_word_file(path) == ["dev", "stage"]

    def test_skips_blank_lines_and_crlf(self, tmp_path: Path) -> None:
        path = tmp_path / "words.txt"
        path.write_bytes(b"dev\r\n\r\n  \nstage\r\n")
        assert read_word_file(path) == ["dev", "stage"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Can not read"):
            read_word_file(tmp_path / "missing.txt")

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.txt"
        path.write_text("")
        with pytest.raises(ConfigurationError, match="no words read"):
            read_word_file(path)


class TestLoadWordSources:
    """Tests for load_word_sources."""

    def test_requires_a_word_list(self) -> None:
        with pytest.raises(ConfigurationError, match="set list, append or prepend"):
            load_word_sources(target="example.com")

    def test_append_and_target(self, wordlist) -> None:
        sources = load_word_sources(target="example.com", append_list=wordlist("a.txt", "dev"))
        assert sources.targets == ("example.com",)
        assert sources.append == ("dev",)
        assert sources.prepend == ()

    def test_append_ignores_prepend(self, wordlist, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            sources = load_word_sources(
                target="example.com",
                append_list=wordlist("a.txt", "dev"),
                prepend_list=wordlist("p.txt", "www"),
            )
        assert sources.prepend == ()
        assert "ignoring prepend list" in caplog.text

    def test_prepend_only(self, wordlist) -> None:
        sources = load_word_sources(target="example.com", prepend_list=wordlist("p.txt", "www"))
        assert sources.prepend == ("www",)

    def test_target_and_target_list_combine(self, wordlist) -> None:
        sources = load_word_sources(
            target="one.com",
            target_list=wordlist("t.txt", "two.com", "three.com"),
            append_list=wordlist("a.txt", "x"),
        )
        assert sources.targets == ("one.com", "two.com", "three.com")

    def test_targets_from_stdin(self, wordlist) -> None:
        sources = load_word_sources(
            append_list=wordlist("a.txt", "x"),
            stdin=io.StringIO("one.com\n\ntwo.com\n"),
        )
        assert sources.targets == ("one.com", "two.com")

    def test_sets(self, wordlist) -> None:
        sources = load_word_sources(
            target="dev.example.com",
            set_list=wordlist("s.txt", "dev", "stage", "dev"),
            exclude_list=wordlist("e.txt", "skip.com"),
            extension_list=wordlist("x.txt", ".org"),
        )
        assert sources.substitutions == frozenset({"dev", "stage"})
        assert sources.exclusions == frozenset({"skip.com"})
        assert sources.extensions == (".org",)

    def test_empty_target_list_is_fatal(self, wordlist, tmp_path: Path) -> None:
        empty = tmp_path / "targets.txt"
        empty.write_text("\n")
        with pytest.raises(ConfigurationError, match="no words read"):
            load_word_sources(target_list=empty, append_list=wordlist("a.txt", "x"))

    def test_unreadable_set_list_is_fatal(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Can not read"):
            load_word_sources(target="a.com", set_list=tmp_path / "nope.txt")
