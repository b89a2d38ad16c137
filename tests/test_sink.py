"""Tests for the output sink."""

import logging

from dnscewl.modules.permute.sink import OutputSink


def _sink(**kwargs) -> tuple[OutputSink, list[str]]:
    printed: list[str] = []
    return OutputSink(printed.append, **kwargs), printed


class TestOutputSink:
    """Tests for OutputSink filtering and collection."""

    def test_no_filters_prints_everything(self) -> None:
        sink, printed = _sink()
        sink.emit("example.com")
        sink.emit("one.one.com")
        assert printed == ["example.com", "one.one.com"]
        assert sink.results == ["example.com", "one.one.com"]
        assert sink.printed == 2

    def test_subdomains_only(self) -> None:
        sink, printed = _sink(subdomains_only=True)
        sink.emit("example.com")
        sink.emit("www.example.com")
        assert printed == ["www.example.com"]
        assert sink.results == ["example.com", "www.example.com"]

    def test_no_repeats(self) -> None:
        sink, printed = _sink(no_repeats=True)
        sink.emit("one.one.com")
        sink.emit("one.two.com")
        assert printed == ["one.two.com"]
        assert sink.results == ["one.one.com", "one.two.com"]

    def test_filters_compose(self) -> None:
        sink, printed = _sink(subdomains_only=True, no_repeats=True)
        for candidate in ("one.com", "one.one.com", "a.one.com"):
            sink.emit(candidate)
        assert printed == ["a.one.com"]
        assert sink.printed == 1
        assert len(sink.results) == 3

    def test_is_visible(self) -> None:
        sink, _ = _sink(subdomains_only=True)
        assert sink.is_visible("example.com") is False
        assert sink.is_visible("www.example.com") is True

    def test_repeat_detection_uses_injected_logger(self, caplog) -> None:
        logger = logging.getLogger("dnscewl.tests.sink")
        sink = OutputSink(lambda _: None, no_repeats=True, logger=logger)
        with caplog.at_level(logging.DEBUG, logger="dnscewl.tests.sink"):
            sink.emit("one.one.com")
        records = [r for r in caplog.records if r.name == "dnscewl.tests.sink"]
        assert [r.getMessage() for r in records] == ["Repeats found in one.one.com."]
