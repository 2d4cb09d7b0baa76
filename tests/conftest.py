"""Pytest configuration and shared fixtures for the sp test suite."""

import io
import logging

import pytest

from search.highlighter import PLAIN_MARKERS, Highlighter
from search.line_processor import LineProcessor
from search.models import EngineConfig
from search.pattern_matcher import PatternMatcher
from utils.output_sink import OutputSink


class BrokenStream(io.StringIO):
    """Output stream whose reader has gone away."""

    def write(self, s):
        raise BrokenPipeError(32, "Broken pipe")


class FailingInput:
    """Input stream that yields some lines and then fails."""

    def __init__(self, lines, error=None):
        self.lines = list(lines)
        self.error = error or OSError(5, "Input/output error")
        self.consumed = 0

    def __iter__(self):
        for line in self.lines:
            self.consumed += 1
            yield line
        raise self.error


class UntouchableInput:
    """Input stream that must never be read."""

    def __iter__(self):
        raise AssertionError("input was read")


@pytest.fixture(autouse=True)
def isolated_logging():
    """Drop the console/file handlers setup_logger() installs on the root logger."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def sink(output):
    return OutputSink(output)


@pytest.fixture
def make_processor():
    def _make(pattern, filter_mode=False):
        config = EngineConfig(pattern=pattern, filter_mode=filter_mode)
        return LineProcessor(config, PatternMatcher(pattern), Highlighter(PLAIN_MARKERS))

    return _make


def as_input(lines):
    return io.StringIO("".join(f"{line}\n" for line in lines))


def strip_markers(text, markers):
    return text.replace(markers.start, "").replace(markers.end, "")
