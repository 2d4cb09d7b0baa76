import re

from search.errors import PatternCompileError
from search.models import MatchSpan


class PatternMatcher:
    def __init__(self, pattern):
        self.pattern = pattern
        try:
            self.compiled_pattern = re.compile(pattern)
        except re.error as e:
            raise PatternCompileError(pattern, e) from e

    def find_all(self, line):
        """
        Returns the match spans of the pattern in line, left to right.
        A zero-length match moves the scan one character forward so every
        position yields at most one span.
        """
        spans = []
        pos = 0
        length = len(line)
        while pos <= length:
            match = self.compiled_pattern.search(line, pos)
            if match is None:
                break
            start, end = match.span()
            spans.append(MatchSpan(start, end))
            pos = end + 1 if end == start else end
        return spans

    def has_match(self, line):
        return self.compiled_pattern.search(line) is not None
