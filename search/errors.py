"""Exceptions raised by the search engine.

Every error here is terminal for a run: the CLI logs it and exits non-zero.
A line without a match is never an error.

- SearchError (base)
  - PatternCompileError (malformed regular expression)
  - InputReadError (stdin failed mid-read)
  - OutputWriteError (stdout closed or unwritable)
"""


class SearchError(Exception):
    """Base class for all sp errors.

    ``original_error`` keeps the low-level exception (``re.error``,
    ``OSError``...) that caused this one, if any.
    """

    def __init__(self, message, original_error=None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self):
        if self.original_error is not None:
            return f"{self.message}: {self.original_error}"
        return self.message


class PatternCompileError(SearchError):
    """The pattern is not a valid regular expression."""

    def __init__(self, pattern, original_error=None):
        self.pattern = pattern
        self.position = getattr(original_error, "pos", None)
        super().__init__(f"Invalid pattern {pattern!r}", original_error)


class InputReadError(SearchError):
    pass


class OutputWriteError(SearchError):
    pass
