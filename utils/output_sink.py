import logging
import threading

from search.errors import OutputWriteError


class OutputSink:
    """
    Line-oriented writer shared by every runner thread.
    Each write() holds the lock for the whole line, so lines never interleave.
    """

    def __init__(self, stream, line_buffered=None):
        self.stream = stream
        self.logger = logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._failed = False
        self._closed = False
        if line_buffered is None:
            isatty = getattr(stream, "isatty", None)
            line_buffered = bool(isatty and isatty())
        self.line_buffered = line_buffered
        self.lines_written = 0

    @property
    def failed(self):
        return self._failed

    @property
    def closed(self):
        return self._closed

    def write(self, text):
        with self._lock:
            if self._failed or self._closed:
                # Results of work still running after a failure are discarded
                return
            try:
                self.stream.write(text + "\n")
                if self.line_buffered:
                    self.stream.flush()
            except (OSError, UnicodeEncodeError) as e:
                self._failed = True
                raise OutputWriteError("Failed to write to output", e) from e
            self.lines_written += 1

    def close(self):
        with self._lock:
            if self._closed:
                return
            self._closed = True
            if self._failed:
                return
            try:
                self.stream.flush()
            except OSError as e:
                self._failed = True
                raise OutputWriteError("Failed to flush output", e) from e
        self.logger.debug(f"Output closed after {self.lines_written} lines.")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.close()
        else:
            # Don't mask the original error with a second flush failure
            try:
                self.close()
            except OutputWriteError:
                self.logger.debug("Flush failed while handling an earlier error.")
        return False
