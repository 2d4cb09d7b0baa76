import logging
import time

from search.highlighter import PLAIN_MARKERS, Highlighter
from search.line_processor import LineProcessor
from search.pattern_matcher import PatternMatcher
from search.runners import ParallelRunner, SequentialRunner


class SearchEngine:
    def __init__(self, config, sink, markers=PLAIN_MARKERS):
        self.logger = logging.getLogger(__name__)
        self.config = config
        self.sink = sink
        # Compiled before any input is touched so a bad pattern produces no output
        self.matcher = PatternMatcher(config.pattern)
        self.highlighter = Highlighter(markers)
        self.processor = LineProcessor(config, self.matcher, self.highlighter)
        self.runner = self._create_runner()

    def _create_runner(self):
        if self.config.parallel_mode:
            return ParallelRunner(self.config, self.processor, self.sink)
        return SequentialRunner(self.config, self.processor, self.sink)

    def run(self, stream):
        mode = "filter" if self.config.filter_mode else "highlight"
        self.logger.info(f"Searching stdin for {self.config.pattern!r} ({mode}, {type(self.runner).__name__})")

        start_time = time.perf_counter()
        with self.sink:
            stats = self.runner.run(stream)

        elapsed = time.perf_counter() - start_time
        self.logger.info(f"Search complete. Read {stats.lines_read} lines, wrote {stats.lines_written} in {elapsed:.3f}s.")
        return stats
