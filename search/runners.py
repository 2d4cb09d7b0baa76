import logging
from abc import ABC, abstractmethod
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from dataclasses import dataclass
from itertools import islice

from search.errors import InputReadError


@dataclass
class RunStats:
    lines_read: int = 0
    lines_written: int = 0


def strip_terminator(line):
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def read_lines(stream):
    """
    Yields lines from stream without their terminators.
    A failing read is turned into InputReadError.
    """
    iterator = iter(stream)
    while True:
        try:
            raw = next(iterator)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError("Failed to read input", e) from e
        yield strip_terminator(raw)


class Runner(ABC):
    def __init__(self, config, processor, sink):
        self.config = config
        self.processor = processor
        self.sink = sink
        self.logger = logging.getLogger(__name__)

    @abstractmethod
    def run(self, stream):
        """Processes every line of stream, writing results to the sink."""


class SequentialRunner(Runner):
    """Processes lines one at a time; output order equals input order."""

    def run(self, stream):
        stats = RunStats()
        for line in read_lines(stream):
            stats.lines_read += 1
            result = self.processor.process(line)
            if result:
                self.sink.write(result.text)
                stats.lines_written += 1
        return stats


class ParallelRunner(Runner):
    """
    Reads input in batches and hands them to a thread pool.
    Workers write their own results, so output follows completion order,
    not input order. With a single worker batches run in submission order.
    """

    def __init__(self, config, processor, sink):
        super().__init__(config, processor, sink)
        self.workers = config.worker_count
        self.batch_size = config.batch_size
        self.max_pending = self.workers * 2

    def _batches(self, stream, stats):
        lines = read_lines(stream)
        while True:
            batch = list(islice(lines, self.batch_size))
            if not batch:
                return
            stats.lines_read += len(batch)
            yield batch

    def _process_batch(self, batch):
        written = 0
        for line in batch:
            if self.sink.failed:
                break
            result = self.processor.process(line)
            if result:
                self.sink.write(result.text)
                written += 1
        return written

    def run(self, stream):
        stats = RunStats()
        pending = set()
        self.logger.debug(f"Starting {self.workers} workers (batch size {self.batch_size}).")

        with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="sp-worker") as executor:
            try:
                for batch in self._batches(stream, stats):
                    if len(pending) >= self.max_pending:
                        done, pending = wait(pending, return_when=FIRST_COMPLETED)
                        stats.lines_written += sum(f.result() for f in done)
                    if self.sink.failed:
                        # The failing batch raises from the final wait below
                        break
                    pending.add(executor.submit(self._process_batch, batch))

                done, pending = wait(pending)
                stats.lines_written += sum(f.result() for f in done)
            except BaseException:
                # Stop dispatching; batches already running finish on their own
                for future in pending:
                    future.cancel()
                raise

        return stats
