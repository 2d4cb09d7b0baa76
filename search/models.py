import os
from dataclasses import dataclass
from typing import NamedTuple, Optional

DEFAULT_BATCH_SIZE = 256


class MatchSpan(NamedTuple):
    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True)
class Passed:
    """A line that goes to the output, possibly highlighted."""

    text: str


class _Suppressed:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "SUPPRESSED"

    def __bool__(self):
        return False


# Filter mode, no match: the line is dropped.
SUPPRESSED = _Suppressed()


def default_workers() -> int:
    return os.cpu_count() or 1


@dataclass(frozen=True)
class EngineConfig:
    """Immutable settings for one run."""

    pattern: str
    filter_mode: bool = False
    parallel_mode: bool = False
    workers: Optional[int] = None
    batch_size: int = DEFAULT_BATCH_SIZE

    def __post_init__(self):
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {self.batch_size}")

    @property
    def worker_count(self) -> int:
        return self.workers if self.workers is not None else default_workers()
