import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field

logger = logging.getLogger("letterboxed")


@dataclass
class SearchMetrics:
    """Stage timings and result sizes for the search over one box.

    Every entry is logged with the box letters so interleaved sessions in the
    server log can be told apart.
    """

    letters: str
    timings: dict[str, float] = field(default_factory=dict)
    counts: dict[str, int] = field(default_factory=dict)
    _start: float = field(default_factory=time.perf_counter, repr=False)

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.timings[name] = round((time.perf_counter() - t0) * 1000, 1)  # ms
            logger.info("box=%s stage=%s elapsed=%.1fms", self.letters, name, self.timings[name])

    def record(self, name: str, value: int) -> int:
        self.counts[name] = value
        logger.info("box=%s %s=%d", self.letters, name, value)
        return value

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict:
        return {**self.timings, "total": self.total_ms}

    def report(self) -> dict:
        return {"letters": self.letters, **self.counts, "stage_timings": self.summary()}
