"""Batch classification of input strings against one automaton."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Iterable

from dfasim.automaton.simulator import Trace, trace
from dfasim.models.automaton import Automaton, Classification
from dfasim.utils.logging import get_logger

logger = get_logger("runner.batch")


class BatchStats:
    """Statistics for a batch run."""

    def __init__(self) -> None:
        self.total: int = 0
        self.accepted: int = 0
        self.rejected: int = 0
        self.invalid_symbol: int = 0
        self.duration_seconds: float = 0.0

    def record(self, classification: Classification) -> None:
        self.total += 1
        if classification is Classification.ACCEPTED:
            self.accepted += 1
        elif classification is Classification.REJECTED:
            self.rejected += 1
        else:
            self.invalid_symbol += 1

    @property
    def classified(self) -> int:
        """Strings over the alphabet (accepted + rejected)."""
        return self.accepted + self.rejected

    @property
    def acceptance_rate(self) -> float:
        """Accepted share of well-formed strings, as percentage."""
        if self.classified == 0:
            return 0.0
        return (self.accepted / self.classified) * 100

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "total": self.total,
            "accepted": self.accepted,
            "rejected": self.rejected,
            "invalid_symbol": self.invalid_symbol,
            "acceptance_rate": round(self.acceptance_rate, 2),
            "duration_seconds": round(self.duration_seconds, 3),
        }


@dataclass
class BatchResult:
    """Traces of every string in input order plus aggregate statistics."""

    traces: list[Trace] = field(default_factory=list)
    stats: BatchStats = field(default_factory=BatchStats)

    @property
    def classifications(self) -> list[Classification]:
        return [t.classification for t in self.traces]

    def to_dict(self) -> dict:
        return {
            "results": [t.to_dict() for t in self.traces],
            "stats": self.stats.to_dict(),
        }


def run_batch(automaton: Automaton, strings: Iterable[str]) -> BatchResult:
    """
    Classify every string of a batch, in order.

    The automaton is only read, so strings are independent of each other.

    Args:
        automaton: Built automaton
        strings: Candidate strings

    Returns:
        BatchResult with one trace per string
    """
    result = BatchResult()
    started = time.perf_counter()

    for text in strings:
        t = trace(automaton, text)
        result.traces.append(t)
        result.stats.record(t.classification)

    result.stats.duration_seconds = time.perf_counter() - started

    logger.info("batch_completed", **result.stats.to_dict())
    return result
