"""Batch driver for classifying many strings."""

from dfasim.runner.batch import BatchResult, BatchStats, run_batch

__all__ = ["BatchResult", "BatchStats", "run_batch"]
