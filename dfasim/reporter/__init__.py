"""Reporter module for presenting classification results."""

from dfasim.reporter.console import (
    format_outcome,
    label_for,
    output_json,
    report,
    report_json,
    report_text,
)

__all__ = [
    "format_outcome",
    "label_for",
    "output_json",
    "report",
    "report_json",
    "report_text",
]
