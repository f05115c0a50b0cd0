"""Console reporting of classification results."""

from __future__ import annotations

import json

import click

from dfasim.automaton.simulator import Trace
from dfasim.config.settings import ReportConfig
from dfasim.models.automaton import Classification
from dfasim.runner.batch import BatchResult


def label_for(classification: Classification, config: ReportConfig) -> str:
    """Configured label for an outcome."""
    return {
        Classification.ACCEPTED: config.accepted_label,
        Classification.REJECTED: config.rejected_label,
        Classification.INVALID_SYMBOL: config.invalid_label,
    }[classification]


def format_outcome(t: Trace, config: ReportConfig, show_trace: bool = False) -> str:
    """
    One report line, e.g. ``ACCEPTED LINE ab`` or ``WRONG SYMBOL: ac``.

    With ``show_trace`` the visited states are appended.
    """
    line = f"{label_for(t.classification, config)} {t.text}"
    if show_trace and t.path:
        line += "  [" + " -> ".join(t.path)
        line += " -> (stuck)]" if t.stuck else "]"
    return line


def output_json(data: dict) -> None:
    """Output JSON to stdout."""
    click.echo(json.dumps(data, indent=2, default=str))


def report_text(result: BatchResult, config: ReportConfig, show_trace: bool = False) -> None:
    for t in result.traces:
        click.echo(format_outcome(t, config, show_trace=show_trace))


def report_json(result: BatchResult) -> None:
    output_json({"status": "success", **result.to_dict()})


def report(result: BatchResult, config: ReportConfig, show_trace: bool = False) -> None:
    """Write a batch result in the configured format."""
    if config.format == "json":
        report_json(result)
    else:
        report_text(result, config, show_trace=show_trace)
