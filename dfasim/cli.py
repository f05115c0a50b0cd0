"""CLI entry point for dfasim."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from dfasim import __version__
from dfasim.automaton.builder import build
from dfasim.automaton.formatter import describe_automaton, format_automaton
from dfasim.config.settings import LOG_FORMATS, REPORT_FORMATS, SimulatorConfig, load_config
from dfasim.models.automaton import Automaton
from dfasim.reader.lines import read_lines
from dfasim.reporter.console import output_json, report
from dfasim.runner.batch import run_batch
from dfasim.utils.logging import configure_logging, get_logger
from dfasim.utils.result import ExitCode


class Context:
    """CLI context for sharing state between commands."""

    def __init__(self, config: SimulatorConfig) -> None:
        self.config = config
        self.logger = get_logger("cli")

    def read(self, path: Path, what: str) -> list[str]:
        """Read significant lines of ``path`` or exit with GENERAL_ERROR."""
        result = read_lines(path, self.config.reader.comment_prefix)
        if result.is_err():
            error = result.unwrap_err()
            self.logger.error("file_read_failed", kind=what, path=str(path))
            click.echo(f"Error: {error}", err=True)
            sys.exit(ExitCode.GENERAL_ERROR)
        return result.unwrap()

    def load_automaton(self, path: Path, strict_symbols: Optional[bool]) -> Automaton:
        """Read and build the automaton at ``path`` or exit with GENERAL_ERROR."""
        if strict_symbols is None:
            strict_symbols = self.config.builder.strict_symbols

        lines = self.read(path, "automaton")
        result = build(lines, strict_symbols=strict_symbols)
        if result.is_err():
            error = result.unwrap_err()
            self.logger.error(
                "automaton_load_failed",
                path=str(path),
                code=error.code,
                error=str(error),
            )
            click.echo(f"Error: {error}", err=True)
            click.echo("Could not load automaton.", err=True)
            sys.exit(ExitCode.GENERAL_ERROR)

        automaton = result.unwrap()
        self.logger.info(
            "automaton_built",
            path=str(path),
            states=len(automaton.states),
            symbols=len(automaton.symbols),
            transitions=len(automaton.table),
        )
        return automaton


pass_context = click.make_pass_decorator(Context)

strict_symbols_option = click.option(
    "--strict-symbols/--lenient-symbols",
    default=None,
    help="Reject multi-character symbol tokens instead of using their first character",
)

format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(REPORT_FORMATS, case_sensitive=False),
    default=None,
    help="Output format",
)


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help="Path to YAML configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warn", "error"], case_sensitive=False),
    default=None,
    help="Logging level",
)
@click.option(
    "--log-format",
    type=click.Choice(LOG_FORMATS, case_sensitive=False),
    default=None,
    help="Log format",
)
@click.version_option(version=__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[Path],
    log_level: Optional[str],
    log_format: Optional[str],
) -> None:
    """
    DFA simulator - classify strings with a deterministic finite automaton.

    Loads an automaton description (start state, states, symbols, accepting
    states, then one transition per line) and reports every input string as
    accepted, rejected, or containing a symbol outside the alphabet.
    """
    result = load_config(config_path)
    if result.is_err():
        click.echo(f"Error: {result.unwrap_err()}", err=True)
        sys.exit(ExitCode.CONFIG_ERROR)

    config = result.unwrap().with_overrides(log_level=log_level, log_format=log_format)
    configure_logging(level=config.logging.level, format_type=config.logging.format)

    ctx.obj = Context(config)
    if config.source:
        ctx.obj.logger.debug("config_loaded", path=str(config.source))


@cli.command()
@click.argument(
    "automaton_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.argument(
    "strings_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@format_option
@strict_symbols_option
@click.option(
    "--trace",
    "show_trace",
    is_flag=True,
    default=False,
    help="Show the states visited by each string (text format)",
)
@pass_context
def run(
    ctx: Context,
    automaton_path: Optional[Path],
    strings_path: Optional[Path],
    output_format: Optional[str],
    strict_symbols: Optional[bool],
    show_trace: bool,
) -> None:
    """Classify every line of STRINGS_PATH with the automaton in AUTOMATON_PATH.

    Paths that are not given are prompted for.
    """
    if automaton_path is None:
        automaton_path = Path(click.prompt("Enter automaton file path"))
    if strings_path is None:
        strings_path = Path(click.prompt("Enter strings file path"))

    automaton = ctx.load_automaton(automaton_path, strict_symbols)
    strings = ctx.read(strings_path, "strings")

    result = run_batch(automaton, strings)

    config = ctx.config.with_overrides(report_format=output_format)
    report(result, config.report, show_trace=show_trace)


@cli.command()
@click.argument("automaton_path", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("strings", nargs=-1)
@format_option
@strict_symbols_option
@pass_context
def classify(
    ctx: Context,
    automaton_path: Path,
    strings: tuple[str, ...],
    output_format: Optional[str],
    strict_symbols: Optional[bool],
) -> None:
    """Classify STRINGS given on the command line."""
    automaton = ctx.load_automaton(automaton_path, strict_symbols)

    result = run_batch(automaton, strings)

    config = ctx.config.with_overrides(report_format=output_format)
    report(result, config.report)


@cli.command()
@click.argument("automaton_path", type=click.Path(dir_okay=False, path_type=Path))
@format_option
@strict_symbols_option
@pass_context
def check(
    ctx: Context,
    automaton_path: Path,
    output_format: Optional[str],
    strict_symbols: Optional[bool],
) -> None:
    """Load an automaton and describe it."""
    automaton = ctx.load_automaton(automaton_path, strict_symbols)

    config = ctx.config.with_overrides(report_format=output_format)
    if config.report.format == "json":
        output_json({"status": "success", "automaton": automaton.to_dict()})
    else:
        click.echo(describe_automaton(automaton))


@cli.command(name="format")
@click.argument("automaton_path", type=click.Path(dir_okay=False, path_type=Path))
@strict_symbols_option
@pass_context
def format_command(
    ctx: Context,
    automaton_path: Path,
    strict_symbols: Optional[bool],
) -> None:
    """Print the canonical form of an automaton description."""
    automaton = ctx.load_automaton(automaton_path, strict_symbols)
    click.echo(
        format_automaton(automaton, comment_prefix=ctx.config.reader.comment_prefix),
        nl=False,
    )


def main() -> None:
    """Main entry point."""
    try:
        cli()
    except Exception as e:
        logger = get_logger("cli")
        logger.error("cli_error", error=str(e))
        sys.exit(ExitCode.GENERAL_ERROR)


if __name__ == "__main__":
    main()
