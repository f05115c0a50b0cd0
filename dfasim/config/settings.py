"""Centralized configuration for the simulator.

Defaults reproduce the plain console behaviour. A YAML file can override any
value; command-line flags override the file.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from dfasim.utils.result import ConfigError, Err, Ok, Result


REPORT_FORMATS = ("text", "json")
LOG_LEVELS = ("debug", "info", "warn", "warning", "error")
LOG_FORMATS = ("json", "text")


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "warning"
    format: str = "text"


@dataclass
class ReaderConfig:
    """Input file settings."""

    comment_prefix: str = "#"


@dataclass
class BuilderConfig:
    """Automaton construction settings."""

    # Reject multi-character symbol tokens instead of using their first character
    strict_symbols: bool = False


@dataclass
class ReportConfig:
    """Result reporting settings."""

    format: str = "text"
    accepted_label: str = "ACCEPTED LINE"
    rejected_label: str = "REJECTED LINE"
    invalid_label: str = "WRONG SYMBOL:"


@dataclass
class SimulatorConfig:
    """Complete simulator configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    reader: ReaderConfig = field(default_factory=ReaderConfig)
    builder: BuilderConfig = field(default_factory=BuilderConfig)
    report: ReportConfig = field(default_factory=ReportConfig)

    # Set when loaded from a file
    source: Optional[Path] = None

    @classmethod
    def from_yaml(cls, path: Path) -> Result["SimulatorConfig", ConfigError]:
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Result with loaded config or error
        """
        path = Path(path)

        if not path.exists():
            return Err(ConfigError(
                field="path",
                message=f"Configuration file not found: {path}",
            ))

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            return Err(ConfigError(
                field="yaml",
                message=f"Failed to parse YAML: {e}",
            ))
        except OSError as e:
            return Err(ConfigError(
                field="file",
                message=f"Failed to read config file: {e}",
            ))

        if not isinstance(data, dict):
            return Err(ConfigError(
                field="yaml",
                message="Top level of the configuration must be a mapping",
            ))

        result = cls.from_dict(data)
        if result.is_ok():
            result.unwrap().source = path
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Result["SimulatorConfig", ConfigError]:
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            Result with loaded config or error
        """
        for section in ("logging", "reader", "builder", "report"):
            if not isinstance(data.get(section, {}), dict):
                return Err(ConfigError(
                    field=section,
                    message="Must be a mapping",
                ))

        logging_data = data.get("logging", {})
        logging_config = LoggingConfig(
            level=str(logging_data.get("level", "warning")),
            format=str(logging_data.get("format", "text")),
        )

        reader_data = data.get("reader", {})
        reader = ReaderConfig(
            comment_prefix=str(reader_data.get("comment_prefix", "#")),
        )

        builder_data = data.get("builder", {})
        strict_symbols = builder_data.get("strict_symbols", False)
        if not isinstance(strict_symbols, bool):
            return Err(ConfigError(
                field="builder.strict_symbols",
                message=f"Must be true or false, got {strict_symbols!r}",
            ))
        builder = BuilderConfig(strict_symbols=strict_symbols)

        report_data = data.get("report", {})
        report = ReportConfig(
            format=str(report_data.get("format", "text")),
            accepted_label=str(report_data.get("accepted_label", "ACCEPTED LINE")),
            rejected_label=str(report_data.get("rejected_label", "REJECTED LINE")),
            invalid_label=str(report_data.get("invalid_label", "WRONG SYMBOL:")),
        )

        config = cls(
            logging=logging_config,
            reader=reader,
            builder=builder,
            report=report,
        )

        validation_result = config.validate()
        if validation_result.is_err():
            return Err(validation_result.unwrap_err())
        return Ok(config)

    def validate(self) -> Result[None, ConfigError]:
        """
        Validate configuration values.

        Returns:
            Result indicating success or validation error
        """
        if self.logging.level.lower() not in LOG_LEVELS:
            return Err(ConfigError(
                field="logging.level",
                message=f"Must be one of {', '.join(LOG_LEVELS)}, got {self.logging.level!r}",
            ))
        if self.logging.format not in LOG_FORMATS:
            return Err(ConfigError(
                field="logging.format",
                message=f"Must be one of {', '.join(LOG_FORMATS)}, got {self.logging.format!r}",
            ))

        if not self.reader.comment_prefix or self.reader.comment_prefix.isspace():
            return Err(ConfigError(
                field="reader.comment_prefix",
                message="Must be a non-blank string",
            ))

        if self.report.format not in REPORT_FORMATS:
            return Err(ConfigError(
                field="report.format",
                message=f"Must be one of {', '.join(REPORT_FORMATS)}, got {self.report.format!r}",
            ))

        for name, value in [
            ("accepted_label", self.report.accepted_label),
            ("rejected_label", self.report.rejected_label),
            ("invalid_label", self.report.invalid_label),
        ]:
            if not value.strip():
                return Err(ConfigError(
                    field=f"report.{name}",
                    message="Must not be empty",
                ))

        return Ok(None)

    def with_overrides(
        self,
        log_level: str = None,
        log_format: str = None,
        report_format: str = None,
        strict_symbols: bool = None,
    ) -> "SimulatorConfig":
        """
        Return a new config with command-line overrides applied.

        Arguments left as None keep the configured value.
        """
        logging_config = replace(
            self.logging,
            level=log_level or self.logging.level,
            format=log_format or self.logging.format,
        )
        report = replace(self.report, format=report_format or self.report.format)
        builder = self.builder
        if strict_symbols is not None:
            builder = replace(builder, strict_symbols=strict_symbols)

        return replace(self, logging=logging_config, report=report, builder=builder)


def load_config(path: Path = None) -> Result[SimulatorConfig, ConfigError]:
    """
    Load configuration from ``path``, or return defaults when no path is given.

    Args:
        path: Optional YAML configuration file

    Returns:
        Result with loaded config or error
    """
    if path is None:
        return Ok(SimulatorConfig())
    return SimulatorConfig.from_yaml(Path(path))
