"""Configuration module for dfasim."""

from dfasim.config.settings import SimulatorConfig, load_config

__all__ = ["SimulatorConfig", "load_config"]
