"""Helpers shared by the CLI handlers."""

from __future__ import annotations

from phoneme_atlas.config.loader import load_config
from phoneme_atlas.config.schema import AtlasConfig
from phoneme_atlas.utils.logging_setup import setup_logging


def load_cli_config(config_path: str | None) -> AtlasConfig:
    """Load the YAML config, or fall back to defaults (builtin catalog only)."""
    cfg = load_config(config_path) if config_path else AtlasConfig()
    setup_logging(cfg.log_level, cfg.log_file)
    return cfg
