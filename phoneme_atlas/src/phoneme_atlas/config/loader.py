"""Load and validate atlas configuration from YAML."""

from __future__ import annotations

from pathlib import Path

import yaml

from .schema import AtlasConfig


def load_config(path: Path | str) -> AtlasConfig:
    """Read a YAML file and return a validated AtlasConfig.

    Relative catalog source paths are resolved against the directory
    holding the config file, so a config and its catalogs can move
    together. Export directories stay relative to the working directory.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if raw is None:
        raw = {}
    cfg = AtlasConfig.model_validate(raw)
    base_dir = path.parent
    for source in cfg.sources:
        if not source.path.is_absolute():
            source.path = base_dir / source.path
    return cfg
