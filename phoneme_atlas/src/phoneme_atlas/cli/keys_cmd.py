"""CLI handlers for the grapheme-key and export-keys subcommands."""

from __future__ import annotations

import logging

import typer

from phoneme_atlas.cli.common import load_cli_config
from phoneme_atlas.export.json_exporter import GraphemeKeyExporter
from phoneme_atlas.ingest.catalog import LanguageCatalog
from phoneme_atlas.normalise.grapheme_key import grapheme_anchor_id, grapheme_key

logger = logging.getLogger(__name__)


def run_grapheme_key(language_id: str, grapheme: str) -> None:
    typer.echo(f"key:    {grapheme_key(language_id, grapheme)}")
    typer.echo(f"anchor: {grapheme_anchor_id(language_id, grapheme)}")


def run_export_keys(config_path: str | None) -> None:
    cfg = load_cli_config(config_path)
    catalog = LanguageCatalog.from_config(cfg)
    exporter = GraphemeKeyExporter(cfg.export)
    for language in catalog:
        exporter.export(language)
    logger.info("Grapheme keys for %d languages written to %s",
                len(catalog), cfg.export.key_output_dir)
