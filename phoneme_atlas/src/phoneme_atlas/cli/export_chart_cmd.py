"""CLI handler for the export-chart subcommand."""

from __future__ import annotations

import logging

from phoneme_atlas.cli.common import load_cli_config
from phoneme_atlas.export.json_exporter import ChartExporter
from phoneme_atlas.ingest.catalog import LanguageCatalog

logger = logging.getLogger(__name__)


def run_export_chart(config_path: str | None) -> None:
    cfg = load_cli_config(config_path)
    catalog = LanguageCatalog.from_config(cfg)
    exporter = ChartExporter(cfg.export)
    for language in catalog:
        exporter.export(language)
    logger.info("Chart overlays for %d languages written to %s",
                len(catalog), cfg.export.chart_output_dir)
