"""CLI handler for the validate subcommand."""

from __future__ import annotations

import logging

import typer

from phoneme_atlas.cli.common import load_cli_config
from phoneme_atlas.ingest.catalog import LanguageCatalog
from phoneme_atlas.inventory.consistency import check_reference_consistency
from phoneme_atlas.inventory.errors import InventoryConsistencyError, InventoryError

logger = logging.getLogger(__name__)


def run_validate(config_path: str | None, language_id: str | None) -> int:
    """Validate the catalog; return the process exit status."""
    cfg = load_cli_config(config_path)

    try:
        catalog = LanguageCatalog.from_config(cfg)
    except InventoryConsistencyError as exc:
        logger.error("Validation failed for %s", exc.language_id)
        for problem in exc.problems:
            typer.echo(f"ERROR {exc.language_id}: {problem}", err=True)
        return 1
    except InventoryError as exc:
        logger.error("Validation failed")
        typer.echo(f"ERROR {exc}", err=True)
        return 1

    languages = list(catalog)
    if language_id is not None:
        language = catalog.get(language_id)
        if language is None:
            typer.echo(f"ERROR unknown language {language_id!r}", err=True)
            return 1
        languages = [language]

    mismatch_count = 0
    for language in languages:
        line = (
            f"{language.id}: {len(language.consonants)} consonants, "
            f"{len(language.vowels)} vowels, {len(language.rules)} rules"
        )
        if cfg.reference_check.enabled:
            mismatches = check_reference_consistency(language)
            mismatch_count += len(mismatches)
            line += f", {len(mismatches)} reference mismatches"
            for m in mismatches:
                expected = ", ".join(m.expected) or "-"
                line += f"\n  /{m.ipa}/ {m.reason} (reference: {expected})"
        typer.echo(line)

    if mismatch_count and cfg.reference_check.strict:
        return 1
    return 0
