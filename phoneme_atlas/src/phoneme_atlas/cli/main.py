"""Main Typer application."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="phoneme-atlas",
    help="Phoneme inventories, IPA reference charts and grapheme keys.",
    no_args_is_help=True,
)


@app.command()
def validate(
    config: str = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    language: str = typer.Option(
        None, "--language", "-l", help="Only report on this language id"
    ),
) -> None:
    """Validate inventories and compare them with the IPA reference grids."""
    from .validate_cmd import run_validate

    status = run_validate(config, language)
    if status:
        raise typer.Exit(code=status)


@app.command()
def grapheme_key(
    language_id: str = typer.Argument(..., help="Language id used as key namespace"),
    grapheme: str = typer.Argument(..., help="Grapheme in any script"),
) -> None:
    """Print the lookup key and anchor id for a grapheme."""
    from .keys_cmd import run_grapheme_key

    run_grapheme_key(language_id, grapheme)


@app.command()
def export_keys(
    config: str = typer.Option(None, "--config", "-c", help="Path to config YAML"),
) -> None:
    """Write each language's grapheme index as JSON."""
    from .keys_cmd import run_export_keys

    run_export_keys(config)


@app.command()
def export_chart(
    config: str = typer.Option(None, "--config", "-c", help="Path to config YAML"),
) -> None:
    """Write each language's IPA chart overlay as JSON."""
    from .export_chart_cmd import run_export_chart

    run_export_chart(config)


if __name__ == "__main__":
    app()
