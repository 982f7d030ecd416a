"""Write chart overlays and grapheme indexes as JSON."""

from __future__ import annotations

import logging
from pathlib import Path

import orjson

from phoneme_atlas.config.schema import ExportConfig
from phoneme_atlas.export.chart import build_consonant_chart, build_vowel_chart
from phoneme_atlas.inventory.models import Language
from phoneme_atlas.normalise.grapheme_index import GraphemeIndex

logger = logging.getLogger(__name__)


class ChartExporter:
    """Exports one language's consonant and vowel overlays."""

    def __init__(self, config: ExportConfig) -> None:
        self.config = config

    def export(self, language: Language, output_dir: Path | None = None) -> Path:
        output_dir = output_dir or self.config.chart_output_dir
        output_dir.mkdir(parents=True, exist_ok=True)
        doc = {
            "language": {
                "id": language.id,
                "name": language.name,
                "variety": language.variety,
                "script": language.script,
            },
            "consonants": build_consonant_chart(language).to_dict(),
            "vowels": build_vowel_chart(language).to_dict(),
        }
        out_path = output_dir / f"{language.id}.chart.json"
        out_path.write_bytes(orjson.dumps(doc, option=orjson.OPT_INDENT_2))
        logger.info("Chart overlay written to %s", out_path)
        return out_path


class GraphemeKeyExporter:
    """Exports one language's grapheme index (keys, anchors, phonemes)."""

    def __init__(self, config: ExportConfig) -> None:
        self.config = config

    def export(self, language: Language, output_dir: Path | None = None) -> Path:
        output_dir = output_dir or self.config.key_output_dir
        output_dir.mkdir(parents=True, exist_ok=True)
        index = GraphemeIndex.build(language)
        out_path = output_dir / f"{language.id}.json"
        out_path.write_bytes(orjson.dumps(index.to_dict(), option=orjson.OPT_INDENT_2))
        logger.info("Wrote %d grapheme keys to %s", len(index), out_path)
        return out_path
