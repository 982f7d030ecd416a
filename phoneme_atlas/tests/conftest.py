"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson
import pytest

from phoneme_atlas.ingest.builtin_languages import ARABIC, INDONESIAN, KOREAN
from phoneme_atlas.inventory.models import Language


@pytest.fixture
def indonesian() -> Language:
    return Language.from_dict(INDONESIAN)


@pytest.fixture
def korean() -> Language:
    return Language.from_dict(KOREAN)


@pytest.fixture
def arabic() -> Language:
    return Language.from_dict(ARABIC)


@pytest.fixture
def toy_record() -> dict[str, Any]:
    """A small, valid language record that tests may freely mutate."""
    return {
        "id": "toy",
        "name": "Toy",
        "variety": "Test",
        "script": "Latin",
        "phonemes": [
            {"ipa": "t", "place": "alveolar", "manner": "plosive",
             "voicing": "voiceless", "graphemes": ["t", "T"]},
            {"ipa": "d", "place": "alveolar", "manner": "plosive",
             "voicing": "voiced", "graphemes": ["d"]},
            {"ipa": "a", "height": "open", "backness": "front",
             "rounding": "unrounded", "graphemes": ["a", "á"]},
        ],
        "rules": [
            {
                "name": "flapping",
                "type": "allophone",
                "phoneme": "t",
                "realizations": [
                    {"ipa": "ɾ", "environment": "intervocalic"},
                    {"ipa": "tʰ", "environment": "word-initial"},
                ],
            },
        ],
    }


@pytest.fixture
def toy_catalog_path(tmp_path: Path, toy_record: dict[str, Any]) -> Path:
    path = tmp_path / "toy.json"
    path.write_bytes(orjson.dumps({"languages": [toy_record]}))
    return path
