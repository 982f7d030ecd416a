"""Per-language index of graphemes by normalised key.

Spellings that differ only in case, diacritics or punctuation collapse to
one key and are merged into a single entry, which also records every
phoneme the grapheme realises (one spelling may stand for several
phonemes, e.g. Indonesian ``e`` for /e/ and /ə/).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from phoneme_atlas.inventory.models import Language
from phoneme_atlas.normalise.grapheme_key import ANCHOR_PREFIX, grapheme_key

logger = logging.getLogger(__name__)


@dataclass
class GraphemeEntry:
    key: str
    anchor_id: str
    spellings: list[str] = field(default_factory=list)
    phonemes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "anchor_id": self.anchor_id,
            "spellings": self.spellings,
            "phonemes": self.phonemes,
        }


class GraphemeIndex:
    """Grapheme entries of one language, in first-seen order."""

    def __init__(self, language_id: str) -> None:
        self.language_id = language_id
        self._entries: dict[str, GraphemeEntry] = {}

    @classmethod
    def build(cls, language: Language) -> GraphemeIndex:
        index = cls(language.id)
        for phoneme in language.phonemes:
            for grapheme in phoneme.graphemes:
                index.add(grapheme, phoneme.ipa)
        logger.debug(
            "Indexed %d grapheme keys for %s", len(index), language.id
        )
        return index

    def add(self, grapheme: str, ipa: str) -> GraphemeEntry:
        key = grapheme_key(self.language_id, grapheme)
        entry = self._entries.get(key)
        if entry is None:
            entry = GraphemeEntry(key=key, anchor_id=f"{ANCHOR_PREFIX}-{key}")
            self._entries[key] = entry
        elif grapheme not in entry.spellings:
            logger.debug(
                "Grapheme %r merged into key %s (spellings: %s)",
                grapheme, key, entry.spellings,
            )
        if grapheme not in entry.spellings:
            entry.spellings.append(grapheme)
        if ipa not in entry.phonemes:
            entry.phonemes.append(ipa)
        return entry

    def lookup(self, grapheme: str) -> GraphemeEntry | None:
        """Find the entry a (possibly differently spelled) grapheme maps to."""
        return self._entries.get(grapheme_key(self.language_id, grapheme))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "language_id": self.language_id,
            "graphemes": [e.to_dict() for e in self._entries.values()],
        }
