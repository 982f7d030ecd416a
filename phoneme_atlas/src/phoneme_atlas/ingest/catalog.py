"""In-memory catalog of validated languages."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from phoneme_atlas.config.schema import AtlasConfig
from phoneme_atlas.ingest.builtin_languages import BUILTIN_LANGUAGES
from phoneme_atlas.ingest.catalog_loader import CatalogLoader
from phoneme_atlas.inventory.errors import CatalogError
from phoneme_atlas.inventory.models import Language

logger = logging.getLogger(__name__)


class LanguageCatalog:
    """Languages keyed by id; ids are unique across the whole catalog.

    Language ids double as the namespace of grapheme keys, so a second
    language with an existing id is rejected rather than replacing it.
    """

    def __init__(self, languages: Iterable[Language] = ()) -> None:
        self._languages: dict[str, Language] = {}
        for language in languages:
            self.add(language)

    @classmethod
    def builtin(cls) -> LanguageCatalog:
        return cls(Language.from_dict(d) for d in BUILTIN_LANGUAGES)

    @classmethod
    def from_config(cls, config: AtlasConfig) -> LanguageCatalog:
        catalog = cls.builtin() if config.include_builtin else cls()
        for source_def in config.sources:
            logger.info("Loading catalog source: %s (%s)", source_def.name, source_def.format.value)
            count = 0
            for language in CatalogLoader(source_def).load():
                catalog.add(language)
                count += 1
            logger.info("  Loaded %d languages from %s", count, source_def.path)
        return catalog

    def add(self, language: Language) -> None:
        if language.id in self._languages:
            raise CatalogError(f"Duplicate language id {language.id!r}")
        self._languages[language.id] = language

    def get(self, language_id: str) -> Language | None:
        return self._languages.get(language_id)

    @property
    def ids(self) -> list[str]:
        return list(self._languages)

    def __contains__(self, language_id: object) -> bool:
        return language_id in self._languages

    def __len__(self) -> int:
        return len(self._languages)

    def __iter__(self) -> Iterator[Language]:
        return iter(self._languages.values())
