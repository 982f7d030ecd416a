"""Read language descriptions from JSON, NDJSON or YAML documents."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import orjson
import yaml

from phoneme_atlas.config.schema import CatalogSourceDef, SourceFormat
from phoneme_atlas.inventory.errors import CatalogError
from phoneme_atlas.inventory.models import Language

logger = logging.getLogger(__name__)


class CatalogLoader:
    """Loads ``Language`` records from one catalog source.

    Accepted document shapes: a list of language objects, an object with a
    ``languages`` list, or a single language object. NDJSON holds one
    language object per line. Every record is validated on the way in.
    """

    def __init__(self, source_def: CatalogSourceDef) -> None:
        self.source_def = source_def

    def load(self) -> Iterator[Language]:
        path = Path(self.source_def.path)
        if not path.exists():
            raise CatalogError(f"Catalog source {self.source_def.name!r}: {path} not found")
        if self.source_def.format == SourceFormat.NDJSON:
            records = self._read_ndjson(path)
        elif self.source_def.format == SourceFormat.YAML:
            records = self._unwrap(self._read_yaml(path))
        else:
            records = self._unwrap(self._read_json(path))
        for record in records:
            yield Language.from_dict(record)

    def _read_json(self, path: Path) -> Any:
        try:
            return orjson.loads(path.read_bytes())
        except orjson.JSONDecodeError as exc:
            raise CatalogError(f"Catalog source {self.source_def.name!r}: {exc}") from exc

    def _read_yaml(self, path: Path) -> Any:
        with path.open("r", encoding=self.source_def.encoding) as fh:
            try:
                return yaml.safe_load(fh)
            except yaml.YAMLError as exc:
                raise CatalogError(
                    f"Catalog source {self.source_def.name!r}: {exc}"
                ) from exc

    def _read_ndjson(self, path: Path) -> Iterator[dict[str, Any]]:
        with path.open("rb") as fh:
            for line_num, line in enumerate(fh, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    yield orjson.loads(line)
                except orjson.JSONDecodeError as exc:
                    raise CatalogError(
                        f"Catalog source {self.source_def.name!r}: invalid JSON at line {line_num}"
                    ) from exc

    def _unwrap(self, data: Any) -> list[dict[str, Any]]:
        if data is None:
            return []
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            if isinstance(data.get("languages"), list):
                return data["languages"]
            return [data]
        raise CatalogError(
            f"Catalog source {self.source_def.name!r}: unexpected top-level "
            f"{type(data).__name__}"
        )
