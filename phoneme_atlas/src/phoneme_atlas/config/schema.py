"""Pydantic v2 configuration models for the phoneme atlas."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class SourceFormat(str, Enum):
    JSON = "json"
    NDJSON = "ndjson"
    YAML = "yaml"


class CatalogSourceDef(BaseModel):
    """A file holding one or more language descriptions."""

    name: str
    path: Path
    format: SourceFormat = SourceFormat.JSON
    encoding: str = "utf-8"


class ReferenceCheckConfig(BaseModel):
    enabled: bool = True
    strict: bool = False


class ExportConfig(BaseModel):
    chart_output_dir: Path = Path("export/charts")
    key_output_dir: Path = Path("export/keys")


class AtlasConfig(BaseModel):
    """Top-level configuration."""

    sources: list[CatalogSourceDef] = Field(default_factory=list)
    include_builtin: bool = True
    reference_check: ReferenceCheckConfig = Field(default_factory=ReferenceCheckConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    log_level: str = "INFO"
    log_file: Path | None = None
