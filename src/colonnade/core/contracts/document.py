"""
Article document contract: what the builder hands to a layout pass.

The builder saves ``{blocks, tags, references, settings}`` with camelCase
setting keys; both the camelCase and snake_case spellings are accepted.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from colonnade.core.result import Result, err, ok

from .block import Block
from .reference import Reference


class ArticleSettings(BaseModel):
    """Per-article presentation settings that affect the layout pass."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    header_enabled: bool = Field(default=False, alias="headerEnabled")
    header_text: str | None = Field(default=None, alias="headerText")
    footer_enabled: bool = Field(default=False, alias="footerEnabled")
    footer_text: str | None = Field(default=None, alias="footerText")
    published_at: str | None = Field(default=None, alias="publishedAt")
    reading_time_mode: Literal["auto", "manual"] = Field(default="auto", alias="readingTimeMode")
    reading_time_minutes: int | None = Field(default=None, ge=1, alias="readingTimeMinutes")


class ArticleDocument(BaseModel):
    """An article as edited in the builder."""

    model_config = ConfigDict(extra="ignore")

    blocks: list[Block] = Field(default_factory=list)
    references: list[Reference] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    settings: ArticleSettings = Field(default_factory=ArticleSettings)


def _decode(raw: str | bytes | Mapping[str, Any]) -> Result[Mapping[str, Any], str]:
    if isinstance(raw, str | bytes):
        try:
            raw = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            return err(f"document is not valid JSON: {exc}")
    if not isinstance(raw, Mapping):
        return err(f"document must be an object, got {type(raw).__name__}")
    return ok(raw)


def _validate(payload: Mapping[str, Any]) -> Result[ArticleDocument, str]:
    try:
        return ok(ArticleDocument.model_validate(payload))
    except ValidationError as exc:
        return err(f"invalid article document: {exc}")


def parse_document(raw: str | bytes | Mapping[str, Any]) -> Result[ArticleDocument, str]:
    """Validate an article document given as JSON text or a decoded mapping."""
    return _decode(raw).flat_map(_validate)


__all__ = ["ArticleDocument", "ArticleSettings", "parse_document"]
