"""Reference contract: one entry of an article's bibliography.

References are cited from text with ``[^id]`` tokens. Ids are assumed unique
within an article; duplicates are a caller-side error and are not checked.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Reference(BaseModel):
    """A citable source."""

    id: str = Field(..., min_length=1, description="Citation key used by [^id] tokens.")
    title: str = Field(default="", description="Display title of the source.")
    url: str | None = Field(default=None, description="Link to the source, if any.")
    publisher: str | None = None
    date: str | None = Field(default=None, description="Free-form publication date.")


class NumberedReference(BaseModel):
    """A reference paired with its footer number (1-based, first-citation order)."""

    number: int = Field(..., ge=1)
    reference: Reference


__all__ = ["NumberedReference", "Reference"]
