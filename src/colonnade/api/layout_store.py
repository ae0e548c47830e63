"""
In-memory layout record store.

Stand-in for the external keyed store the builder persists to (one record
per article). Only the visual order is kept: records go through
:func:`~colonnade.core.layout.record.persistable` on the way in, so the
legacy placement override map is never written.

This is a volatile store; everything is lost on restart.
"""

from __future__ import annotations

from typing import ClassVar

from colonnade.core.contracts.layout import LayoutRecord
from colonnade.core.layout.record import persistable


class LayoutStore:
    """A dictionary-backed store of :class:`LayoutRecord` keyed by article id."""

    _instance: ClassVar[LayoutStore | None] = None

    def __init__(self) -> None:
        self._records: dict[str, LayoutRecord] = {}

    @classmethod
    def get_instance(cls) -> LayoutStore:
        """Accessor for the process-wide singleton."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get(self, article_id: str) -> LayoutRecord | None:
        """Return the stored record for ``article_id``, if any."""
        return self._records.get(article_id)

    def put(self, article_id: str, record: LayoutRecord) -> LayoutRecord:
        """Store the order of ``record`` and return what was stored."""
        stored = persistable(record)
        self._records[article_id] = stored
        return stored

    def clear(self) -> None:
        """Drop every record (used by tests)."""
        self._records.clear()


def get_layout_store() -> LayoutStore:
    """FastAPI dependency helper returning the singleton store."""
    return LayoutStore.get_instance()


__all__ = ["LayoutStore", "get_layout_store"]
