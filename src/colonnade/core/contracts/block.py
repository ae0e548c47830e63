"""
Block contracts: the typed units of article content.

An article is an ordered sequence of blocks. The sequence is the single
source of truth for document order; no block stores its own index.

Variants
--------
- :class:`TitleBlock`   : headline and subtitle.
- :class:`TextBlock`    : body text with optional heading and drop cap.
- :class:`ImageBlock`   : image URL, caption, position and scale.
- :class:`SidebarBlock` : grouped bullet lists.
- :class:`QuoteBlock`   : pull quote and optional author.
- :class:`DividerBlock` : horizontal rule.

Ingestion
---------
Article documents are written by the browser builder, which nests fields
under ``content`` and uses camelCase keys. Historic documents also carry the
text layout hint under one of two names (``layout`` or ``textLayout``) and,
in some cases, an explicit ``placement``. A single ``mode="before"``
validator flattens the envelope and folds the aliases into the canonical
``layout_hint`` field, so downstream code reads one name only.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

#: Legacy keys that may carry a text block's layout hint, in precedence order.
LAYOUT_HINT_ALIASES: tuple[str, ...] = ("layout", "textLayout")


class _BlockBase(BaseModel):
    """Shared id field and envelope flattening for every block variant."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Stable, opaque block identifier.")

    @model_validator(mode="before")
    @classmethod
    def _flatten_envelope(cls, data: Any) -> Any:
        """Merge a builder-style ``content`` object into the top level."""
        if not isinstance(data, Mapping):
            return data
        flat: dict[str, Any] = {}
        content = data.get("content")
        if isinstance(content, Mapping):
            flat.update(content)
        flat.update({k: v for k, v in data.items() if k != "content"})
        return cls._normalize_fields(flat)

    @classmethod
    def _normalize_fields(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Hook for variant-specific alias folding (no-op by default)."""
        return data


class TitleBlock(_BlockBase):
    """Article headline."""

    type: Literal["title"] = "title"
    title: str = ""
    subtitle: str = ""


class TextBlock(_BlockBase):
    """A run of body text.

    ``layout_hint`` is the canonical home of the historic ``layout`` /
    ``textLayout`` values (``left_third``, ``right_third``, ``two_thirds``,
    ``middle_third``, ``full``, plus the bare ``left`` / ``right``).
    """

    type: Literal["text"] = "text"
    heading: str | None = None
    text: str = ""
    drop_cap: bool = Field(default=False, alias="dropCap")
    layout_hint: str | None = Field(default=None, alias="layoutHint")
    text_align: Literal["left", "right", "center", "justify"] | None = Field(
        default=None, alias="textAlign"
    )

    @classmethod
    def _normalize_fields(cls, data: dict[str, Any]) -> dict[str, Any]:
        if data.get("layout_hint") is not None or data.get("layoutHint") is not None:
            return data
        for key in LAYOUT_HINT_ALIASES:
            if data.get(key):
                data["layout_hint"] = data[key]
                return data
        # Oldest documents stored the resolved side directly.
        if data.get("placement") in ("left", "right", "full"):
            data["layout_hint"] = data["placement"]
        return data


class ImageBlock(_BlockBase):
    """An image with optional caption.

    ``position`` is kept as a free string: unknown values resolve to a
    full-width placement rather than failing validation.
    """

    type: Literal["image"] = "image"
    url: str = Field(default="", alias="imageUrl")
    caption: str | None = None
    position: str = "center"
    scale: float = Field(default=1.0, gt=0.0)


class SidebarGroup(BaseModel):
    """One headed list inside a sidebar."""

    heading: str = ""
    items: list[str] = Field(default_factory=list)


class SidebarBlock(_BlockBase):
    """Grouped side notes."""

    type: Literal["sidebar"] = "sidebar"
    groups: list[SidebarGroup] = Field(default_factory=list, alias="sidebarItems")


class QuoteBlock(_BlockBase):
    """Pull quote."""

    type: Literal["quote"] = "quote"
    quote: str = ""
    author: str | None = None


class DividerBlock(_BlockBase):
    """Horizontal rule."""

    type: Literal["divider"] = "divider"
    style: Literal["thin", "bold", "dashed"] = Field(default="thin", alias="dividerStyle")
    width: Literal["full", "content"] = Field(default="content", alias="dividerWidth")


Block = Annotated[
    TitleBlock | TextBlock | ImageBlock | SidebarBlock | QuoteBlock | DividerBlock,
    Field(discriminator="type"),
]

BlockType = Literal["title", "text", "image", "sidebar", "quote", "divider"]

_BLOCK_ADAPTER: TypeAdapter[Block] = TypeAdapter(Block)
_BLOCKS_ADAPTER: TypeAdapter[list[Block]] = TypeAdapter(list[Block])


def parse_block(payload: Mapping[str, Any]) -> Block:
    """Validate one raw block mapping (flat or builder envelope)."""
    return _BLOCK_ADAPTER.validate_python(payload)


def parse_blocks(payloads: Iterable[Mapping[str, Any]]) -> list[Block]:
    """Validate a sequence of raw block mappings, preserving order."""
    return _BLOCKS_ADAPTER.validate_python(list(payloads))


def iter_text_fields(block: Block) -> Iterator[tuple[str, str]]:
    """Yield ``(path, text)`` for every non-empty text-bearing field of ``block``.

    Fields come out in reading order. Paths are dotted
    (``"groups.0.items.1"``) so renderers can map annotations back to the
    field they came from. Dividers carry no text.
    """
    if isinstance(block, TitleBlock):
        pairs: list[tuple[str, str | None]] = [("title", block.title), ("subtitle", block.subtitle)]
    elif isinstance(block, TextBlock):
        pairs = [("heading", block.heading), ("text", block.text)]
    elif isinstance(block, QuoteBlock):
        pairs = [("quote", block.quote), ("author", block.author)]
    elif isinstance(block, ImageBlock):
        pairs = [("caption", block.caption)]
    elif isinstance(block, SidebarBlock):
        pairs = []
        for g, group in enumerate(block.groups):
            pairs.append((f"groups.{g}.heading", group.heading))
            pairs.extend((f"groups.{g}.items.{i}", item) for i, item in enumerate(group.items))
    else:
        pairs = []
    for path, value in pairs:
        if value:
            yield path, value


def new_block(block_type: BlockType, block_id: str) -> Block:
    """Create a block of ``block_type`` with the builder's starter content."""
    if block_type == "title":
        return TitleBlock(id=block_id, title="New Headline", subtitle="SUBTITLE")
    if block_type == "text":
        return TextBlock(id=block_id, text="", layout_hint="two_thirds")
    if block_type == "image":
        return ImageBlock(id=block_id, url="", position="center", scale=1.0)
    if block_type == "quote":
        return QuoteBlock(id=block_id, quote="Quote text here...", author="Author Name")
    if block_type == "sidebar":
        return SidebarBlock(id=block_id, groups=[SidebarGroup(heading="SECTION", items=["Item 1"])])
    return DividerBlock(id=block_id, style="thin", width="content")


__all__ = [
    "Block",
    "BlockType",
    "DividerBlock",
    "ImageBlock",
    "LAYOUT_HINT_ALIASES",
    "QuoteBlock",
    "SidebarBlock",
    "SidebarGroup",
    "TextBlock",
    "TitleBlock",
    "iter_text_fields",
    "new_block",
    "parse_block",
    "parse_blocks",
]
