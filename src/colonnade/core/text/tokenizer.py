"""
Inline markup tokenizer.

Scans a plain-text field and yields typed spans covering the whole string.

Grammar
-------
Alternatives are tried in this order at each scan position; the first one
that matches wins:

1. Link          ``[text](url)``  (single-level brackets and parens)
2. Citation      ``[^id]``        (``id`` in ``[A-Za-z0-9_-]+``)
3. Bold          ``**text**``
4. Italic        ``*text*``
5. Strikethrough ``~~text~~``

Bold, italic and strikethrough match lazily, and their inner text must be
non-empty and must not start or end with whitespace. Italic holds no
``*`` and never opens or closes on half of a ``**`` pair, so bold always
takes priority.

Everything between matches is emitted as a ``text`` span unchanged. The
tokenizer only recognizes syntactic shape: an ``[^id]`` with no matching
reference is still a citation span, and resolution happens in
:mod:`colonnade.core.citations`.

Guarantees
----------
- Concatenating ``span.source`` over the output reproduces the input.
- A string with no markup yields exactly one ``text`` span.
- Never raises.

Examples
--------
>>> [s.kind for s in tokenize("Visit [our site](https://x.test) for **bold** info [^ref1]")]
['text', 'link', 'text', 'bold', 'text', 'citation']
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

SpanKind = Literal["text", "link", "citation", "bold", "italic", "strike"]

#: Citation token, shared with the citation indexer.
CITATION_PATTERN = re.compile(r"\[\^([A-Za-z0-9_-]+)\]")

_TOKEN = re.compile(
    r"(?P<link>\[(?P<link_text>[^\]]+)\]\((?P<link_url>[^)]+)\))"
    r"|(?P<citation>\[\^(?P<ref_id>[A-Za-z0-9_-]+)\])"
    r"|(?P<bold>\*\*(?P<bold_text>(?!\s).+?(?<!\s))\*\*)"
    r"|(?P<italic>(?<!\*)\*(?P<italic_text>[^\s*](?:[^*]*[^\s*])?)\*(?!\*))"
    r"|(?P<strike>~~(?P<strike_text>(?!\s).+?(?<!\s))~~)",
    flags=re.DOTALL,
)


@dataclass(frozen=True, slots=True)
class Span:
    """
    One tokenized stretch of a text field.

    Attributes
    ----------
    kind : SpanKind
        Span type.
    source : str
        Exact substring of the input this span consumed, markup included.
    text : str
        Display text: the inner text for formatting spans and links, the
        source itself for plain text, the id for citations.
    url : str | None
        Link target (links only).
    ref_id : str | None
        Cited reference id (citations only).
    """

    kind: SpanKind
    source: str
    text: str
    url: str | None = None
    ref_id: str | None = None


def _span_from_match(match: re.Match[str]) -> Span:
    source = match.group(0)
    if match.group("link") is not None:
        return Span("link", source, match.group("link_text"), url=match.group("link_url"))
    if match.group("citation") is not None:
        ref_id = match.group("ref_id")
        return Span("citation", source, ref_id, ref_id=ref_id)
    if match.group("bold") is not None:
        return Span("bold", source, match.group("bold_text"))
    if match.group("italic") is not None:
        return Span("italic", source, match.group("italic_text"))
    return Span("strike", source, match.group("strike_text"))


def tokenize(text: str) -> list[Span]:
    """Split ``text`` into an ordered, gap-free list of :class:`Span`.

    Parameters
    ----------
    text : str
        Raw field content. ``""`` yields ``[]``.

    Returns
    -------
    list[Span]
        Non-overlapping spans in input order.
    """
    spans: list[Span] = []
    last = 0
    for match in _TOKEN.finditer(text):
        if match.start() > last:
            plain = text[last : match.start()]
            spans.append(Span("text", plain, plain))
        spans.append(_span_from_match(match))
        last = match.end()
    if last < len(text):
        tail = text[last:]
        spans.append(Span("text", tail, tail))
    return spans


def citation_ids(text: str) -> list[str]:
    """Return every cited id in ``text`` in order, duplicates included.

    Ids are taken from citation spans rather than a raw pattern scan, so a
    token swallowed by a link (``[^a](url)``) is not counted.
    """
    if not CITATION_PATTERN.search(text):
        return []
    return [s.ref_id for s in tokenize(text) if s.ref_id is not None]


__all__ = ["CITATION_PATTERN", "Span", "SpanKind", "citation_ids", "tokenize"]
