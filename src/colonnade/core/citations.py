"""
Citation Indexer: first-occurrence numbering of ``[^id]`` tokens.

Every text-bearing field of every block is scanned in document order (title
and subtitle, text heading and body, quote and author, sidebar headings and
items, image captions). The first time an id is seen it gets the next
number; later occurrences reuse it.

Rendering rules
---------------
- The footer lists only references that are actually cited, in number order.
- A citation whose id has no entry in the supplied references is kept as an
  *unresolved* span with no number, so the renderer can flag it instead of
  dropping it or showing a misleading number.

Example
-------
>>> from colonnade.core.contracts.block import TextBlock
>>> blocks = [TextBlock(id="b1", text="See [^a] and [^b]."), TextBlock(id="b2", text="Again [^a].")]
>>> index_citations(blocks)
['a', 'b']
>>> reference_numbers(index_citations(blocks))
{'a': 1, 'b': 2}
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from dataclasses import dataclass

from colonnade.core.contracts.block import Block, iter_text_fields
from colonnade.core.contracts.reference import NumberedReference, Reference
from colonnade.core.text.tokenizer import Span, citation_ids, tokenize


@dataclass(frozen=True, slots=True)
class AnnotatedSpan:
    """
    A tokenizer span with its citation resolved.

    Attributes
    ----------
    span : Span
        The underlying span.
    number : int | None
        Footer number for a resolved citation; ``None`` otherwise.
    unresolved : bool
        True for a citation whose id matches no supplied reference.
    """

    span: Span
    number: int | None = None
    unresolved: bool = False


def index_citations(
    ordered_blocks: Iterable[Block], known_ids: Collection[str] | None = None
) -> list[str]:
    """Return cited ids in first-occurrence order.

    Parameters
    ----------
    ordered_blocks : Iterable[Block]
        Blocks in document order.
    known_ids : Collection[str] | None
        When given, ids outside this set are skipped so that footer numbers
        stay contiguous over resolvable references.
    """
    seen: set[str] = set()
    ordered: list[str] = []
    for block in ordered_blocks:
        for _, text in iter_text_fields(block):
            for ref_id in citation_ids(text):
                if ref_id in seen or (known_ids is not None and ref_id not in known_ids):
                    continue
                seen.add(ref_id)
                ordered.append(ref_id)
    return ordered


def reference_numbers(cited_ids: Iterable[str]) -> dict[str, int]:
    """Map each cited id to its 1-based display number."""
    return {ref_id: n for n, ref_id in enumerate(cited_ids, start=1)}


def ordered_references(
    cited_ids: Iterable[str], references: Iterable[Reference]
) -> list[NumberedReference]:
    """Build the footer: cited references only, in citation order."""
    by_id = {ref.id: ref for ref in references}
    footer: list[NumberedReference] = []
    for number, ref_id in enumerate(cited_ids, start=1):
        ref = by_id.get(ref_id)
        if ref is not None:
            footer.append(NumberedReference(number=number, reference=ref))
    return footer


def unresolved_ids(ordered_blocks: Iterable[Block], known_ids: Collection[str]) -> list[str]:
    """Return cited ids with no matching reference, in first-occurrence order."""
    return [i for i in index_citations(ordered_blocks) if i not in known_ids]


def annotate(
    text: str, numbers: Mapping[str, int], known_ids: Collection[str] | None = None
) -> list[AnnotatedSpan]:
    """Tokenize ``text`` and attach citation numbers.

    A citation is unresolved when its id is outside ``known_ids`` (defaults
    to the keys of ``numbers``) or has no number.
    """
    known = numbers.keys() if known_ids is None else known_ids
    annotated: list[AnnotatedSpan] = []
    for span in tokenize(text):
        if span.kind != "citation" or span.ref_id is None:
            annotated.append(AnnotatedSpan(span))
            continue
        number = numbers.get(span.ref_id)
        if span.ref_id in known and number is not None:
            annotated.append(AnnotatedSpan(span, number=number))
        else:
            annotated.append(AnnotatedSpan(span, unresolved=True))
    return annotated


__all__ = [
    "AnnotatedSpan",
    "annotate",
    "index_citations",
    "ordered_references",
    "reference_numbers",
    "unresolved_ids",
]
