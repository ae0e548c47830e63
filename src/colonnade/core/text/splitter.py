"""Split a text block's body into alternating paragraph and list runs.

A line is a list line when it matches ``^\\s*[-*•]\\s``; the marker and the
whitespace that follows it are stripped. Consecutive list lines form one
:class:`ListRun`, consecutive other lines form one :class:`ParagraphRun`, and
a change of kind flushes the open run.

Blank lines join whichever run is open and never flush it, so a blank line
between two bullets keeps them in the same list (as an empty item). A blank
line with no run open starts a paragraph.

>>> split_paragraphs_and_lists("Intro\\n- one\\n- two\\nOutro")
[ParagraphRun(lines=['Intro']), ListRun(items=['one', 'two']), ParagraphRun(lines=['Outro'])]
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal

_LIST_MARKER = re.compile(r"^\s*[-*•]\s")


@dataclass(slots=True)
class ParagraphRun:
    """Consecutive non-list lines."""

    lines: list[str] = field(default_factory=list)
    kind: Literal["paragraph"] = field(default="paragraph", init=False, repr=False)


@dataclass(slots=True)
class ListRun:
    """Consecutive list items, markers stripped."""

    items: list[str] = field(default_factory=list)
    kind: Literal["list"] = field(default="list", init=False, repr=False)


TextRun = ParagraphRun | ListRun


def is_list_line(line: str) -> bool:
    """Return True if ``line`` opens with a list marker followed by whitespace."""
    return _LIST_MARKER.match(line) is not None


def split_paragraphs_and_lists(text: str) -> list[TextRun]:
    """Partition ``text`` into paragraph and list runs, in line order."""
    if not text:
        return []
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    runs: list[TextRun] = []
    current: TextRun | None = None

    for line in text.split("\n"):
        if not line.strip() and current is not None:
            if isinstance(current, ListRun):
                current.items.append("")
            else:
                current.lines.append(line)
            continue

        if is_list_line(line):
            if not isinstance(current, ListRun):
                current = ListRun()
                runs.append(current)
            current.items.append(_LIST_MARKER.sub("", line, count=1))
        else:
            if not isinstance(current, ParagraphRun):
                current = ParagraphRun()
                runs.append(current)
            current.lines.append(line)

    return runs


__all__ = [
    "ListRun",
    "ParagraphRun",
    "TextRun",
    "is_list_line",
    "split_paragraphs_and_lists",
]
