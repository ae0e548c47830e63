# src/colonnade/cli.py
"""
Colonnade Command Line Interface (CLI).

Terminal front end for the layout engine, built with `typer` and `rich`.
Every command is a thin wrapper: it reads a JSON article document written by
the builder, runs the pure engine, and prints the result.

Commands
--------
- ``layout``    : print the rows / sections / flow runs of an article, the
  numbered reference footer and the reading time.
- ``tokens``    : print the inline spans of a single string.
- ``citations`` : print cited ids with their numbers, flagging unresolved ones.

Usage
-----
    $ colonnade layout article.json --strategy independent-stack
    $ colonnade layout article.json --record layout.json --save-record layout.json
    $ colonnade tokens "Visit [our site](https://x.test) for **bold** info [^ref1]"
    $ colonnade citations article.json
"""

from __future__ import annotations

import json
import traceback
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from colonnade.core.citations import AnnotatedSpan, annotate, index_citations, reference_numbers
from colonnade.core.contracts.block import Block, iter_text_fields
from colonnade.core.contracts.document import ArticleDocument, parse_document
from colonnade.core.contracts.layout import (
    ColumnsSection,
    FlowRun,
    FullRow,
    FullSection,
    LayoutStrategy,
)
from colonnade.core.settings import load_settings
from colonnade.core.text.tokenizer import tokenize
from colonnade.pipelines.article_layout import LayoutPassResult, run_layout_pass

load_dotenv()

app = typer.Typer(
    help="Colonnade: fold article blocks into magazine columns and number citations.",
    rich_markup_mode="markdown",
)
console = Console()


# --------------------------------------------------------------------------- #
# Helpers: I/O
# --------------------------------------------------------------------------- #


def _read_document(path: Path) -> ArticleDocument:
    """Helper: load and validate an article document, exiting with code 1 on failure."""
    parsed = parse_document(path.read_text(encoding="utf-8"))
    if parsed.is_err():
        console.print(f"[bold red]❌ Invalid document:[/bold red] {escape(parsed.unwrap_err())}")
        raise typer.Exit(code=1)
    return parsed.unwrap()


def _label(block: Block) -> str:
    """Helper: short human label for a block (type plus first words of its text)."""
    first = next((text for _, text in iter_text_fields(block)), "")
    snippet = first.replace("\n", " ")
    if len(snippet) > 32:
        snippet = snippet[:31] + "…"
    label = f"[dim]{block.type}[/dim] {escape(block.id)}"
    return f"{label} · {escape(snippet)}" if snippet else label


def render_spans(spans: list[AnnotatedSpan], marker: str) -> str:
    """Flatten annotated spans to console markup (citations as ``[n]``)."""
    parts: list[str] = []
    for a in spans:
        span = a.span
        if span.kind == "citation":
            if a.unresolved:
                parts.append(f"[red]{escape(f'[{marker}{span.ref_id}]')}[/red]")
            else:
                parts.append(f"[{a.number}]")
        elif span.kind == "bold":
            parts.append(f"[bold]{escape(span.text)}[/bold]")
        elif span.kind == "italic":
            parts.append(f"[italic]{escape(span.text)}[/italic]")
        elif span.kind == "strike":
            parts.append(f"[strike]{escape(span.text)}[/strike]")
        elif span.kind == "link":
            url = span.url or ""
            if "[" in url or "]" in url:
                # Brackets would end the markup tag early.
                parts.append(f"{escape(span.text)} [dim]({escape(url)})[/dim]")
            else:
                parts.append(f"[link={url}]{escape(span.text)}[/link]")
        else:
            parts.append(escape(span.text))
    return "".join(parts)


# --------------------------------------------------------------------------- #
# Helpers: Rendering
# --------------------------------------------------------------------------- #


def _render_layout(result: LayoutPassResult) -> None:
    """Helper: print the layout items as a two-column table."""
    by_id = {b.id: b for b in result.blocks}
    table = Table(title=f"Layout ({result.strategy.value})", show_lines=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Left")
    table.add_column("Right")

    if result.rows is not None:
        for i, row in enumerate(result.rows, start=1):
            if isinstance(row, FullRow):
                table.add_row(str(i), _label(by_id[row.block_id]), "[dim]↔ full[/dim]")
            else:
                left = _label(by_id[row.left_id]) if row.left_id else ""
                right = _label(by_id[row.right_id]) if row.right_id else ""
                table.add_row(str(i), left, right)
    elif result.sections is not None:
        for i, section in enumerate(result.sections, start=1):
            if isinstance(section, FullSection):
                table.add_row(str(i), _label(section.block), "[dim]↔ full[/dim]")
            elif isinstance(section, ColumnsSection):
                table.add_row(
                    str(i),
                    "\n".join(_label(b) for b in section.left),
                    "\n".join(_label(b) for b in section.right),
                )
    elif result.flow is not None:
        for i, item in enumerate(result.flow, start=1):
            if isinstance(item, FlowRun):
                labels = "\n".join(_label(b) for b in item.blocks)
                left, right = (labels, "") if item.direction == "left" else ("", labels)
                table.add_row(str(i), left, right)
            else:
                table.add_row(str(i), _label(item.block), "[dim]↔ full[/dim]")

    console.print(table)


def _render_footer(result: LayoutPassResult, marker: str) -> None:
    """Helper: print the numbered references and any unresolved ids."""
    if result.footer:
        console.print("\n[bold]References[/bold]")
        for entry in result.footer:
            ref = entry.reference
            extra = ", ".join(x for x in (ref.publisher, ref.date) if x)
            line = f" {entry.number}. {escape(ref.title)}"
            if extra:
                line += f" ({escape(extra)})"
            if ref.url:
                line += f" [dim]{escape(ref.url)}[/dim]"
            console.print(line)
    for ref_id in result.unresolved:
        console.print(f" [red]{escape(marker)} unresolved citation: {escape(ref_id)}[/red]")
    if result.reading_minutes is not None:
        console.print(f"\n[dim]Reading time: {result.reading_minutes} min[/dim]")


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def layout(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Path to the article document (JSON).",
        ),
    ],
    strategy: Annotated[
        LayoutStrategy | None,
        typer.Option("--strategy", "-s", help="Layout strategy (default from settings)."),
    ] = None,
    record: Annotated[
        Path | None,
        typer.Option("--record", "-r", help="Stored layout record to apply (JSON)."),
    ] = None,
    save_record: Annotated[
        Path | None,
        typer.Option("--save-record", help="Write the reconciled layout record here."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show full error tracebacks for debugging."),
    ] = False,
) -> None:
    """
    Lay out an article and print its rows, footer and reading time.
    """
    document = _read_document(file)
    raw_record = record.read_text(encoding="utf-8") if record and record.exists() else None

    try:
        result = run_layout_pass(document, strategy=strategy, record=raw_record)
    except Exception as e:
        console.print(f"\n[bold red]❌ Layout Error:[/bold red] {e}")
        if verbose:
            traceback.print_exc()
        raise typer.Exit(code=1) from e

    console.print(
        Panel.fit(
            f"[bold cyan]Colonnade[/bold cyan]\n{file.name}: {len(result.blocks)} blocks",
            border_style="cyan",
        )
    )
    _render_layout(result)
    _render_footer(result, load_settings().unresolved_marker)

    if save_record:
        payload = result.record.model_dump(by_alias=True)
        save_record.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        console.print(f"[dim]Layout record saved to: {save_record}[/dim]")


@app.command()  # type: ignore[misc]
def tokens(
    text: Annotated[str, typer.Argument(help="Inline text to tokenize.")],
) -> None:
    """
    Print the inline spans of TEXT.
    """
    table = Table(title="Spans")
    table.add_column("Kind", style="cyan")
    table.add_column("Source")
    table.add_column("Text")
    table.add_column("Target", style="dim")
    for span in tokenize(text):
        table.add_row(
            span.kind,
            repr(span.source),
            span.text,
            span.url or span.ref_id or "",
        )
    console.print(table)


@app.command()  # type: ignore[misc]
def citations(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Path to the article document (JSON).",
        ),
    ],
) -> None:
    """
    Print cited reference ids in first-occurrence order.
    """
    document = _read_document(file)
    known = {ref.id for ref in document.references}
    marker = load_settings().unresolved_marker

    cited = index_citations(document.blocks)
    numbers = reference_numbers(i for i in cited if i in known)

    table = Table(title="Citations")
    table.add_column("No.", justify="right")
    table.add_column("Id")
    table.add_column("Status")
    for ref_id in cited:
        if ref_id in known:
            table.add_row(str(numbers[ref_id]), ref_id, "[green]ok[/green]")
        else:
            table.add_row(marker, ref_id, "[red]unresolved[/red]")
    console.print(table)

    for block in document.blocks:
        for path, text in iter_text_fields(block):
            if "[^" in text:
                rendered = render_spans(annotate(text, numbers, known), marker)
                console.print(f"[dim]{block.id}.{path}:[/dim] {rendered}")


if __name__ == "__main__":
    app()
