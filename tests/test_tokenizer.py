"""Tests for the inline markup tokenizer.

Covers the documented grammar priorities, graceful degradation of malformed
markup, and the two structural guarantees: full coverage of the input and a
single plain span for markup-free text.
"""

from __future__ import annotations

from colonnade.core.text.tokenizer import Span, citation_ids, tokenize


def _kinds(spans: list[Span]) -> list[str]:
    return [s.kind for s in spans]


def test_mixed_markup_scenario() -> None:
    """Link, bold and citation interleaved with plain text give six spans."""
    spans = tokenize("Visit [our site](https://x.test) for **bold** info [^ref1]")

    assert _kinds(spans) == ["text", "link", "text", "bold", "text", "citation"]
    assert spans[0].text == "Visit "
    assert (spans[1].text, spans[1].url) == ("our site", "https://x.test")
    assert spans[2].text == " for "
    assert spans[3].text == "bold"
    assert spans[4].text == " info "
    assert spans[5].ref_id == "ref1"


def test_plain_text_is_one_span() -> None:
    text = "Nothing special here, just words. 100% plain."
    spans = tokenize(text)
    assert spans == [Span("text", text, text)]


def test_empty_string_yields_no_spans() -> None:
    assert tokenize("") == []


def test_sources_reconstruct_input() -> None:
    """Concatenating span sources gives back the original string exactly."""
    samples = [
        "a *b* c **d** e ~~f~~ g [h](i) j [^k]",
        "[broken](no close and **unclosed",
        "** a** then *b * and ~~ c~~",
        "line one\n*multi\nline* end",
        "[^a][^b]**x***y*",
    ]
    for text in samples:
        assert "".join(s.source for s in tokenize(text)) == text


def test_bold_takes_priority_over_italic() -> None:
    spans = tokenize("*it* and **bo**")
    assert _kinds(spans) == ["italic", "text", "bold"]
    assert spans[0].text == "it"
    assert spans[2].text == "bo"


def test_strikethrough() -> None:
    spans = tokenize("was ~~gone~~ now")
    assert _kinds(spans) == ["text", "strike", "text"]
    assert spans[1].text == "gone"


def test_formatting_rejects_edge_whitespace() -> None:
    """Inner text may not start or end with whitespace."""
    assert _kinds(tokenize("** a**")) == ["text"]
    assert _kinds(tokenize("*a *")) == ["text"]
    assert _kinds(tokenize("~~ a~~")) == ["text"]


def test_empty_markers_are_plain() -> None:
    assert _kinds(tokenize("****")) == ["text"]
    assert _kinds(tokenize("~~~~")) == ["text"]


def test_unbalanced_link_is_plain() -> None:
    assert _kinds(tokenize("[broken](no close")) == ["text"]
    assert _kinds(tokenize("[no url]")) == ["text"]


def test_unknown_citation_is_still_a_citation_span() -> None:
    """Resolution happens downstream; shape alone makes a citation."""
    spans = tokenize("see [^nope]")
    assert _kinds(spans) == ["text", "citation"]
    assert spans[1].ref_id == "nope"


def test_invalid_citation_id_is_plain() -> None:
    assert _kinds(tokenize("[^bad id]")) == ["text"]


def test_link_wins_over_citation_shape() -> None:
    spans = tokenize("[^a](https://x.test)")
    assert _kinds(spans) == ["link"]
    assert spans[0].text == "^a"


def test_citation_ids_keep_duplicates_in_order() -> None:
    assert citation_ids("x [^a] y [^b] z [^a]") == ["a", "b", "a"]
    assert citation_ids("no citations") == []
    assert citation_ids("[^a](https://x.test)") == []


def test_italic_never_splits_a_bold_pair() -> None:
    spans = tokenize("*a **b** c*")
    assert _kinds(spans) == ["text", "bold", "text"]
    assert spans[1].text == "b"
    assert "".join(s.source for s in spans) == "*a **b** c*"


def test_italic_does_not_open_inside_an_unclosed_bold() -> None:
    assert _kinds(tokenize("x **b c*")) == ["text"]
    assert _kinds(tokenize("*a*b*")) == ["italic", "text"]
