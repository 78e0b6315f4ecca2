"""Tests for the python-markdown extensions used to render note bodies."""

import pytest

from marginalia.exceptions import DeckError
from marginalia.markdown.config import create_markdown, get_markdown_config
from marginalia.markdown.extensions.md_links import rewrite_destination

CARD = '{"question": "Q1", "question_attachments": "", "answer": "A1"}'


def convert(text: str) -> str:
    return create_markdown().convert(text)


def test_config_builds_fresh_extensions() -> None:
    """Ensure two configurations never share extension instances."""

    first = get_markdown_config()["extensions"]
    second = get_markdown_config()["extensions"]

    shared = [ext for ext in first if not isinstance(ext, str) and ext in second]
    assert shared == []


def test_footnote_references_are_numbered_per_occurrence() -> None:
    """Ensure counters follow references, not labels."""

    html = convert("One[^x] two[^y] three[^x].")

    first = '<sup class="fn"><a id="x-back" href="#x">[1]</a></sup>'
    second = '<sup class="fn"><a id="y-back" href="#y">[2]</a></sup>'
    third = '<sup class="fn"><a id="x-back" href="#x">[3]</a></sup>'
    assert html.index(first) < html.index(second) < html.index(third)


def test_footnote_references_in_nested_blocks_follow_document_order() -> None:
    """Ensure lists and blockquotes do not reorder the counters."""

    html = convert(
        "Start[^a].\n\n"
        "> Quoted[^b].\n\n"
        "- item[^c]\n"
        "- item[^d]\n\n"
        "> Quoted again[^e].\n\n"
        "End[^f]."
    )

    positions = [
        html.index(f'href="#{label}">[{number}]')
        for number, label in enumerate("abcdef", start=1)
    ]
    assert positions == sorted(positions)


def test_footnote_counter_restarts_for_each_document() -> None:
    """Ensure no numbering leaks between Markdown instances."""

    convert("A[^a] b[^b].")
    html = convert("C[^c].")

    assert "[1]</a></sup>" in html
    assert "[3]" not in html


def test_footnote_reference_in_code_is_literal() -> None:
    """Ensure inline code keeps the reference syntax."""

    html = convert("Write `[^label]` to cite.")

    assert "<code>[^label]</code>" in html
    assert "<sup" not in html


def test_markdown_link_destinations_are_rewritten() -> None:
    """Ensure only links ending in .md change, and only their suffix."""

    html = convert(
        "[a](notes/recall.md) [b](https://example.com/page) [c](file.md.txt)"
    )

    assert 'href="notes/recall.html"' in html
    assert 'href="https://example.com/page"' in html
    assert 'href="file.md.txt"' in html


def test_raw_html_links_are_untouched() -> None:
    """Ensure anchors written as HTML keep their destination."""

    html = convert('See <a href="raw.md">raw</a>.')

    assert 'href="raw.md"' in html


@pytest.mark.parametrize(
    "href, expected",
    [
        ("a.md", "a.html"),
        ("dir.md/b.md", "dir.md/b.html"),
        ("a.markdown", "a.markdown"),
        ("a.md#part", "a.md#part"),
        ("", ""),
    ],
)
def test_rewrite_destination(href: str, expected: str) -> None:
    """Ensure the .md suffix is the only thing replaced."""

    assert rewrite_destination(href) == expected


def test_strikethrough() -> None:
    """Ensure ~~text~~ renders as deleted text."""

    assert "<del>gone</del>" in convert("This is ~~gone~~ now.")


def test_smart_punctuation() -> None:
    """Ensure quotes and dashes are typographic."""

    html = convert("It's 1990--1995 --- roughly.")

    assert "&rsquo;" in html
    assert "&ndash;" in html
    assert "&mdash;" in html


def test_plain_fenced_code_stays_code() -> None:
    """Ensure fences with other languages still render as code blocks."""

    html = convert("```python\nx = 1\n```\n")

    assert 'class="language-python"' in html
    assert "x = 1" in html


def test_orbit_block_renders_review_area() -> None:
    """Ensure an orbit fence becomes a review area outside any paragraph."""

    html = convert(f"Before.\n\n```orbit\n[{CARD}]\n```\n\nAfter.")

    assert (
        "<orbit-reviewarea>"
        '<orbit-prompt question="Q1" question-attachments="" answer="A1"></orbit-prompt>'
        "</orbit-reviewarea>"
    ) in html
    assert "<p><orbit-reviewarea>" not in html
    assert "<code" not in html
    assert "<p>Before.</p>" in html
    assert "<p>After.</p>" in html


def test_orbit_block_payload_is_not_parsed_as_markdown() -> None:
    """Ensure markup inside the payload reaches the widget verbatim."""

    card = '{"question": "What is *this*?", "question_attachments": "", "answer": "[^x]"}'

    html = convert(f"```orbit\n[{card}]\n```\n")

    assert 'question="What is *this*?"' in html
    assert 'answer="[^x]"' in html
    assert "<sup" not in html
    assert "<em>" not in html


def test_orbit_block_with_tilde_fence() -> None:
    """Ensure tilde fences are recognised like backtick fences."""

    html = convert(f"~~~orbit\n[{CARD}]\n~~~\n")

    assert html.count("<orbit-prompt ") == 1


def test_orbit_fence_quoted_in_code_block_stays_code() -> None:
    """Ensure an orbit example inside a longer fence is left alone."""

    html = convert("````markdown\n```orbit\nnot json\n```\n````\n")

    assert "<orbit-reviewarea>" not in html
    assert "```orbit" in html


def test_other_language_containing_orbit_is_code() -> None:
    """Ensure only the exact 'orbit' tag triggers a review area."""

    html = convert("```orbits\n[]\n```\n")

    assert "<orbit-reviewarea>" not in html
    assert "<code" in html


def test_malformed_orbit_payload_is_fatal() -> None:
    """Ensure a card with a missing field aborts the conversion."""

    with pytest.raises(DeckError):
        convert('```orbit\n[{"question": "Q", "answer": "A"}]\n```\n')


def test_unterminated_orbit_block_is_fatal() -> None:
    """Ensure an orbit block without a closing fence aborts the conversion."""

    with pytest.raises(DeckError, match="never closed"):
        convert(f"```orbit\n[{CARD}]\n")


def test_orbit_block_with_single_card_object_is_fatal() -> None:
    """Ensure a card written without the enclosing array is not an empty deck."""

    with pytest.raises(DeckError):
        convert(f"```orbit\n{CARD}\n```\n")
