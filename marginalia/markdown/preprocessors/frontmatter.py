# marginalia/markdown/preprocessors/frontmatter.py
"""
Preprocessor that drops the frontmatter preamble of a note.

Notes open with a metadata block fenced by ``---`` lines:

    ---
    title: Spaced repetition
    date: 2021-03-02
    ---
    # Spaced repetition
    ...

The metadata is not rendered; everything after the closing delimiter is the
document body. Running this twice on the same text is not a no-op: the
second pass fails, or strips a genuine ``---`` section of the body.
"""

from ...exceptions import FrontmatterError

DELIMITER = "---"


def strip_frontmatter(text: str) -> str:
    """
    Return the text that follows the frontmatter block.

    Args:
        text: Raw note source

    Returns:
        Body text, starting right after the closing delimiter line

    Raises:
        FrontmatterError: If the text does not open with a delimiter line or
            the block is never closed
    """
    lines = text.split("\n")

    if lines[0].lstrip("\ufeff").rstrip() != DELIMITER:
        raise FrontmatterError("document does not open with a '---' frontmatter block")

    for index, line in enumerate(lines[1:], start=1):
        if line.rstrip() == DELIMITER:
            return "\n".join(lines[index + 1 :])

    raise FrontmatterError("frontmatter block is never closed by a '---' line")


def frontmatter_default(text: str, context: dict) -> str:
    """
    Default configuration for strip_frontmatter.

    This is the function that should be registered in PREPROCESSORS.
    """
    return strip_frontmatter(text)
