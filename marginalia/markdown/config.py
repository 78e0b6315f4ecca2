# marginalia/markdown/config.py

from markdown import Markdown

from .extensions import (
    FootnoteReferenceExtension,
    MarkdownLinkExtension,
    OrbitBlockExtension,
    StrikethroughExtension,
)


def get_markdown_config():
    """
    Configuration for python-markdown rendering.

    Used for both passes over a note: the body and the synthetic footnote
    list. A fresh configuration is built for every Markdown instance, so no
    extension object is shared between documents.

    Built-in extensions:
    - fenced_code: ``` and ~~~ code blocks with a language class
    - smarty: curly quotes, en/em dashes and ellipses

    Project extensions:
    - strikethrough: ~~text~~
    - footnote references: [^label] -> numbered superscript anchor
    - .md links: point links between notes at the rendered pages
    - orbit blocks: ```orbit fenced decks -> review widgets
    """
    return {
        "extensions": [
            "fenced_code",
            "smarty",
            StrikethroughExtension(),
            FootnoteReferenceExtension(),
            MarkdownLinkExtension(),
            OrbitBlockExtension(),
        ],
        "extension_configs": {
            "smarty": {
                "smart_quotes": True,
                "smart_dashes": True,
                "smart_ellipses": True,
                "smart_angled_quotes": False,
            },
        },
        "output_format": "html",
    }


def create_markdown() -> Markdown:
    return Markdown(**get_markdown_config())
