# marginalia/pages.py
"""
Assemble rendered notes into complete HTML pages.

The page template is a Django template with a single ``{{ body }}`` slot.
The body is already HTML, so it is substituted with ``mark_safe`` and never
escaped.
"""

from pathlib import Path
from typing import Optional

from django.template.base import Template
from django.utils.safestring import mark_safe

from .markdown import render_note
from .templating import TEMPLATES_DIR, load_template, render_template

PAGE_TEMPLATE = TEMPLATES_DIR / "page.html"
BODY_SLOT = "body"


def load_page_template(path: Optional[Path] = None) -> Template:
    """
    Load the page template.

    Args:
        path: Template file, defaults to the packaged ``page.html``

    Raises:
        TemplateSlotError: If the template has no ``{{ body }}`` slot
    """
    source = (path or PAGE_TEMPLATE).read_text(encoding="utf-8")
    return load_template(source, required_slots=[BODY_SLOT])


def assemble_page(body_html: str, footnotes_html: str, template: Template) -> str:
    return render_template(template, {BODY_SLOT: mark_safe(body_html + footnotes_html)})


def render_page(text: str, template: Optional[Template] = None) -> str:
    """
    Render the raw source of a note into a full page.

    Args:
        text: Raw note source, frontmatter included
        template: Page template, defaults to the packaged one

    Returns:
        Page HTML
    """
    if template is None:
        template = load_page_template()

    body, footnotes = render_note(text)
    return assemble_page(body, footnotes, template)
