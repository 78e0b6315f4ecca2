# marginalia/markdown/preprocessors/__init__.py

from .footnote_splitter import footnote_splitter_default
from .frontmatter import frontmatter_default

PREPROCESSORS = [
    frontmatter_default,  # Must run first, the preamble is not markdown
    footnote_splitter_default,  # Collects definitions into context["footnotes"]
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
