# marginalia/markdown/postprocessors/__init__.py

from .footnote_labels import footnote_labels_default

POSTPROCESSORS = [
    footnote_labels_default,  # Add label ids to footnote list items
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
