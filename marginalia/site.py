# marginalia/site.py
"""
Build a directory of notes into a directory of pages.

Every ``.md`` file below the source directory is rendered into
``<destination>/<stem>.html``. Outputs are flattened: a note in a
subdirectory lands in the destination root. Entries whose name starts with a
dot are skipped along with everything below them. Documents are converted one
at a time, and the first error stops the build.
"""

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from django.template.base import Template

from .constants import OUTPUT_SUFFIX, SOURCE_SUFFIX, STYLESHEET_NAME
from .exceptions import ConversionError
from .pages import load_page_template, render_page

logger = logging.getLogger(__name__)

STYLESHEET = Path(__file__).resolve().parent / "static" / STYLESHEET_NAME


@dataclass(frozen=True)
class Document:
    """A note read from disk, and where its page will be written."""

    source_path: Path
    output_path: Path
    text: str

    @classmethod
    def load(cls, source_path: Path, destination: Path) -> "Document":
        text = source_path.read_text(encoding="utf-8")
        return cls(
            source_path=source_path,
            output_path=output_path_for(source_path, destination),
            text=text,
        )


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def is_markdown(name: str) -> bool:
    return name.endswith(SOURCE_SUFFIX)


def output_path_for(source_path: Path, destination: Path) -> Path:
    return destination / Path(source_path.name).with_suffix(OUTPUT_SUFFIX)


def _raise(error: OSError) -> None:
    raise error


def iter_markdown_files(source: Path) -> Iterator[Path]:
    """
    Yield the notes below ``source`` in sorted traversal order.

    Hidden files and directories are skipped. The source directory itself is
    never treated as hidden, so ``.`` works as a source.

    Raises:
        OSError: If a directory cannot be listed
    """
    for dirpath, dirnames, filenames in os.walk(source, onerror=_raise):
        dirnames[:] = sorted(name for name in dirnames if not is_hidden(name))
        for filename in sorted(filenames):
            if not is_hidden(filename) and is_markdown(filename):
                yield Path(dirpath) / filename


def convert_document(document: Document, template: Template) -> str:
    """Render a document, attaching its source path to conversion errors."""
    try:
        return render_page(document.text, template)
    except ConversionError as exc:
        exc.source = document.source_path
        raise


def copy_stylesheet(destination: Path, stylesheet: Optional[Path] = None) -> Path:
    target = destination / STYLESHEET_NAME
    shutil.copyfile(stylesheet or STYLESHEET, target)
    return target


def build_site(
    source: Path,
    destination: Path,
    template_path: Optional[Path] = None,
    stylesheet_path: Optional[Path] = None,
) -> List[Path]:
    """
    Render every note below ``source`` into ``destination``.

    Args:
        source: Directory holding the notes
        destination: Directory receiving pages and the stylesheet, created if
            missing
        template_path: Page template, defaults to the packaged one
        stylesheet_path: Stylesheet copied next to the pages, defaults to the
            packaged ``tufte.css``

    Returns:
        Paths of the written pages, in conversion order

    Raises:
        ConversionError: On the first malformed note, with ``source`` set
        OSError: On traversal or write failures
        UnicodeDecodeError: If a note is not UTF-8 text, naming the note
    """
    destination.mkdir(parents=True, exist_ok=True)
    template = load_page_template(template_path)

    written: Dict[Path, Path] = {}
    for source_path in iter_markdown_files(source):
        try:
            document = Document.load(source_path, destination)
        except UnicodeDecodeError as exc:
            logger.error("%s is not UTF-8 text", source_path)
            raise UnicodeDecodeError(
                exc.encoding,
                exc.object,
                exc.start,
                exc.end,
                f"{exc.reason} in {source_path}",
            ) from exc

        previous = written.get(document.output_path)
        if previous is not None:
            logger.warning(
                "%s and %s both render to %s, keeping the latter",
                previous,
                source_path,
                document.output_path,
            )

        logger.info("Rendering %s -> %s", source_path, document.output_path)
        page = convert_document(document, template)
        document.output_path.write_text(page, encoding="utf-8")
        written[document.output_path] = source_path

    copy_stylesheet(destination, stylesheet_path)
    logger.info("Wrote %d page(s) to %s", len(written), destination)

    return list(written)
