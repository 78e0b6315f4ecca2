"""Test configuration and shared fixtures.

Django settings are configured once for the whole session, the same way the
``marginalia`` entry point does it, so templates render and the ``build``
management command is discoverable through ``call_command``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from marginalia.conf import configure_django

FRONTMATTER = "---\ntitle: Note\ndate: 2021-03-02\ntags: []\nslug: note\n---\n"


def pytest_configure(config: pytest.Config) -> None:
    configure_django()


@pytest.fixture
def note() -> Callable[[str], str]:
    """Return a helper that prefixes a body with a frontmatter block."""

    def make_note(body: str) -> str:
        return FRONTMATTER + body

    return make_note


@pytest.fixture
def notes_dir(tmp_path: Path, note: Callable[[str], str]) -> Path:
    """Create a small tree of notes, including hidden entries."""

    source = tmp_path / "notes"
    (source / "sub").mkdir(parents=True)
    (source / ".drafts").mkdir()

    (source / "alpha.md").write_text(
        note("# Alpha\n\nSee [beta](beta.md).[^a]\n\n[^a]: A footnote.\n"),
        encoding="utf-8",
    )
    (source / "sub" / "beta.md").write_text(
        note("# Beta\n\nBack to [alpha](alpha.md).\n"), encoding="utf-8"
    )
    (source / ".drafts" / "gamma.md").write_text(note("# Gamma\n"), encoding="utf-8")
    (source / ".hidden.md").write_text(note("# Hidden\n"), encoding="utf-8")
    (source / "readme.txt").write_text("not a note", encoding="utf-8")

    return source
