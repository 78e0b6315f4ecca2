# marginalia/markdown/extensions/orbit_blocks.py
"""
A Markdown extension that turns ``orbit`` fenced blocks into review widgets.

    ```orbit
    [{"question": "What is 2+2?", "question_attachments": "", "answer": "4"}]
    ```

The block never reaches the code block processor. Its payload is parsed into a
ReviewDeck, rendered to an ``<orbit-reviewarea>`` and stored in the HTML stash
so python-markdown emits it untouched, outside of any paragraph.

Lines are scanned with a small state machine:
- EMITTING: ordinary markdown, passed through
- IN_FENCE: inside some other fenced block, passed through untouched so an
  ``orbit`` fence quoted in a code sample stays a code sample
- IN_ORBIT: collecting the deck payload, nothing is passed through
"""

import enum
import logging
import re

from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

from ...constants import ORBIT_LANGUAGE
from ...exceptions import DeckError
from ...orbit import ReviewDeck, render_deck
from ...orbit.widgets import REVIEW_START

logger = logging.getLogger(__name__)

FENCE_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})(?P<info>.*)$")


class _State(enum.Enum):
    EMITTING = "emitting"
    IN_FENCE = "in_fence"
    IN_ORBIT = "in_orbit"


def _is_closing_fence(line: str, fence: str) -> bool:
    match = FENCE_RE.match(line)
    if match is None or match.group("info").strip():
        return False
    closing = match.group("fence")
    return closing[0] == fence[0] and len(closing) >= len(fence)


class OrbitBlockPreprocessor(Preprocessor):
    def run(self, lines):
        output = []
        state = _State.EMITTING
        fence = ""
        payload = []
        start = 0

        for number, line in enumerate(lines, start=1):
            if state is _State.EMITTING:
                match = FENCE_RE.match(line)
                # A backtick fence may not carry backticks in its info string
                if match is None or (
                    match.group("fence")[0] == "`" and "`" in match.group("info")
                ):
                    output.append(line)
                    continue

                fence = match.group("fence")
                if match.group("info").strip() == ORBIT_LANGUAGE:
                    state = _State.IN_ORBIT
                    payload = []
                    start = number
                else:
                    state = _State.IN_FENCE
                    output.append(line)

            elif _is_closing_fence(line, fence):
                if state is _State.IN_ORBIT:
                    output.extend(["", self._render("\n".join(payload), start), ""])
                else:
                    output.append(line)
                state = _State.EMITTING

            elif state is _State.IN_ORBIT:
                payload.append(line)

            else:
                output.append(line)

        if state is _State.IN_ORBIT:
            raise DeckError(f"orbit block opened on body line {start} is never closed")

        return output

    def _render(self, payload: str, start: int) -> str:
        try:
            deck = ReviewDeck.from_json(payload)
        except DeckError as exc:
            raise DeckError(f"orbit block on body line {start}: {exc}") from exc

        logger.debug("orbit block on line %d holds %d card(s)", start, len(deck))
        return self.md.htmlStash.store(render_deck(deck))


class OrbitBlockExtension(Extension):
    def extendMarkdown(self, md):
        # Emitted as a block, not wrapped in <p>. Markdown 3.8 turned this
        # list into a set-like container.
        block_level = md.block_level_elements
        add = getattr(block_level, "add", None) or block_level.append
        add(REVIEW_START.strip("<>"))
        # After normalize_whitespace (30), before fenced_code (25)
        md.preprocessors.register(OrbitBlockPreprocessor(md), "orbit_blocks", 27)


def makeExtension(**kwargs):
    return OrbitBlockExtension(**kwargs)
