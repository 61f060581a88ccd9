from __future__ import annotations

import re

# "&" then "#" + digits, "#x" + hex digits, or letters, with no ";" yet.
_INCOMPLETE_ENTITY_RE = re.compile(r"&(?:#[xX][0-9A-Fa-f]{0,6}|#[0-9]{0,6}|[A-Za-z]{0,10})\Z")

_SPACE_ENTITY_RE = re.compile(r"&#(?:32|x20);", re.IGNORECASE)
_NEWLINE_ENTITY_RE = re.compile(r"&#(?:10|x0a);", re.IGNORECASE)


def split_incomplete_entity(text: str) -> tuple[str, str]:
    """
    Split `text` into (emitted, suffix) where suffix is a trailing entity that
    may still be completed by the next chunk, e.g. "hello &nbs" -> ("hello ", "&nbs").

    A lone "&" is emitted as-is: it cannot be told apart from a literal ampersand.
    """
    if not text or "&" not in text:
        return text, ""
    m = _INCOMPLETE_ENTITY_RE.search(text)
    if m is None or len(m.group(0)) <= 1:
        return text, ""
    return text[: m.start()], m.group(0)


def buffer_incomplete_entities(text: str) -> str:
    return split_incomplete_entity(text)[0]


def decode_minimal_entities(text: str) -> str:
    # Only space and newline; everything else is left for the renderer.
    if not text:
        return text
    text = _SPACE_ENTITY_RE.sub(" ", text)
    return _NEWLINE_ENTITY_RE.sub("\n", text)
