from __future__ import annotations

import re
from typing import Union

from .models import LineBreak, Segment, TextSegment
from .normalize import HSPACE

_STRAY_BACKSLASH_SPACE_RE = re.compile(r"\\+" + HSPACE + "+")
# Two or more trailing spaces, or one backslash, right before a newline.
_HARD_BREAK_RE = re.compile(r"(?: {2,}|\\)\r?\n")


def apply_hard_line_breaks_to_string(text: str) -> list[Segment]:
    """
    Split `text` on markdown hard breaks: "a  \\nb" gives text "a", a break
    keyed "br-0", then text "b". Keys count breaks in order.

    A string without hard breaks comes back as a single text segment.
    """
    cleaned = _STRAY_BACKSLASH_SPACE_RE.sub(" ", text or "")
    segments: list[Segment] = []
    last = 0
    for i, m in enumerate(_HARD_BREAK_RE.finditer(cleaned)):
        if m.start() > last:
            segments.append(TextSegment(text=cleaned[last : m.start()]))
        segments.append(LineBreak(key=f"br-{i}"))
        last = m.end()
    if last < len(cleaned):
        segments.append(TextSegment(text=cleaned[last:]))
    return segments or [TextSegment(text=cleaned)]


def apply_hard_line_breaks(nodes: Union[str, list[Union[str, Segment]]]) -> list[Segment]:
    """Flatten strings and segments into one list, keys renumbered in order."""
    if isinstance(nodes, str):
        nodes = [nodes]
    flat: list[Segment] = []
    for node in nodes:
        if isinstance(node, str):
            flat.extend(apply_hard_line_breaks_to_string(node))
        else:
            flat.append(node)

    out: list[Segment] = []
    n_breaks = 0
    for seg in flat:
        if isinstance(seg, LineBreak):
            seg = LineBreak(key=f"br-{n_breaks}")
            n_breaks += 1
        out.append(seg)
    return out or [TextSegment(text="")]
