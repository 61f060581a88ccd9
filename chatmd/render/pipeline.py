from __future__ import annotations

from typing import Optional

from .citations import convert_citations_to_markdown_links
from .emphasis import remove_parentheses_around_italics
from .entities import decode_minimal_entities, split_incomplete_entity
from .line_breaks import apply_hard_line_breaks_to_string
from .models import Segment
from .normalize import (
    normalize_escaped_markdown,
    normalize_latex_delimiters,
    strip_trailing_streaming_artifacts,
)


def _normalize_complete_text(md: str) -> str:
    # Order matters: citations must see unescaped brackets, italics must see
    # final text.
    md = decode_minimal_entities(md)
    md = normalize_latex_delimiters(md)
    md = normalize_escaped_markdown(md)
    md = convert_citations_to_markdown_links(md)
    md = remove_parentheses_around_italics(md)
    return md


def prepare_markdown(text: str, *, streaming: bool = False) -> str:
    """
    Run the string stages on one accumulated text: entity buffering, minimal
    entity decoding, LaTeX delimiters, escaped markdown, citation links and
    italic parentheses, in that order.
    """
    if not text:
        return ""
    emitted, _suffix = split_incomplete_entity(text)
    if streaming:
        emitted = strip_trailing_streaming_artifacts(emitted)
    return _normalize_complete_text(emitted)


def render_segments(md: str) -> list[Segment]:
    return apply_hard_line_breaks_to_string(md)


class MarkdownStream:
    """
    Normalizer for one live message.

    Chunks must be fed in arrival order. The only state carried between calls
    is the raw text committed so far and `pending`, a trailing entity fragment
    withheld until the next chunk decides whether it is an entity.
    """

    def __init__(self, *, strip_artifacts: bool = True) -> None:
        self.strip_artifacts = strip_artifacts
        self.committed = ""
        self.pending = ""
        self.closed = False
        self._last: Optional[str] = None

    def feed(self, chunk: str) -> str:
        if self.closed:
            raise RuntimeError("stream already finished")
        emitted, self.pending = split_incomplete_entity(self.pending + (chunk or ""))
        self.committed += emitted
        text = self.committed
        if self.strip_artifacts:
            text = strip_trailing_streaming_artifacts(text)
        self._last = _normalize_complete_text(text)
        return self._last

    def finish(self) -> str:
        """End of stream: a leftover fragment such as "&nbs" was literal text."""
        if not self.closed:
            self.committed += self.pending
            self.pending = ""
            self.closed = True
            self._last = _normalize_complete_text(self.committed)
        return self._last or ""

    def abort(self) -> str:
        """Stop without flushing; the withheld fragment is dropped."""
        self.pending = ""
        self.closed = True
        if self._last is None:
            self._last = _normalize_complete_text(self.committed)
        return self._last

    @property
    def text(self) -> str:
        """Normalized markdown of everything received so far."""
        if self._last is None:
            return ""
        return self._last

    def segments(self) -> list[Segment]:
        return render_segments(self.text)
