from __future__ import annotations

import re

# Horizontal and invisible spaces; deliberately excludes "\n" and "\r".
HSPACE = "[\t \u00a0\u1680\u180e\u2000-\u200d\u202f\u205f\u3000\ufeff]"

_DISPLAY_MATH_RE = re.compile(r"\\\[(.*?)\\\]", re.DOTALL)
_INLINE_MATH_RE = re.compile(r"\\\((.*?)\\\)", re.DOTALL)

_LITERAL_NEWLINE_RE = re.compile(r"\\(?:r\\)?n")
_ESCAPED_BLOCK_MARKER_RE = re.compile(
    r"^[ \t]{0,3}\\(```|#{1,6}(?=\s)|[-*](?=\s)|[0-9]+\.(?=\s)|>(?=\s)|\|)",
    re.MULTILINE,
)
_ESCAPED_BRACKET_RE = re.compile(r"\\([\[\]])")
_EMPHASIS_ESCAPED_SPACE_RE = re.compile(r"(\*[^*\n]+\*|_[^_\n]+_)\\+" + HSPACE + "+")
_BACKSLASH_RUN_SPACE_RE = re.compile(r"\\+" + HSPACE + "+")

_TRAILING_ZERO_WIDTH_RE = re.compile("[\u200b\u200c\u200d\ufeff\u2060\u00ad]+\\Z")
_TRAILING_BOX_DRAWING_RE = re.compile("[\u2500-\u259f\u2758-\u275a]+\\Z")


def normalize_latex_delimiters(text: str) -> str:
    """Rewrite \\[...\\] to $$...$$ and \\(...\\) to $...$, across newlines."""
    if not text:
        return text

    text = _DISPLAY_MATH_RE.sub(lambda m: "$$" + m.group(1) + "$$", text)
    return _INLINE_MATH_RE.sub(lambda m: "$" + m.group(1) + "$", text)


def normalize_escaped_markdown(text: str) -> str:
    """
    Undo over-escaping that some providers apply to markdown.

    - literal "\\n" becomes a newline, but only when the text has no real newline
    - "\\###", "\\-", "\\*", "\\1.", "\\>", "\\|", "\\```" lose the backslash at a
      line start (up to 3 spaces of indent); inline occurrences are kept
    - "\\[" / "\\]" become "[" / "]"
    - "*word*\\ " / "_word_\\ " lose the stray backslash
    - backslashes directly before horizontal whitespace collapse to one space
    """
    if not text:
        return text

    if "\n" not in text:
        text = _LITERAL_NEWLINE_RE.sub("\n", text)

    text = _ESCAPED_BLOCK_MARKER_RE.sub(r"\1", text)
    text = _ESCAPED_BRACKET_RE.sub(r"\1", text)
    text = _EMPHASIS_ESCAPED_SPACE_RE.sub(r"\1 ", text)
    text = _BACKSLASH_RUN_SPACE_RE.sub(" ", text)
    return text


def strip_trailing_streaming_artifacts(text: str) -> str:
    # Zero-width leftovers first, then cursor-like box glyphs some UIs append.
    if not text:
        return text
    text = _TRAILING_ZERO_WIDTH_RE.sub("", text)
    return _TRAILING_BOX_DRAWING_RE.sub("", text)
