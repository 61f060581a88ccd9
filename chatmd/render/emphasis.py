from __future__ import annotations

import re

_PAREN_STAR_ITALIC_RE = re.compile(r"\(\s*\*(.*?)\*\s*\)", re.DOTALL)
_PAREN_UNDERSCORE_ITALIC_RE = re.compile(r"\(\s*_(.*?)_\s*\)", re.DOTALL)


def is_multi_word(text: str) -> bool:
    return len(text.split()) > 1


def remove_parentheses_around_italics(text: str) -> str:
    """
    "(*multi word*)" -> "*multi word*". A single italic word keeps its
    parentheses since it usually is a real aside, e.g. "(*sic*)".
    """
    if not text:
        return text

    def _unwrap(marker: str):
        def _repl(m: re.Match) -> str:
            inner = m.group(1)
            if is_multi_word(inner):
                return f"{marker}{inner}{marker}"
            return m.group(0)

        return _repl

    text = _PAREN_STAR_ITALIC_RE.sub(_unwrap("*"), text)
    return _PAREN_UNDERSCORE_ITALIC_RE.sub(_unwrap("_"), text)
