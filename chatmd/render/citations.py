from __future__ import annotations

import re

# A maximal run of adjacent [n] markers. Runs already followed by "(" are
# links, e.g. "[1](#cite-1)", so the rewrite is idempotent.
_CITATION_RUN_RE = re.compile(r"((?:\[[0-9]+\])+)(?!\()")
_CITATION_NUM_RE = re.compile(r"\[([0-9]+)\]")

# Fenced blocks (possibly still open while streaming) and inline code spans.
_CODE_RE = re.compile(r"```.*?(?:```|\Z)|`[^`\n]*`", re.DOTALL)

_ESCAPED_BRACKET_RE = re.compile(r"\\([\[\]])")
_DOUBLE_BRACKET_RE = re.compile(r"\[\[([0-9]+)\]\]")
_LIST_CITATION_RE = re.compile(r"\[\s*([0-9]+(?:\s*,\s*[0-9]+)+)\s*\]")
_PADDED_CITATION_RE = re.compile(r"\[\s*([0-9]+)\s*\]")


def _link_citation_run(m: re.Match) -> str:
    nums = _CITATION_NUM_RE.findall(m.group(1))
    if len(nums) == 1:
        return f"[{nums[0]}](#cite-{nums[0]})"
    return "[" + ",".join(nums) + "](#cite-group-" + "-".join(nums) + ")"


def convert_citations_to_markdown_links(text: str) -> str:
    """
    Turn citation markers into anchor links.

        [1]        -> [1](#cite-1)
        [1][2][3]  -> [1,2,3](#cite-group-1-2-3)

    Only brackets with zero characters between them form a group. Code spans
    and fenced blocks are never touched.
    """
    if not text or "[" not in text:
        return text
    out: list[str] = []
    pos = 0
    for m in _CODE_RE.finditer(text):
        out.append(_CITATION_RUN_RE.sub(_link_citation_run, text[pos : m.start()]))
        out.append(m.group(0))
        pos = m.end()
    out.append(_CITATION_RUN_RE.sub(_link_citation_run, text[pos:]))
    return "".join(out)


def normalize_citation_patterns(text: str) -> str:
    """
    Canonicalize loose citation spellings to plain [n] markers:
    \\[1] -> [1], [[1]] -> [1], [1, 2,3] -> [1][2][3], [ 1 ] -> [1].
    """
    if not text:
        return text
    text = _ESCAPED_BRACKET_RE.sub(r"\1", text)
    text = _DOUBLE_BRACKET_RE.sub(r"[\1]", text)
    text = _LIST_CITATION_RE.sub(
        lambda m: "".join(f"[{n.strip()}]" for n in m.group(1).split(",")),
        text,
    )
    return _PADDED_CITATION_RE.sub(r"[\1]", text)
