from .citations import convert_citations_to_markdown_links, normalize_citation_patterns
from .emphasis import is_multi_word, remove_parentheses_around_italics
from .entities import buffer_incomplete_entities, decode_minimal_entities, split_incomplete_entity
from .line_breaks import apply_hard_line_breaks, apply_hard_line_breaks_to_string
from .models import LineBreak, Segment, TextSegment
from .normalize import normalize_escaped_markdown, normalize_latex_delimiters, strip_trailing_streaming_artifacts
from .pipeline import MarkdownStream, prepare_markdown, render_segments

__all__ = [
    "MarkdownStream",
    "prepare_markdown",
    "render_segments",
    "buffer_incomplete_entities",
    "split_incomplete_entity",
    "decode_minimal_entities",
    "normalize_latex_delimiters",
    "normalize_escaped_markdown",
    "strip_trailing_streaming_artifacts",
    "convert_citations_to_markdown_links",
    "normalize_citation_patterns",
    "remove_parentheses_around_italics",
    "is_multi_word",
    "apply_hard_line_breaks_to_string",
    "apply_hard_line_breaks",
    "TextSegment",
    "LineBreak",
    "Segment",
]
