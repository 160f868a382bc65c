"""
Injection delimiters: project configuration and conflict detection.

A delimiter pair conflicts with a document when matching it would be
ambiguous: symmetric or prefix-related markers, markers overlapping the
document's own comment syntax, or markers the document's template
language already claims for itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import Dict, Iterable, Optional, Tuple

from .config.model import Settings
from .types import DelimiterPair

DEFAULT_START = "{{"
DEFAULT_END = "}}"

CommentDelimiters = Tuple[str, str]

XML_COMMENT: CommentDelimiters = ("<!--", "-->")


@dataclass(frozen=True)
class DocumentSyntax:
    """Comment markers and self-claimed delimiter pairs of a document kind."""
    comments: Tuple[CommentDelimiters, ...]
    reserved: Tuple[DelimiterPair, ...] = ()


_MARKUP = DocumentSyntax(comments=(XML_COMMENT,))

_SYNTAX_BY_EXT: Dict[str, DocumentSyntax] = {
    "html": _MARKUP,
    "htm": _MARKUP,
    "xhtml": _MARKUP,
    "xml": _MARKUP,
    "jinja": DocumentSyntax(
        comments=(XML_COMMENT, ("{#", "#}")),
        reserved=(DelimiterPair("{{", "}}"), DelimiterPair("{%", "%}")),
    ),
    "twig": DocumentSyntax(
        comments=(XML_COMMENT, ("{#", "#}")),
        reserved=(DelimiterPair("{{", "}}"), DelimiterPair("{%", "%}")),
    ),
    "njk": DocumentSyntax(
        comments=(XML_COMMENT, ("{#", "#}")),
        reserved=(DelimiterPair("{{", "}}"), DelimiterPair("{%", "%}")),
    ),
    "hbs": DocumentSyntax(
        comments=(XML_COMMENT, ("{{!--", "--}}")),
        reserved=(DelimiterPair("{{", "}}"),),
    ),
    "mustache": DocumentSyntax(
        comments=(XML_COMMENT, ("{{!", "}}")),
        reserved=(DelimiterPair("{{", "}}"),),
    ),
}
_SYNTAX_BY_EXT["j2"] = _SYNTAX_BY_EXT["jinja"]
_SYNTAX_BY_EXT["handlebars"] = _SYNTAX_BY_EXT["hbs"]


def syntax_for(file_name: Optional[str]) -> DocumentSyntax:
    """Document syntax by file extension; plain markup when unknown."""
    if not file_name:
        return _MARKUP
    ext = PurePath(file_name).suffix.lower().lstrip(".")
    return _SYNTAX_BY_EXT.get(ext, _MARKUP)


def injection_start(settings: Settings) -> str:
    start = settings.delimiters.start
    return DEFAULT_START if start is None else start


def injection_end(settings: Settings) -> str:
    end = settings.delimiters.end
    return DEFAULT_END if end is None else end


def delimiters(settings: Settings) -> DelimiterPair:
    return DelimiterPair(injection_start(settings), injection_end(settings))


def _overlaps(a: str, b: str) -> bool:
    return a in b or b in a


def has_conflicts(
    start: str,
    end: str,
    comment_delimiters: Iterable[CommentDelimiters] = (XML_COMMENT,),
    reserved: Iterable[DelimiterPair] = (),
) -> bool:
    """
    True when scanning with (start, end) would be ambiguous for a document
    using the given comment markers and reserved pairs.

    An empty marker is reported as a conflict: there is nothing to scan for.
    """
    if not start or not end:
        return True
    if start.startswith(end) or end.startswith(start):
        return True
    for open_, close in comment_delimiters:
        if _overlaps(start, open_) or _overlaps(start, close):
            return True
        if _overlaps(end, open_) or _overlaps(end, close):
            return True
    pair = DelimiterPair(start, end)
    return any(pair == r for r in reserved)


def has_conflicts_for(start: str, end: str, file_name: Optional[str]) -> bool:
    syntax = syntax_for(file_name)
    return has_conflicts(start, end, syntax.comments, syntax.reserved)


__all__ = [
    "DEFAULT_START",
    "DEFAULT_END",
    "XML_COMMENT",
    "DocumentSyntax",
    "syntax_for",
    "injection_start",
    "injection_end",
    "delimiters",
    "has_conflicts",
    "has_conflicts_for",
]
