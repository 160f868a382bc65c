"""
Tolerant lexer for HTML-like markup.

Splits a document into comments, tags (with attribute names and values)
and character data. Unterminated constructs run to the end of the buffer,
so a document in the middle of an edit still tokenizes.

The lexer also answers the two questions the injector asks about a
document: which token sits at a given offset, and which spans can host
embedded expressions.
"""

from __future__ import annotations

import bisect
import enum
import re
from dataclasses import dataclass
from typing import List, Optional

from ..types import HostKind, Region


class MarkupTokenType(enum.Enum):
    """Token kinds of a markup document."""

    TEXT = "TEXT"
    RAW_TEXT = "RAW_TEXT"        # <script>/<style> contents
    COMMENT = "COMMENT"          # <!-- ... -->
    CDATA = "CDATA"              # <![CDATA[ ... ]]>
    DOCTYPE = "DOCTYPE"          # <!DOCTYPE ...>
    PI = "PI"                    # <? ... ?>
    TAG_START = "TAG_START"      # <name or </name
    TAG_END = "TAG_END"          # > or />
    ATTR_NAME = "ATTR_NAME"
    ATTR_VALUE = "ATTR_VALUE"    # quotes included


@dataclass(frozen=True)
class MarkupToken:
    """
    A lexical element with its absolute position in the document.
    """
    type: MarkupTokenType
    start: int
    end: int
    value: str
    # tag name for TAG_START, attribute name for ATTR_NAME/ATTR_VALUE
    name: Optional[str] = None

    def __repr__(self) -> str:
        return f"MarkupToken({self.type.name}, {self.value!r}, {self.start}:{self.end})"


@dataclass(frozen=True)
class Host:
    """
    A span of the document that may contain embedded expressions:
    a run of character data (comments included) or an attribute value.
    """
    kind: HostKind
    start: int
    end: int
    text: str
    attribute: Optional[str] = None
    quoted: bool = False

    @property
    def range(self) -> Region:
        return Region(self.start, self.end)


_RAW_TEXT_TAGS = frozenset({"script", "style"})


class MarkupLexer:
    """
    Lexer over one markup document.

    Tokens are leaves that never overlap; the whitespace between attributes
    inside a tag belongs to no token.
    """

    _TAG_START = re.compile(r"<(/?)([A-Za-z][\w:.\-]*)")
    _ATTR_NAME = re.compile(r"[^\s/>=\"'<]+")
    _UNQUOTED_VALUE = re.compile(r"[^\s>]+")
    _WS = re.compile(r"\s*")

    def __init__(self, text: str):
        self.text = text
        self.length = len(text)
        self._tokens: Optional[List[MarkupToken]] = None
        self._starts: List[int] = []

    # --------------------------- tokens --------------------------- #

    @property
    def tokens(self) -> List[MarkupToken]:
        if self._tokens is None:
            self._tokens = self.tokenize()
            self._starts = [t.start for t in self._tokens]
        return self._tokens

    def tokenize(self) -> List[MarkupToken]:
        """
        All tokens of the document in positional order.
        """
        tokens: List[MarkupToken] = []
        text = self.text
        pos = 0
        text_start: Optional[int] = None

        while pos < self.length:
            if text[pos] != "<" or not self._starts_markup(pos):
                if text_start is None:
                    text_start = pos
                nxt = text.find("<", pos + 1)
                pos = self.length if nxt < 0 else nxt
                continue
            if text_start is not None:
                tokens.append(self._token(MarkupTokenType.TEXT, text_start, pos))
                text_start = None
            pos = self._lex_markup(pos, tokens)

        if text_start is not None:
            tokens.append(self._token(MarkupTokenType.TEXT, text_start, self.length))
        return tokens

    def _token(self, type_: MarkupTokenType, start: int, end: int, name: Optional[str] = None) -> MarkupToken:
        return MarkupToken(type=type_, start=start, end=end, value=self.text[start:end], name=name)

    def _starts_markup(self, pos: int) -> bool:
        text = self.text
        return (
            text.startswith("<!", pos)
            or text.startswith("<?", pos)
            or self._TAG_START.match(text, pos) is not None
        )

    def _until(self, marker: str, pos: int) -> int:
        """End offset just past marker, or the end of the buffer."""
        idx = self.text.find(marker, pos)
        return self.length if idx < 0 else idx + len(marker)

    def _lex_markup(self, pos: int, tokens: List[MarkupToken]) -> int:
        text = self.text
        if text.startswith("<!--", pos):
            end = self._until("-->", pos + 4)
            tokens.append(self._token(MarkupTokenType.COMMENT, pos, end))
            return end
        if text.startswith("<![CDATA[", pos):
            end = self._until("]]>", pos + 9)
            tokens.append(self._token(MarkupTokenType.CDATA, pos, end))
            return end
        if text.startswith("<!", pos):
            end = self._until(">", pos + 2)
            tokens.append(self._token(MarkupTokenType.DOCTYPE, pos, end))
            return end
        if text.startswith("<?", pos):
            end = self._until("?>", pos + 2)
            tokens.append(self._token(MarkupTokenType.PI, pos, end))
            return end
        return self._lex_tag(pos, tokens)

    def _lex_tag(self, pos: int, tokens: List[MarkupToken]) -> int:
        text = self.text
        m = self._TAG_START.match(text, pos)
        assert m is not None
        closing = bool(m.group(1))
        tag_name = m.group(2).lower()
        tokens.append(self._token(MarkupTokenType.TAG_START, pos, m.end(), name=tag_name))
        pos = m.end()

        self_closing = False
        while pos < self.length:
            pos = self._WS.match(text, pos).end()
            if pos >= self.length:
                break
            if text.startswith("/>", pos):
                tokens.append(self._token(MarkupTokenType.TAG_END, pos, pos + 2))
                self_closing = True
                pos += 2
                break
            if text[pos] == ">":
                tokens.append(self._token(MarkupTokenType.TAG_END, pos, pos + 1))
                pos += 1
                break
            if text[pos] == "<":
                # unterminated tag; the next construct starts here
                return pos
            name_m = self._ATTR_NAME.match(text, pos)
            if name_m is None:
                # stray quote, "=" or "/"
                pos += 1
                continue
            attr_name = name_m.group(0)
            tokens.append(self._token(MarkupTokenType.ATTR_NAME, pos, name_m.end(), name=attr_name))
            pos = name_m.end()

            after_ws = self._WS.match(text, pos).end()
            if after_ws < self.length and text[after_ws] == "=":
                pos = self._WS.match(text, after_ws + 1).end()
                pos = self._lex_attr_value(pos, attr_name, tokens)

        if not closing and not self_closing and tag_name in _RAW_TEXT_TAGS:
            pos = self._lex_raw_text(pos, tag_name, tokens)
        return pos

    def _lex_attr_value(self, pos: int, attr_name: str, tokens: List[MarkupToken]) -> int:
        text = self.text
        if pos >= self.length:
            return pos
        quote = text[pos]
        if quote in ("'", '"'):
            end = self._until(quote, pos + 1)
        else:
            m = self._UNQUOTED_VALUE.match(text, pos)
            if m is None:
                return pos
            end = m.end()
        tokens.append(self._token(MarkupTokenType.ATTR_VALUE, pos, end, name=attr_name))
        return end

    def _lex_raw_text(self, pos: int, tag_name: str, tokens: List[MarkupToken]) -> int:
        close = re.compile(rf"</{tag_name}\b", re.IGNORECASE)
        m = close.search(self.text, pos)
        end = self.length if m is None else m.start()
        if end > pos:
            tokens.append(self._token(MarkupTokenType.RAW_TEXT, pos, end))
        return end

    # --------------------------- lookups --------------------------- #

    def element_at(self, offset: int) -> Optional[MarkupToken]:
        """
        Token covering offset, or None for whitespace inside a tag and
        offsets outside the document.
        """
        tokens = self.tokens
        idx = bisect.bisect_right(self._starts, offset) - 1
        if idx < 0:
            return None
        token = tokens[idx]
        return token if token.start <= offset < token.end else None

    def is_comment(self, offset: int) -> bool:
        token = self.element_at(offset)
        return token is not None and token.type is MarkupTokenType.COMMENT

    def hosts(self) -> List[Host]:
        """
        Injection hosts in document order: maximal runs of character data
        and comments, and attribute values.
        """
        hosts: List[Host] = []
        run_start: Optional[int] = None
        run_end = 0

        def flush() -> None:
            nonlocal run_start
            if run_start is not None:
                hosts.append(Host(kind="text", start=run_start, end=run_end,
                                  text=self.text[run_start:run_end]))
                run_start = None

        for token in self.tokens:
            if token.type in (MarkupTokenType.TEXT, MarkupTokenType.COMMENT):
                if run_start is None:
                    run_start = token.start
                run_end = token.end
                continue
            flush()
            if token.type is MarkupTokenType.ATTR_VALUE:
                hosts.append(Host(
                    kind="attribute",
                    start=token.start,
                    end=token.end,
                    text=token.value,
                    attribute=token.name,
                    quoted=token.value[:1] in ("'", '"'),
                ))
        flush()
        return hosts


def tokenize_markup(text: str) -> List[MarkupToken]:
    """Convenience wrapper: all tokens of a markup document."""
    return MarkupLexer(text).tokenize()


__all__ = [
    "MarkupTokenType",
    "MarkupToken",
    "Host",
    "MarkupLexer",
    "tokenize_markup",
]
