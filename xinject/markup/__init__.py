"""
Markup lexing: tokens, element lookup by offset, injection hosts.
"""

from .lexer import Host, MarkupLexer, MarkupToken, MarkupTokenType, tokenize_markup

__all__ = [
    "MarkupLexer",
    "MarkupToken",
    "MarkupTokenType",
    "Host",
    "tokenize_markup",
]
