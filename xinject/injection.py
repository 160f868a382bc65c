"""
Expression injector for markup documents.

For every host of a document (character data runs and attribute values)
decides which ranges are embedded expressions:

- values of expression attributes (`ng-if="..."`) are injected whole;
- everything else is scanned for delimited expressions, skipping
  delimiters that start inside comments.

Nothing is injected when the project does not use the framework or when
the delimiters conflict with the document's own syntax.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .attributes import ExpressionAttributeRegistry
from .braces import delimiters, has_conflicts_for
from .markup.lexer import Host, MarkupLexer
from .project import Project
from .scanner import scan, scan_attribute_value
from .types import DelimiterPair, LanguageId, Region

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Injection:
    """
    An embedded expression: region is relative to the host text.
    """
    host: Host
    region: Region
    language: LanguageId

    @property
    def absolute(self) -> Region:
        return self.region.shift(self.host.start)

    @property
    def text(self) -> str:
        return self.region.substring(self.host.text)


class ExpressionInjector:
    """
    Computes injections for documents of one project.
    """

    def __init__(
        self,
        project: Project,
        *,
        registry: Optional[ExpressionAttributeRegistry] = None,
        pair: Optional[DelimiterPair] = None,
    ):
        self.project = project
        self.registry = registry or ExpressionAttributeRegistry.from_settings(project.settings)
        self.pair = pair or delimiters(project.settings)
        self.language = LanguageId(project.settings.language)

    def injections(self, text: str, file_name: Optional[str] = None) -> List[Injection]:
        """
        All injections of a document, in document order.

        Args:
            text: Full document text
            file_name: Used to pick the document's comment syntax

        Returns:
            Injections with non-empty regions
        """
        if not self.project.has_framework:
            return []

        lexer = MarkupLexer(text)
        scan_enabled = not has_conflicts_for(self.pair.start, self.pair.end, file_name)
        if not scan_enabled:
            logger.debug("delimiters %r/%r conflict with %s; scanning disabled",
                         self.pair.start, self.pair.end, file_name)

        out: List[Injection] = []
        for host in lexer.hosts():
            if host.kind == "attribute" and self._is_expression_host(host):
                out.extend(self._inject(host, self._whole_value(host)))
                continue
            if scan_enabled:
                out.extend(self._inject(host, self._scan_host(host, lexer)))
        return out

    def _is_expression_host(self, host: Host) -> bool:
        return (
            host.attribute is not None
            and self.registry.is_expression_attribute(host.attribute)
            and (not host.quoted or len(host.text) > 1)
        )

    @staticmethod
    def _whole_value(host: Host) -> List[Region]:
        text = host.text
        if not host.quoted:
            return [Region(0, len(text))]
        if not text.endswith(text[0]):
            # unterminated quote, e.g. mid-edit at the end of the buffer
            return [Region(1, len(text))]
        return scan_attribute_value(text)

    def _scan_host(self, host: Host, lexer: MarkupLexer) -> List[Region]:
        def is_inert(offset: int) -> bool:
            return lexer.is_comment(host.start + offset)

        return scan(host.text, self.pair.start, self.pair.end, is_inert)

    def _inject(self, host: Host, regions: List[Region]) -> List[Injection]:
        return [
            Injection(host=host, region=r, language=self.language)
            for r in regions
            if not r.is_empty
        ]


__all__ = ["Injection", "ExpressionInjector"]
