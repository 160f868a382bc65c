"""
Registry of attributes whose whole value is an expression.

Attribute names are normalised the way the directive compiler does it:
`data-ng-if`, `x-ng:if` and `ng_if` all name the `ng-if` directive.
"""

from __future__ import annotations

import re
from typing import FrozenSet, Iterable, List

from .config.model import Settings

DEFAULT_EXPRESSION_ATTRIBUTES: FrozenSet[str] = frozenset({
    # structure
    "ng-if", "ng-show", "ng-hide", "ng-repeat", "ng-switch", "ng-init",
    "ng-controller", "ng-options",
    # binding
    "ng-bind", "ng-model", "ng-class", "ng-class-even", "ng-class-odd",
    "ng-style", "ng-value",
    # state
    "ng-disabled", "ng-checked", "ng-selected", "ng-readonly", "ng-required",
    "ng-open",
    # events
    "ng-click", "ng-dblclick", "ng-change", "ng-submit",
    "ng-focus", "ng-blur",
    "ng-keydown", "ng-keyup", "ng-keypress",
    "ng-mousedown", "ng-mouseup", "ng-mouseenter", "ng-mouseleave",
    "ng-mousemove", "ng-mouseover",
    "ng-copy", "ng-cut", "ng-paste",
})

_PREFIX = re.compile(r"^(?:data|x)[:\-_]")
_SEPARATORS = re.compile(r"[:_]")


def normalize_attribute_name(name: str) -> str:
    n = _PREFIX.sub("", name.strip().lower())
    return _SEPARATORS.sub("-", n)


class ExpressionAttributeRegistry:
    """
    Set of normalised expression attribute names.
    """

    def __init__(self, extra: Iterable[str] = ()):
        self._names: FrozenSet[str] = DEFAULT_EXPRESSION_ATTRIBUTES | frozenset(
            normalize_attribute_name(n) for n in extra if n and n.strip()
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> ExpressionAttributeRegistry:
        return cls(settings.expression_attributes)

    def is_expression_attribute(self, name: str) -> bool:
        return normalize_attribute_name(name) in self._names

    def names(self) -> List[str]:
        return sorted(self._names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_expression_attribute(name)


__all__ = [
    "DEFAULT_EXPRESSION_ATTRIBUTES",
    "normalize_attribute_name",
    "ExpressionAttributeRegistry",
]
