from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Literal, Optional

from ..errors import ConfigError

EnabledMode = Literal["auto", "true", "false"]

DEFAULT_LANGUAGE = "AngularJS"


# --- helpers ---------------------------------------------------------------
def _assert_only_keys(d: Dict[str, Any] | None, allowed: Iterable[str], *, ctx: str) -> None:
    if d is None:
        return
    allowed_set = set(allowed)
    extra = set(d.keys()) - allowed_set
    if extra:
        raise ConfigError(f"{ctx}: unknown key(s): {', '.join(sorted(extra))}")


def _as_str_list(v: Any, *, ctx: str) -> List[str]:
    if v is None:
        return []
    if isinstance(v, str):
        return [v]
    if isinstance(v, list):
        return [str(x) for x in v]
    raise ConfigError(f"{ctx}: expected a string or a list of strings")


def _parse_enabled(v: Any) -> EnabledMode:
    # YAML `true`/`false` arrive as bools, `auto` as a string
    if v is None:
        return "auto"
    if isinstance(v, bool):
        return "true" if v else "false"
    s = str(v).strip().lower()
    if s not in ("auto", "true", "false"):
        raise ConfigError(f"enabled: expected true, false or auto, got {v!r}")
    return s  # type: ignore[return-value]


@dataclass
class DelimiterCfg:
    """
    Project-level injection delimiters. None means "use the default".
    An explicit empty string disables injection.
    """
    start: Optional[str] = None
    end: Optional[str] = None

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> DelimiterCfg:
        if not d:
            return DelimiterCfg()
        if not isinstance(d, dict):
            raise ConfigError("delimiters: expected a mapping with 'start' and 'end'")
        _assert_only_keys(d, ["start", "end"], ctx="delimiters")
        start = d.get("start")
        end = d.get("end")
        return DelimiterCfg(
            start=None if start is None else str(start),
            end=None if end is None else str(end),
        )


@dataclass
class ModuleCfg:
    """A module of the project: a named subdirectory with its own options."""
    name: str
    root: str
    options: Dict[str, str] = field(default_factory=dict)

    @staticmethod
    def from_dict(name: str, d: Optional[Dict[str, Any]]) -> ModuleCfg:
        d = d or {}
        if not isinstance(d, dict):
            raise ConfigError(f"modules.{name}: expected a mapping")
        _assert_only_keys(d, ["root", "options"], ctx=f"modules.{name}")
        options = d.get("options") or {}
        if not isinstance(options, dict):
            raise ConfigError(f"modules.{name}.options: expected a mapping")
        return ModuleCfg(
            name=name,
            root=str(d.get("root", name)),
            options={str(k): str(v) for k, v in options.items() if v is not None},
        )


@dataclass
class Settings:
    """
    Contents of xinject-cfg/settings.yaml.
    """
    enabled: EnabledMode = "auto"
    language: str = DEFAULT_LANGUAGE
    delimiters: DelimiterCfg = field(default_factory=DelimiterCfg)
    # extends the built-in expression attribute set
    expression_attributes: List[str] = field(default_factory=list)
    # git-wildmatch patterns excluded from project content
    exclude: List[str] = field(default_factory=list)
    modules: Dict[str, ModuleCfg] = field(default_factory=dict)

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> Settings:
        if not d:
            return Settings()
        _assert_only_keys(
            d,
            ["enabled", "language", "delimiters", "expression_attributes", "exclude", "modules"],
            ctx="settings",
        )
        modules_raw = d.get("modules") or {}
        if not isinstance(modules_raw, dict):
            raise ConfigError("modules: expected a mapping of module name -> module settings")

        return Settings(
            enabled=_parse_enabled(d.get("enabled")),
            language=str(d.get("language") or DEFAULT_LANGUAGE),
            delimiters=DelimiterCfg.from_dict(d.get("delimiters")),
            expression_attributes=_as_str_list(d.get("expression_attributes"), ctx="expression_attributes"),
            exclude=_as_str_list(d.get("exclude"), ctx="exclude"),
            modules={str(name): ModuleCfg.from_dict(str(name), m) for name, m in modules_raw.items()},
        )


__all__ = ["EnabledMode", "DEFAULT_LANGUAGE", "DelimiterCfg", "ModuleCfg", "Settings"]
