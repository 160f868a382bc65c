from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .attributes import ExpressionAttributeRegistry
from .braces import delimiters
from .errors import XInjectUserError
from .injection import ExpressionInjector
from .jsonic import dumps as jdumps
from .manifest import ManifestResolver
from .project import Project
from .report_schema import InjectionEntry, ManifestReport, ScanReport
from .types import DelimiterPair
from .version import tool_version


def _setup_logging() -> None:
    level = logging.DEBUG if os.environ.get("XINJECT_DEBUG") else logging.WARNING
    log = logging.getLogger("xinject")
    log.setLevel(level)
    if not log.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        log.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="xinject",
        description="Embedded expression injection for markup documents",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_root(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--root",
            type=Path,
            default=None,
            help="project root (default: current directory)",
        )

    sp_scan = sub.add_parser("scan", help="JSON list of embedded expressions of a markup file")
    sp_scan.add_argument("file", type=Path, help="markup document")
    sp_scan.add_argument("--start", help="opening delimiter (default: from settings, '{{')")
    sp_scan.add_argument("--end", help="closing delimiter (default: from settings, '}}')")
    sp_scan.add_argument(
        "--force",
        action="store_true",
        help="inject even when the project does not use the framework",
    )
    add_root(sp_scan)

    sp_manifest = sub.add_parser("manifest", help="pubspec.yaml and package roots of a file (JSON)")
    sp_manifest.add_argument("file", type=Path, help="file inside the project")
    add_root(sp_manifest)

    sp_list = sub.add_parser("list", help="lists of entities (JSON)")
    sp_list.add_argument("what", choices=["attributes"], help="what to list")
    add_root(sp_list)

    return p


def _project(ns: argparse.Namespace, *, force: bool = False) -> Project:
    root = ns.root or Path.cwd()
    if not root.is_dir():
        raise XInjectUserError(f"Project root not found: {root}")
    project = Project.load(root)
    if force:
        project = Project(project.root, dataclasses.replace(project.settings, enabled="true"))
    return project


def _read_document(path: Path) -> str:
    if not path.is_file():
        raise XInjectUserError(f"File not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise XInjectUserError(f"Failed to read {path}: {e}") from e


def _pair(ns: argparse.Namespace, project: Project) -> DelimiterPair:
    base = delimiters(project.settings)
    return DelimiterPair(
        start=base.start if ns.start is None else ns.start,
        end=base.end if ns.end is None else ns.end,
    )


def run_scan(ns: argparse.Namespace) -> ScanReport:
    project = _project(ns, force=bool(ns.force))
    text = _read_document(ns.file)
    injector = ExpressionInjector(project, pair=_pair(ns, project))
    entries = []
    for inj in injector.injections(text, ns.file.name):
        absolute = inj.absolute
        entries.append(InjectionEntry(
            kind=inj.host.kind,
            attribute=inj.host.attribute,
            start=absolute.start,
            end=absolute.end,
            text=inj.text,
        ))
    return ScanReport(file=str(ns.file), language=str(injector.language), injections=entries)


def run_manifest(ns: argparse.Namespace) -> ManifestReport:
    project = _project(ns)
    resolver = ManifestResolver(project)
    result = resolver.manifest_and_package_roots(ns.file)
    name: Optional[str] = None
    if result.manifest is not None:
        name = resolver.manifest_name(result.manifest)
    return ManifestReport(
        manifest=None if result.manifest is None else str(result.manifest),
        name=name,
        package_roots=[str(p) for p in result.package_roots],
    )


def main(argv: list[str] | None = None) -> int:
    _setup_logging()
    ns = _build_parser().parse_args(argv)

    try:
        if ns.cmd == "scan":
            sys.stdout.write(jdumps(run_scan(ns).model_dump(mode="json")))
            return 0

        if ns.cmd == "manifest":
            sys.stdout.write(jdumps(run_manifest(ns).model_dump(mode="json")))
            return 0

        if ns.cmd == "list":
            project = _project(ns)
            data: Dict[str, Any]
            if ns.what == "attributes":
                data = {"attributes": ExpressionAttributeRegistry.from_settings(project.settings).names()}
            else:
                raise ValueError(f"Unknown list target: {ns.what}")
            sys.stdout.write(jdumps(data))
            return 0

    except XInjectUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
