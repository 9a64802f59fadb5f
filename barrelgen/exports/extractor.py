"""Lexical extraction of export declarations and re-export directives."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..models import SELECTIVE, TYPE, VALUE, WILDCARD, ExportedSymbol, ModuleExports, ReExportDirective

_IDENTIFIER = r"[A-Za-z_$][\w$]*"

_DECLARATION_PATTERN = re.compile(
    r"\bexport\s+(?:declare\s+)?(?:async\s+)?(?:abstract\s+)?"
    r"(interface|type|(?:const\s+)?enum|const|let|var|function|class)\s+"
    rf"({_IDENTIFIER})"
)
_WILDCARD_PATTERN = re.compile(r"\bexport\s+\*\s+from\s+['\"]([^'\"]+)['\"]")
_EXPORT_LIST_PATTERN = re.compile(
    r"\bexport\s+(type\s+)?\{\s*([^}]*)\}(?:\s*from\s+['\"]([^'\"]+)['\"])?"
)
_REEXPORT_TARGET_PATTERN = re.compile(
    r"\bexport\s+(?:\*|(?:type\s+)?\{[^}]*\})\s*from\s+['\"]([^'\"]+)['\"]"
)
_ALIAS_SPLIT = re.compile(r"\s+as\s+")
_COMMENT_PATTERN = re.compile(r"//[^\n]*|/\*.*?\*/", re.DOTALL)


@dataclass(frozen=True)
class ExportListEntry:
    """One name inside an ``export { ... }`` block, with or without ``from``."""

    name: str
    source_name: str
    type_only: bool
    target: Optional[str] = None


def find_all(pattern: re.Pattern[str], text: str) -> List[Tuple[str, ...]]:
    """Return the group tuples of every match of ``pattern`` in ``text``."""
    return [match.groups() for match in pattern.finditer(text)]


def find_declarations(text: str) -> List[Tuple[str, str]]:
    """Return ``(keyword, name)`` pairs of ``export <keyword> <name>`` declarations."""
    declarations: List[Tuple[str, str]] = []
    for keyword, name in find_all(_DECLARATION_PATTERN, text):
        declarations.append((keyword.split()[-1], name))
    return declarations


def _declares_type(text: str, name: str) -> bool:
    escaped = re.escape(name)
    if re.search(rf"\binterface\s+{escaped}(?![\w$])", text):
        return True
    return re.search(rf"\btype\s+{escaped}\s*[=<]", text) is not None


def _declares_value(text: str, name: str) -> bool:
    escaped = re.escape(name)
    pattern = rf"\b(?:enum|const|let|var|function|class)\s+{escaped}(?![\w$])"
    return re.search(pattern, text) is not None


def classify_declared(text: str, name: str) -> str:
    """Classify ``name`` from its declaration alone, defaulting to a value."""
    # A value declaration also carries any merged type meaning, so it wins.
    if _declares_value(text, name):
        return VALUE
    if _declares_type(text, name):
        return TYPE
    return VALUE


def find_export_lists(text: str) -> List[ExportListEntry]:
    """Return every entry of every ``export { ... }`` block in source order."""
    entries: List[ExportListEntry] = []
    for list_type, body, target in find_all(_EXPORT_LIST_PATTERN, text):
        block_type_only = bool(list_type)
        body = _COMMENT_PATTERN.sub(" ", body)
        for raw in body.split(","):
            item = raw.strip()
            if not item:
                continue
            type_only = block_type_only
            if item.startswith("type "):
                type_only = True
                item = item[len("type "):].strip()
            parts = _ALIAS_SPLIT.split(item)
            source_name = parts[0].strip()
            name = parts[-1].strip()
            if not name:
                continue
            entries.append(
                ExportListEntry(
                    name=name,
                    source_name=source_name,
                    type_only=type_only,
                    target=target or None,
                )
            )
    return entries


def extract(text: str, path: str) -> ModuleExports:
    """Extract declared symbols and re-export directives from one module."""
    exports = ModuleExports(module=path)

    seen: set[str] = set()
    for keyword, name in find_declarations(text):
        if name in seen:
            continue
        seen.add(name)
        exports.symbols.append(
            ExportedSymbol(
                name=name, module=path, kind=classify_declared(text, name), declaration=keyword
            )
        )

    for (target,) in find_all(_WILDCARD_PATTERN, text):
        exports.directives.append(ReExportDirective(kind=WILDCARD, target=target, module=path))

    for entry in find_export_lists(text):
        if entry.target is None:
            continue
        exports.directives.append(
            ReExportDirective(
                kind=SELECTIVE,
                target=entry.target,
                module=path,
                name=entry.name,
                source_name=entry.source_name,
                type_only=entry.type_only,
            )
        )

    return exports


def find_reexport_targets(text: str) -> List[str]:
    """Return distinct wildcard or selective re-export targets in source order."""
    targets: List[str] = []
    for (target,) in find_all(_REEXPORT_TARGET_PATTERN, text):
        if target not in targets:
            targets.append(target)
    return targets
