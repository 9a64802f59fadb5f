"""Type-versus-value classification of exported symbols."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from ..models import TYPE
from .extractor import classify_declared, find_declarations, find_export_lists


@dataclass
class ModuleClassification:
    """Sorted type and value names exported by one module."""

    types: List[str] = field(default_factory=list)
    values: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.types and not self.values


def classify(text: str, name: str) -> str:
    """Return ``TYPE`` or ``VALUE`` for an exported ``name`` of a module."""
    entries = [entry for entry in find_export_lists(text) if entry.name == name]
    if any(entry.type_only for entry in entries):
        return TYPE
    for entry in entries:
        if entry.source_name != entry.name:
            return classify_declared(text, entry.source_name)
    return classify_declared(text, name)


def classify_module(text: str) -> ModuleClassification:
    """Classify every name a module exports, directly or through export lists."""
    kinds: Dict[str, str] = {}
    for _, name in find_declarations(text):
        kinds.setdefault(name, classify(text, name))
    for entry in find_export_lists(text):
        kinds.setdefault(entry.name, classify(text, entry.name))

    result = ModuleClassification()
    for name in sorted(kinds):
        if kinds[name] == TYPE:
            result.types.append(name)
        else:
            result.values.append(name)
    return result
