"""Inventory of declared interfaces, type aliases, enums and functions."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from .exports import ExportEngine, LexicalExportEngine
from .models import ExportedSymbol, ModuleGraph

_FUNCTION_KEYWORDS = {"const", "function"}


def domain_of(symbol: ExportedSymbol) -> str:
    """Return the domain directory of the declaring module.

    Modules nested two or more directories deep (``types/business/order.ts``)
    belong to their second directory; shallower modules fall back to their
    top-level directory, or ``root`` at the source root.
    """
    directories = symbol.module.split("/")[:-1]
    if len(directories) >= 2:
        return directories[1]
    return directories[0] if directories else "root"


@dataclass
class TypeAnalysis:
    """Declared symbols bucketed by declaration keyword."""

    interfaces: List[ExportedSymbol] = field(default_factory=list)
    type_aliases: List[ExportedSymbol] = field(default_factory=list)
    enums: List[ExportedSymbol] = field(default_factory=list)
    functions: List[ExportedSymbol] = field(default_factory=list)

    @staticmethod
    def by_domain(symbols: Sequence[ExportedSymbol]) -> List[Tuple[str, List[ExportedSymbol]]]:
        grouped: Dict[str, List[ExportedSymbol]] = defaultdict(list)
        for symbol in symbols:
            grouped[domain_of(symbol)].append(symbol)
        return sorted(grouped.items())


def analyze_types(graph: ModuleGraph, engine: ExportEngine | None = None) -> TypeAnalysis:
    """Collect every declaration of the graph into a ``TypeAnalysis``."""
    engine = engine or LexicalExportEngine()
    analysis = TypeAnalysis()
    for module in graph:
        for symbol in engine.extract(module.text, module.path).symbols:
            if symbol.declaration == "interface":
                analysis.interfaces.append(symbol)
            elif symbol.declaration == "type":
                analysis.type_aliases.append(symbol)
            elif symbol.declaration == "enum":
                analysis.enums.append(symbol)
            elif symbol.declaration in _FUNCTION_KEYWORDS:
                analysis.functions.append(symbol)
    return analysis
