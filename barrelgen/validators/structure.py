"""Validator that checks every declaring directory is covered by a barrel."""

from __future__ import annotations

import posixpath
from typing import Dict, List

from ..exports import ExportEngine, LexicalExportEngine
from ..logging import get_logger
from ..models import WILDCARD, ExportedSymbol, ModuleExports, ModuleGraph
from .base import (
    MISSING_INDEX_FILE,
    MISSING_MAIN_INDEX,
    MISSING_REEXPORT,
    Issue,
    ValidationResult,
    Validator,
)


class ExportStructureValidator(Validator):
    """Reports directories without barrels and a missing root barrel.

    By default only the existence of the owning barrel is checked. With
    ``check_completeness`` enabled, a symbol whose barrel exists but neither
    wildcard-re-exports its module nor names it is reported as well.
    """

    name = "export_structure"

    def __init__(
        self,
        *,
        engine: ExportEngine | None = None,
        module_suffix: str = ".ts",
        check_completeness: bool = False,
    ) -> None:
        self.engine = engine or LexicalExportEngine()
        self.module_suffix = module_suffix
        self.check_completeness = check_completeness
        self.logger = get_logger("validator")

    def validate(self, graph: ModuleGraph) -> ValidationResult:
        result = ValidationResult()
        barrels: Dict[str, ModuleExports] = {}
        named: List[ExportedSymbol] = []

        for module in graph:
            exports = self.engine.extract(module.text, module.path)
            result.stats.total_exports += len(exports.symbols) + len(exports.directives)
            result.stats.re_exports += len(exports.directives)
            if graph.is_barrel(module):
                barrels[module.path] = exports
            else:
                named.extend(exports.symbols)

        result.stats.named_exports = len(named)
        result.stats.index_files = len(barrels)

        for symbol in named:
            directory = posixpath.dirname(symbol.module) or "."
            expected = graph.barrel_path_for(directory)
            barrel = barrels.get(expected)
            if barrel is None:
                result.issues.append(
                    Issue(
                        kind=MISSING_INDEX_FILE,
                        message=f"No {graph.index_filename} file found for directory: {directory}",
                        file=symbol.module,
                        symbol=symbol.name,
                    )
                )
                continue
            if self.check_completeness and not self._is_reexported(symbol, barrel):
                result.issues.append(
                    Issue(
                        kind=MISSING_REEXPORT,
                        message=f"{symbol.name} is not re-exported by {expected}",
                        file=symbol.module,
                        symbol=symbol.name,
                    )
                )

        if graph.index_filename not in barrels:
            result.issues.append(
                Issue(kind=MISSING_MAIN_INDEX, message=f"No main {graph.index_filename} file found")
            )

        self.logger.debug(
            "Validated %d modules: %d issues, %d barrels",
            len(graph),
            len(result.issues),
            len(barrels),
        )
        return result

    def _is_reexported(self, symbol: ExportedSymbol, barrel: ModuleExports) -> bool:
        barrel_dir = posixpath.dirname(barrel.module)
        for directive in barrel.directives:
            resolved = posixpath.normpath(posixpath.join(barrel_dir, directive.target))
            if f"{resolved}{self.module_suffix}" != symbol.module:
                continue
            if directive.kind == WILDCARD or directive.source_name == symbol.name:
                return True
        return False
