"""Barrel file regeneration from classified module exports."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..config import SynthesisConfig
from ..exports import ExportEngine, LexicalExportEngine, ModuleClassification
from ..logging import get_logger
from ..models import WILDCARD
from ..utils import atomic_write_text
from .render import render_barrel, render_module_block, render_wildcard


def is_relative_target(target: str) -> bool:
    """Return True for ``./`` and ``../`` specifiers resolved against the barrel directory."""
    return target.startswith(("./", "../")) or target in {".", ".."}


@dataclass(frozen=True)
class SynthesisWarning:
    """A referenced module that could not be regenerated."""

    barrel: Path
    target: str
    message: str


@dataclass
class SynthesisResult:
    """Outcome of regenerating one barrel.

    ``content`` is ``None`` when the barrel re-exports nothing that could be
    regenerated, in which case the existing file must be left alone.
    """

    barrel: Path
    content: Optional[str]
    modules: List[str] = field(default_factory=list)
    warnings: List[SynthesisWarning] = field(default_factory=list)
    written: bool = False


class BarrelSynthesizer:
    """Normalizes an existing barrel into sorted type and value re-export blocks."""

    def __init__(
        self,
        config: SynthesisConfig | None = None,
        *,
        engine: ExportEngine | None = None,
        module_suffix: str = ".ts",
        index_filename: str = "index.ts",
    ) -> None:
        self.config = config or SynthesisConfig()
        self.engine = engine or LexicalExportEngine()
        self.module_suffix = module_suffix
        self.index_filename = index_filename
        self.logger = get_logger("synthesis")

    def synthesize(self, barrel_path: Path | str) -> SynthesisResult:
        """Return regenerated content for ``barrel_path`` without writing it."""
        barrel = Path(barrel_path)
        if not barrel.is_file():
            raise FileNotFoundError(f"Barrel file not found: {barrel}")

        text = barrel.read_text(encoding="utf-8", errors="replace")
        directory = barrel.parent
        result = SynthesisResult(barrel=barrel, content=None)

        targets = self.engine.reexport_targets(text)
        if not targets:
            self.logger.info("No exports to process in %s", barrel)
            return result

        blocks: List[str] = []
        for target in targets:
            if is_relative_target(target):
                block = self._render_target(barrel, directory, target, result)
            else:
                block = self._render_passthrough(text, barrel, target)
            if block:
                blocks.append(block)
                result.modules.append(target)

        if blocks:
            result.content = render_barrel(blocks)
        return result

    def write(self, result: SynthesisResult) -> bool:
        """Overwrite the barrel with regenerated content in one atomic write."""
        if result.content is None:
            return False
        atomic_write_text(result.barrel, result.content)
        result.written = True
        return True

    def run_batch(self, root: Path | str) -> List[SynthesisResult]:
        """Regenerate every configured barrel under ``root`` in place."""
        root_path = Path(root)
        results: List[SynthesisResult] = []
        for relative in self.config.barrels:
            barrel = root_path / relative
            if not barrel.is_file():
                self.logger.debug("Skipping configured barrel %s (not found)", relative)
                continue
            self.logger.info("Processing %s...", relative)
            result = self.synthesize(barrel)
            if self.write(result):
                self.logger.info("Updated %s", relative)
            results.append(result)
        return results

    def _render_target(
        self, barrel: Path, directory: Path, target: str, result: SynthesisResult
    ) -> str:
        relative = posixpath.normpath(target)
        module_file = directory / f"{relative}{self.module_suffix}"
        if module_file.is_file() and module_file.resolve() != barrel.resolve():
            text = module_file.read_text(encoding="utf-8", errors="replace")
            classification = self.engine.classify_module(text)
            if classification.is_empty():
                self.logger.debug("Module %s exports nothing; dropping it from %s", target, barrel)
                return ""
            comment = self.config.comments.get(posixpath.basename(relative))
            return render_module_block(classification, target, comment)

        sub_barrel = directory / relative / self.index_filename
        if self.config.keep_subdirectory_wildcards and sub_barrel.is_file():
            return render_wildcard(target)

        message = f"File not found: {module_file}"
        self.logger.warning("%s (referenced by %s)", message, barrel)
        result.warnings.append(SynthesisWarning(barrel=barrel, target=target, message=message))
        return ""

    def _render_passthrough(self, text: str, barrel: Path, target: str) -> str:
        """Re-emit the barrel's own statements for a package specifier unchanged in meaning."""
        directives = [
            directive
            for directive in self.engine.extract(text, barrel.name).directives
            if directive.target == target
        ]
        statements: List[str] = []
        if any(directive.kind == WILDCARD for directive in directives):
            statements.append(render_wildcard(target))
        types: List[str] = []
        values: List[str] = []
        for directive in directives:
            if directive.kind == WILDCARD:
                continue
            entry = directive.name
            if directive.source_name and directive.source_name != directive.name:
                entry = f"{directive.source_name} as {directive.name}"
            bucket = types if directive.type_only else values
            if entry and entry not in bucket:
                bucket.append(entry)
        self.logger.debug("Keeping package re-export %s in %s", target, barrel)
        statements.append(
            render_module_block(ModuleClassification(types=sorted(types), values=sorted(values)), target)
        )
        return "\n".join(statement for statement in statements if statement)
