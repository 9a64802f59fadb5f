"""Pipeline orchestration for validate, generate, list and analyze runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from .analysis import TypeAnalysis, analyze_types
from .config import BarrelGenConfig, load_config
from .exports import ExportEngine, LexicalExportEngine
from .logging import get_logger
from .module_scanner import ModuleScanner
from .models import ModuleGraph
from .reports import ReportRenderer
from .synthesis import BarrelSynthesizer, SynthesisResult, render_export_listing
from .utils import atomic_write_text, relativize
from .validators import ExportStructureValidator, ValidationResult


@dataclass
class ValidationOutcome:
    """Result of a validation run and where its report was written."""

    result: ValidationResult
    report_path: Path


@dataclass
class AnalysisOutcome:
    """Result of a type analysis run and where its report was written."""

    analysis: TypeAnalysis
    report_path: Path


class Orchestrator:
    """Coordinates scanning, validation, synthesis and reporting for a project."""

    def __init__(
        self,
        *,
        engine: ExportEngine | None = None,
        renderer: ReportRenderer | None = None,
    ) -> None:
        self.engine = engine or LexicalExportEngine()
        self.renderer = renderer or ReportRenderer()
        self.logger = get_logger("orchestrator")

    def load_config(self, path: Path | str) -> BarrelGenConfig:
        return load_config(Path(path).expanduser().resolve())

    def scan(self, config: BarrelGenConfig) -> ModuleGraph:
        scanner = ModuleScanner.from_config(config)
        graph = scanner.scan(config.source_path)
        self.logger.debug("Scanned %d modules under %s", len(graph), config.source_path)
        return graph

    def run_validate(self, path: Path | str = ".") -> ValidationOutcome:
        """Validate the export structure and write the markdown report."""
        config = self.load_config(path)
        self.logger.info("Scanning for exports under %s", config.source_path)
        graph = self.scan(config)
        validator = ExportStructureValidator(
            engine=self.engine,
            module_suffix=config.module_suffix,
            check_completeness=config.validation.check_completeness,
        )
        result = validator.validate(graph)
        report_path = config.root / config.validation.report_path
        atomic_write_text(report_path, self.renderer.render_validation(result))
        self.logger.info("Export validation complete. Found %d issues.", len(result.issues))
        return ValidationOutcome(result=result, report_path=report_path)

    def preview_barrel(self, barrel: Path | str, *, root: Path | str = ".") -> SynthesisResult:
        """Regenerate one barrel in memory; the file on disk is not touched."""
        config = self.load_config(root)
        synthesizer = self._synthesizer(config)
        barrel_path = Path(barrel)
        if not barrel_path.is_absolute():
            barrel_path = config.root / barrel_path
        return synthesizer.synthesize(barrel_path)

    def run_generate_all(self, root: Path | str = ".") -> List[SynthesisResult]:
        """Regenerate and overwrite every configured barrel."""
        config = self.load_config(root)
        synthesizer = self._synthesizer(config)
        return synthesizer.run_batch(config.root)

    def list_exports(self, module: Path | str) -> str:
        """Return a flat export block naming everything ``module`` exports."""
        module_path = Path(module)
        if not module_path.is_file():
            raise FileNotFoundError(f"Module file not found: {module_path}")
        text = module_path.read_text(encoding="utf-8", errors="replace")
        classification = self.engine.classify_module(text)
        names = sorted(classification.types + classification.values)
        return render_export_listing(relativize(module_path.resolve()), names, f"./{module_path.stem}")

    def run_analyze(self, path: Path | str = ".") -> AnalysisOutcome:
        """Inventory declarations across the module graph and write the report."""
        config = self.load_config(path)
        self.logger.info("Analyzing modules under %s", config.source_path)
        graph = self.scan(config)
        analysis = analyze_types(graph, self.engine)
        report_path = config.root / config.analysis.report_path
        atomic_write_text(report_path, self.renderer.render_type_analysis(analysis))
        return AnalysisOutcome(analysis=analysis, report_path=report_path)

    def _synthesizer(self, config: BarrelGenConfig) -> BarrelSynthesizer:
        return BarrelSynthesizer(
            config.synthesis,
            engine=self.engine,
            module_suffix=config.module_suffix,
            index_filename=config.index_filename,
        )
