"""Markdown report rendering backed by Jinja templates."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader

from ..analysis import TypeAnalysis
from ..validators import ValidationResult


def _timestamp() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


class ReportRenderer:
    """Renders validation and type analysis reports."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        self._env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render_validation(self, result: ValidationResult, *, generated_on: str | None = None) -> str:
        template = self._env.get_template("export_validation.md.j2")
        return (
            template.render(
                generated_on=generated_on or _timestamp(),
                stats=result.stats,
                issues=result.issues,
            ).rstrip()
            + "\n"
        )

    def render_type_analysis(self, analysis: TypeAnalysis, *, generated_on: str | None = None) -> str:
        template = self._env.get_template("type_analysis.md.j2")
        return template.render(generated_on=generated_on or _timestamp(), analysis=analysis).rstrip() + "\n"
