"""Helper utilities for constructing temporary TypeScript projects in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

from barrelgen.config import BarrelGenConfig, load_config
from barrelgen.models import ModuleGraph
from barrelgen.module_scanner import ModuleScanner


class ProjectBuilder:
    """Utility for writing files into a throwaway project and rescanning it."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries relative to the project root."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def read(self, relative: str) -> str:
        return (self.root / relative).read_text(encoding="utf-8")

    def config(self) -> BarrelGenConfig:
        return load_config(self.root)

    def scan(self) -> ModuleGraph:
        """Return a fresh module graph of the project's source root."""
        config = self.config()
        return ModuleScanner.from_config(config).scan(config.source_path)

    def path(self) -> Path:
        """Return the project root path."""
        return self.root


__all__ = ["ProjectBuilder"]
