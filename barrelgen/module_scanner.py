"""Source tree walking and module graph construction."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List, Sequence

from .config import BarrelGenConfig
from .logging import get_logger
from .models import Module, ModuleGraph

_DEFAULT_EXCLUDED_DIRS = ("node_modules", "dist")


class ModuleScanner:
    """Walks a source root to produce the module graph for one run."""

    def __init__(
        self,
        *,
        module_suffix: str = ".ts",
        index_filename: str = "index.ts",
        exclude_dirs: Sequence[str] = _DEFAULT_EXCLUDED_DIRS,
        test_suffixes: Sequence[str] = (".test.ts",),
    ) -> None:
        self.module_suffix = module_suffix
        self.index_filename = index_filename
        self.exclude_dirs = set(exclude_dirs)
        self.test_suffixes = tuple(test_suffixes)
        self.logger = get_logger("scanner")

    @classmethod
    def from_config(cls, config: BarrelGenConfig) -> "ModuleScanner":
        return cls(
            module_suffix=config.module_suffix,
            index_filename=config.index_filename,
            exclude_dirs=config.exclude_dirs,
            test_suffixes=config.test_suffixes,
        )

    def scan(self, source_root: Path | str) -> ModuleGraph:
        """Return every module under ``source_root`` keyed by its relative path."""
        root_path = Path(source_root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Source root not found: {source_root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Source root is not a directory: {source_root}")

        modules: List[Module] = []
        for path in self._iter_module_files(root_path):
            rel_path = path.relative_to(root_path).as_posix()
            text = path.read_text(encoding="utf-8", errors="replace")
            modules.append(Module(path=rel_path, text=text))

        self.logger.debug("Discovered %d modules under %s", len(modules), root_path)
        return ModuleGraph(root=root_path, modules=modules, index_filename=self.index_filename)

    def is_module_file(self, filename: str) -> bool:
        if not filename.endswith(self.module_suffix):
            return False
        return not filename.endswith(self.test_suffixes)

    def _iter_module_files(self, root: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root):
            current_dir = Path(dirpath)
            # Sorted walk keeps the module order stable across platforms.
            dirnames[:] = sorted(name for name in dirnames if name not in self.exclude_dirs)
            for filename in sorted(filenames):
                if self.is_module_file(filename):
                    yield current_dir / filename
