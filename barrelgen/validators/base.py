"""Core validation data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from ..models import ModuleGraph

MISSING_INDEX_FILE = "missing_index"
MISSING_MAIN_INDEX = "missing_main_index"
MISSING_REEXPORT = "missing_reexport"


@dataclass(frozen=True)
class Issue:
    """A structural defect in the export graph."""

    kind: str
    message: str
    file: Optional[str] = None
    symbol: Optional[str] = None


@dataclass
class ValidationStats:
    """Aggregate counts gathered while walking the module graph."""

    total_exports: int = 0
    named_exports: int = 0
    index_files: int = 0
    re_exports: int = 0


@dataclass
class ValidationResult:
    """Issues and statistics for one validation run."""

    issues: List[Issue] = field(default_factory=list)
    stats: ValidationStats = field(default_factory=ValidationStats)

    @property
    def ok(self) -> bool:
        return not self.issues


class Validator(Protocol):
    """Protocol implemented by export-graph validators."""

    name: str

    def validate(self, graph: ModuleGraph) -> ValidationResult:
        """Run validation and return issues with statistics."""
