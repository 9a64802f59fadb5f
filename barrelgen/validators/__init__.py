"""Validation package for export structures."""

from .base import (
    MISSING_INDEX_FILE,
    MISSING_MAIN_INDEX,
    MISSING_REEXPORT,
    Issue,
    ValidationResult,
    ValidationStats,
    Validator,
)
from .structure import ExportStructureValidator

__all__ = [
    "MISSING_INDEX_FILE",
    "MISSING_MAIN_INDEX",
    "MISSING_REEXPORT",
    "ExportStructureValidator",
    "Issue",
    "ValidationResult",
    "ValidationStats",
    "Validator",
]
