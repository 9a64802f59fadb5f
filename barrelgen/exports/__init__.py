"""Export extraction and classification engines."""

from .base import ExportEngine, LexicalExportEngine
from .classifier import ModuleClassification, classify, classify_module
from .extractor import ExportListEntry, extract, find_export_lists, find_reexport_targets

__all__ = [
    "ExportEngine",
    "ExportListEntry",
    "LexicalExportEngine",
    "ModuleClassification",
    "classify",
    "classify_module",
    "extract",
    "find_export_lists",
    "find_reexport_targets",
]
