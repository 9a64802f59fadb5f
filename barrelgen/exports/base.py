"""Engine contract separating export scanning from synthesis and validation."""

from abc import ABC, abstractmethod
from typing import List

from ..models import ModuleExports
from .classifier import ModuleClassification, classify, classify_module
from .extractor import extract, find_reexport_targets


class ExportEngine(ABC):
    """Contract for engines that read export information out of module text."""

    @abstractmethod
    def extract(self, text: str, path: str) -> ModuleExports:
        """Return declared symbols and re-export directives of one module."""

    @abstractmethod
    def classify(self, text: str, name: str) -> str:
        """Return ``TYPE`` or ``VALUE`` for one exported name."""

    @abstractmethod
    def classify_module(self, text: str) -> ModuleClassification:
        """Return the sorted type and value names a module exports."""

    @abstractmethod
    def reexport_targets(self, text: str) -> List[str]:
        """Return the distinct re-export targets of a barrel in source order."""


class LexicalExportEngine(ExportEngine):
    """Regex-driven engine; reads declarations without parsing the grammar."""

    def extract(self, text: str, path: str) -> ModuleExports:
        return extract(text, path)

    def classify(self, text: str, name: str) -> str:
        return classify(text, name)

    def classify_module(self, text: str) -> ModuleClassification:
        return classify_module(text)

    def reexport_targets(self, text: str) -> List[str]:
        return find_reexport_targets(text)
