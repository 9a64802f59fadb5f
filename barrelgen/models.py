"""Core data models shared across barrelgen components."""

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Dict, Iterator, List, Optional

TYPE = "type"
VALUE = "value"

WILDCARD = "wildcard"
SELECTIVE = "selective"


@dataclass(frozen=True)
class Module:
    """A source file relative to the project source root."""

    path: str
    text: str

    @property
    def directory(self) -> str:
        """Return the posix directory of the module, ``.`` for the source root."""
        return PurePosixPath(self.path).parent.as_posix()

    @property
    def filename(self) -> str:
        return PurePosixPath(self.path).name


@dataclass(frozen=True)
class ExportedSymbol:
    """A symbol declared and exported directly by a module."""

    name: str
    module: str
    kind: str
    declaration: Optional[str] = None


@dataclass(frozen=True)
class ReExportDirective:
    """An ``export * from`` or ``export { ... } from`` statement entry.

    Selective lists are split so that every listed name is its own directive;
    ``name`` is the exported name (the alias for ``a as b``) and ``source_name``
    the name looked up in the target module.
    """

    kind: str
    target: str
    module: str
    name: Optional[str] = None
    source_name: Optional[str] = None
    type_only: bool = False

    @property
    def names(self) -> List[str]:
        return [self.name] if self.name else []


@dataclass
class ModuleExports:
    """Everything the extractor found in a single module."""

    module: str
    symbols: List[ExportedSymbol] = field(default_factory=list)
    directives: List[ReExportDirective] = field(default_factory=list)


@dataclass
class ModuleGraph:
    """All modules discovered under a source root for one analyzer run."""

    root: Path
    modules: List[Module]
    index_filename: str = "index.ts"
    _by_path: Dict[str, Module] = field(init=False, repr=False, default_factory=dict)

    def __post_init__(self) -> None:
        self._by_path = {module.path: module for module in self.modules}

    def __iter__(self) -> Iterator[Module]:
        return iter(self.modules)

    def __len__(self) -> int:
        return len(self.modules)

    def get(self, path: str) -> Optional[Module]:
        return self._by_path.get(path)

    def is_barrel(self, module: Module) -> bool:
        return module.filename == self.index_filename

    def barrels(self) -> List[Module]:
        return [module for module in self.modules if self.is_barrel(module)]

    def barrel_path_for(self, directory: str) -> str:
        """Return the expected barrel path for a posix directory."""
        if directory in {"", "."}:
            return self.index_filename
        return f"{directory}/{self.index_filename}"
