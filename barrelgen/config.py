"""Configuration loading for barrelgen (.barrelgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".barrelgen.yml"

DEFAULT_COMMENTS: Dict[str, str] = {
    "enums": "Enums and utilities",
    "email": "Email types",
    "mailbox": "Mailbox types",
    "wallet-status": "Wallet status utilities",
    "analytics": "Analytics types",
    "api": "API types",
    "navigation": "Navigation types",
    "network": "Network types",
    "wallet": "Wallet types",
    "common": "Common blockchain types",
    "validation": "Validation types",
    "environment": "Environment configuration",
    "app-config": "Application configuration",
    "indexer-responses": "Indexer response types",
    "indexer-guards": "Indexer type guards",
    "mailbox-responses": "Mailbox response types",
    "address": "Address utilities",
    "event-helpers": "Event helper utilities",
    "network-config": "Network configuration utilities",
    "logger": "Logging utilities",
    "address-validator": "Address validation",
    "type-validation": "Type validation",
    "currency": "Currency formatting",
    "date": "Date formatting",
    "string": "String formatting",
    "url-params": "URL parameter utilities",
    "application": "Application constants",
    "auth": "Authentication utilities",
}

DEFAULT_BARRELS: List[str] = [
    "src/types/api/index.ts",
    "src/types/blockchain/index.ts",
    "src/types/business/index.ts",
    "src/types/config/index.ts",
    "src/types/infrastructure/index.ts",
    "src/utils/blockchain/index.ts",
    "src/utils/validation/index.ts",
    "src/utils/formatting/index.ts",
    "src/utils/auth/index.ts",
]


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class SynthesisConfig:
    """Barrel regeneration settings."""

    comments: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COMMENTS))
    barrels: List[str] = field(default_factory=lambda: list(DEFAULT_BARRELS))
    keep_subdirectory_wildcards: bool = True


@dataclass
class ValidationConfig:
    """Export-structure validation settings."""

    report_path: str = ".barrelgen/export-validation.md"
    check_completeness: bool = False


@dataclass
class AnalysisConfig:
    """Type analysis report settings."""

    report_path: str = ".barrelgen/type-analysis.md"


@dataclass
class BarrelGenConfig:
    """Represents the settings defined in .barrelgen.yml."""

    root: Path
    source_root: str = "src"
    module_suffix: str = ".ts"
    index_name: str = "index"
    exclude_dirs: List[str] = field(default_factory=lambda: ["node_modules", "dist"])
    test_suffixes: List[str] = field(default_factory=lambda: [".test.ts"])
    synthesis: SynthesisConfig = field(default_factory=SynthesisConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)

    @property
    def index_filename(self) -> str:
        return f"{self.index_name}{self.module_suffix}"

    @property
    def source_path(self) -> Path:
        return self.root / self.source_root


def load_config(config_path: Path) -> BarrelGenConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return BarrelGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = BarrelGenConfig(root=root)

    source_root = _as_str(data.get("source_root"))
    if source_root is not None:
        config.source_root = source_root.strip("/") or "."
    module_suffix = _as_str(data.get("module_suffix"))
    if module_suffix:
        config.module_suffix = module_suffix if module_suffix.startswith(".") else f".{module_suffix}"
    index_name = _as_str(data.get("index_name"))
    if index_name:
        config.index_name = index_name
    if "exclude_dirs" in data:
        config.exclude_dirs = _as_str_list(data.get("exclude_dirs"))
    if "test_suffixes" in data:
        config.test_suffixes = _as_str_list(data.get("test_suffixes"))

    synthesis_data = _as_dict(data.get("synthesis"))
    if synthesis_data:
        if "comments" in synthesis_data:
            comments = synthesis_data.get("comments")
            if not isinstance(comments, dict):
                raise ConfigError("synthesis.comments must be a mapping")
            config.synthesis.comments = {str(key): str(value) for key, value in comments.items()}
        if "barrels" in synthesis_data:
            config.synthesis.barrels = _as_str_list(synthesis_data.get("barrels"))
        keep = _as_bool(synthesis_data.get("keep_subdirectory_wildcards"))
        if keep is not None:
            config.synthesis.keep_subdirectory_wildcards = keep

    validation_data = _as_dict(data.get("validation"))
    if validation_data:
        report_path = _as_str(validation_data.get("report_path"))
        if report_path:
            config.validation.report_path = report_path
        completeness = _as_bool(validation_data.get("check_completeness"))
        if completeness is not None:
            config.validation.check_completeness = completeness

    analysis_data = _as_dict(data.get("analysis"))
    if analysis_data:
        report_path = _as_str(analysis_data.get("report_path"))
        if report_path:
            config.analysis.report_path = report_path

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
