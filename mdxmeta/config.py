"""Configuration loading for mdxmeta (.mdxmeta.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError
from .vocabulary import (
    CONTENT_TYPES,
    DEFAULT_CATEGORY,
    DEFAULT_CONTENT_TYPE,
    VALID_CATEGORIES,
    VALID_PERSONAS,
)

CONFIG_FILENAME = ".mdxmeta.yml"


@dataclass
class VocabularyConfig:
    """Controlled vocabularies documents are validated against."""

    categories: List[str] = field(default_factory=lambda: list(VALID_CATEGORIES))
    personas: List[str] = field(default_factory=lambda: list(VALID_PERSONAS))
    content_types: List[str] = field(default_factory=lambda: list(CONTENT_TYPES))
    default_category: str = DEFAULT_CATEGORY

    @property
    def default_persona(self) -> str:
        return self.personas[0]

    @property
    def default_content_type(self) -> str:
        if DEFAULT_CONTENT_TYPE in self.content_types:
            return DEFAULT_CONTENT_TYPE
        return self.content_types[0]


@dataclass
class InputConfig:
    """How candidate documents are gathered and filtered."""

    extension: str = ".mdx"
    ignore: List[str] = field(default_factory=lambda: ["pages/_*.mdx"])
    changed_files_env: str = "CHANGED_FILES"
    parent_names: List[str] = field(default_factory=lambda: ["index.mdx", "README.mdx"])


@dataclass
class AnalyzerConfig:
    """Tuning knobs for content inference."""

    confident_score: int = 3


@dataclass
class ReportConfig:
    """Optional JSON run report."""

    path: Optional[Path] = None


@dataclass
class MdxMetaConfig:
    """Represents the settings defined in .mdxmeta.yml."""

    root: Path
    vocabulary: VocabularyConfig = field(default_factory=VocabularyConfig)
    inputs: InputConfig = field(default_factory=InputConfig)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


def load_config(config_path: Path) -> MdxMetaConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return MdxMetaConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    vocabulary = VocabularyConfig()
    vocab_data = _as_dict(data.get("vocabulary"))
    if vocab_data:
        categories = _as_str_list(vocab_data.get("categories"))
        if categories:
            vocabulary.categories = categories
        personas = _as_str_list(vocab_data.get("personas"))
        if personas:
            vocabulary.personas = personas
        content_types = _as_str_list(vocab_data.get("content_types"))
        if content_types:
            vocabulary.content_types = content_types
        default_category = _as_str(vocab_data.get("default_category"))
        if default_category:
            vocabulary.default_category = default_category
    if vocabulary.default_category not in vocabulary.categories:
        raise ConfigError(
            f"default_category '{vocabulary.default_category}' is not one of the configured categories"
        )

    inputs = InputConfig()
    input_data = _as_dict(data.get("inputs"))
    if input_data:
        extension = _as_str(input_data.get("extension"))
        if extension:
            inputs.extension = extension if extension.startswith(".") else f".{extension}"
        if "ignore" in input_data:
            inputs.ignore = _as_str_list(input_data.get("ignore"))
        env_name = _as_str(input_data.get("changed_files_env"))
        if env_name:
            inputs.changed_files_env = env_name
        parent_names = _as_str_list(input_data.get("parent_names"))
        if parent_names:
            inputs.parent_names = parent_names

    analyzer = AnalyzerConfig()
    analyzer_data = _as_dict(data.get("analyzer"))
    if analyzer_data:
        score = _as_int(analyzer_data.get("confident_score"))
        if score is not None:
            if score < 1:
                raise ConfigError("analyzer.confident_score must be a positive integer")
            analyzer.confident_score = score

    report = ReportConfig()
    report_data = _as_dict(data.get("report"))
    report_path = _as_str(report_data.get("path")) if report_data else None
    if report_path:
        report.path = root / report_path

    return MdxMetaConfig(
        root=root,
        vocabulary=vocabulary,
        inputs=inputs,
        analyzer=analyzer,
        report=report,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "AnalyzerConfig",
    "CONFIG_FILENAME",
    "InputConfig",
    "MdxMetaConfig",
    "ReportConfig",
    "VocabularyConfig",
    "load_config",
]
