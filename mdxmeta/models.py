"""Core data models shared across mdxmeta components."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .config import VocabularyConfig

MANAGED_FIELDS: tuple[str, ...] = ("topic", "content_type", "categories", "personas")


@dataclass
class FrontMatter:
    """Validated view of a document's metadata header.

    ``None`` means the field is absent. ``categories`` may be an empty list when a
    document explicitly declares no categories. Values outside the controlled
    vocabularies are kept in ``rejected`` instead of the typed fields.
    """

    topic: Optional[str] = None
    content_type: Optional[str] = None
    categories: Optional[List[str]] = None
    personas: Optional[List[str]] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    rejected: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], vocabulary: "VocabularyConfig"
    ) -> "FrontMatter":
        record = cls()
        topic = data.get("topic")
        if isinstance(topic, (str, int, float, date)) and not isinstance(topic, bool):
            text = str(topic).strip()
            record.topic = text or None

        content_type = data.get("content_type")
        if isinstance(content_type, str) and content_type.strip():
            normalised = content_type.strip().lower()
            if normalised in vocabulary.content_types:
                record.content_type = normalised
            else:
                record.rejected["content_type"] = [content_type]

        record.categories = _vocabulary_list(
            data.get("categories"), vocabulary.categories, "categories", record.rejected
        )
        personas = _vocabulary_list(
            data.get("personas"), vocabulary.personas, "personas", record.rejected
        )
        record.personas = personas or None

        record.extra = {key: value for key, value in data.items() if key not in MANAGED_FIELDS}
        return record


@dataclass
class Document:
    """A markup document read from disk."""

    path: str
    raw: str
    data: Dict[str, Any]
    body: str
    front_matter: FrontMatter
    malformed: bool = False


@dataclass
class Suggestions:
    """Alternative values offered when inference is not confident."""

    categories: List[str] = field(default_factory=list)
    inherited_from: Optional[str] = None


@dataclass
class MetadataResult:
    """Inferred metadata for one document."""

    topic: str
    content_type: str
    categories: Optional[List[str]]
    personas: List[str]
    uncertain_categories: bool = False
    suggestions: Optional[Suggestions] = None
    diagnostics: Dict[str, Any] = field(default_factory=dict)

    def to_front_matter(self) -> Dict[str, Any]:
        """Return the managed fields in the order they are written to disk."""
        return {
            "topic": self.topic,
            "content_type": self.content_type,
            "categories": list(self.categories or []),
            "personas": list(self.personas),
        }


@dataclass
class ParentMetadata:
    """Categories declared by the nearest ancestor index document."""

    path: str
    categories: List[str] = field(default_factory=list)


@dataclass
class ValidationVerdict:
    """Outcome of validating one document's reconciled metadata."""

    is_valid: bool
    errors: List[str]
    metadata: MetadataResult


@dataclass
class ProcessingStats:
    """Counters for a single batch run."""

    total: int = 0
    successful: int = 0
    needs_review: int = 0
    failed: int = 0


@dataclass
class DocumentOutcome:
    """Per-document summary kept for the run report."""

    path: str
    status: str
    content_type: Optional[str] = None
    categories: List[str] = field(default_factory=list)
    uncertain_categories: bool = False
    errors: List[str] = field(default_factory=list)
    written: bool = False


@dataclass
class RunResult:
    """Stats and ordered outcomes returned by the batch runner."""

    stats: ProcessingStats
    outcomes: List[DocumentOutcome] = field(default_factory=list)


def _vocabulary_list(
    value: Any,
    allowed: Sequence[str],
    key: str,
    rejected: Dict[str, List[str]],
) -> Optional[List[str]]:
    if value is None:
        return None
    if isinstance(value, str):
        items = [value]
    elif isinstance(value, (list, tuple)):
        items = [str(item) for item in value if isinstance(item, (str, int, float))]
    else:
        rejected[key] = [repr(value)]
        return None
    if not items:
        return []

    kept: List[str] = []
    dropped: List[str] = []
    for item in items:
        normalised = item.strip().lower()
        if normalised in allowed:
            if normalised not in kept:
                kept.append(normalised)
        else:
            dropped.append(item)
    if dropped:
        rejected[key] = dropped
    return kept or None


__all__ = [
    "Document",
    "DocumentOutcome",
    "FrontMatter",
    "MANAGED_FIELDS",
    "MetadataResult",
    "ParentMetadata",
    "ProcessingStats",
    "RunResult",
    "Suggestions",
    "ValidationVerdict",
]
