"""Validation of reconciled document metadata."""

from __future__ import annotations

from typing import Dict, List, Optional

from ..config import VocabularyConfig
from ..logging import get_logger
from ..models import FrontMatter, MetadataResult, ValidationVerdict

MISSING_FIELD = "Missing required field: {name}"
INVALID_VALUES = "Unknown {name}: {values}"


class MetadataValidator:
    """Checks that a document's metadata is complete.

    Checks run in a fixed order (topic, personas, categories, content_type) and
    each failure appends exactly one message, so ``errors`` is deterministic.
    Values outside the controlled vocabularies, whether declared in the existing
    front matter or produced by analysis, are reported after those checks.
    """

    name = "metadata"

    def __init__(self, vocabulary: VocabularyConfig | None = None) -> None:
        self.vocabulary = vocabulary or VocabularyConfig()
        self.logger = get_logger("validators.metadata")

    def reconcile(
        self,
        existing: Optional[FrontMatter],
        analysis: MetadataResult,
        *,
        path: str | None = None,
    ) -> ValidationVerdict:
        rejected = existing.rejected if existing is not None else {}
        for field_name, values in rejected.items():
            self.logger.warning(
                "%s: %s outside the controlled vocabulary: %s",
                path or "<document>",
                field_name,
                ", ".join(values),
            )

        errors: List[str] = []
        if not isinstance(analysis.topic, str) or not analysis.topic.strip():
            errors.append(MISSING_FIELD.format(name="topic"))
        if not isinstance(analysis.personas, list) or not analysis.personas:
            errors.append(MISSING_FIELD.format(name="personas"))
        if not isinstance(analysis.categories, list):
            errors.append(MISSING_FIELD.format(name="categories"))
        if not analysis.content_type:
            errors.append(MISSING_FIELD.format(name="content_type"))

        errors.extend(self._vocabulary_errors(analysis, rejected))

        return ValidationVerdict(is_valid=not errors, errors=errors, metadata=analysis)

    def _vocabulary_errors(
        self, analysis: MetadataResult, rejected: Dict[str, List[str]]
    ) -> List[str]:
        content_types = [analysis.content_type] if analysis.content_type else []
        checks = (
            ("categories", analysis.categories or [], self.vocabulary.categories),
            ("personas", analysis.personas or [], self.vocabulary.personas),
            ("content_type", content_types, self.vocabulary.content_types),
        )
        errors: List[str] = []
        for name, values, allowed in checks:
            unknown = list(rejected.get(name, []))
            for value in values:
                if value not in allowed and value not in unknown:
                    unknown.append(value)
            if unknown:
                errors.append(INVALID_VALUES.format(name=name, values=", ".join(unknown)))
        return errors


def reconcile(existing: Optional[FrontMatter], analysis: MetadataResult) -> ValidationVerdict:
    """Validate ``analysis`` with the default vocabulary."""
    return MetadataValidator().reconcile(existing, analysis)


__all__ = ["INVALID_VALUES", "MISSING_FIELD", "MetadataValidator", "reconcile"]
