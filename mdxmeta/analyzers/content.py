"""Infers topic, content type, categories, and personas from document content."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ..config import AnalyzerConfig, VocabularyConfig
from ..logging import get_logger
from ..models import FrontMatter, MetadataResult, ParentMetadata, Suggestions
from ..vocabulary import CATEGORY_KEYWORDS, CONTENT_TYPE_CUES, PERSONA_KEYWORDS
from .utils import (
    count_patterns,
    count_phrases,
    first_heading,
    first_line,
    path_tokens,
    rank,
    strip_code,
    topic_from_path,
)

# Added to a category score when a path segment names the category.
_PATH_WEIGHT = 2
_MAX_CATEGORIES = 3
_MAX_PERSONAS = 2


class ContentAnalyzer:
    """Keyword and structure based metadata inference for one document."""

    def __init__(
        self,
        vocabulary: VocabularyConfig | None = None,
        settings: AnalyzerConfig | None = None,
    ) -> None:
        self.vocabulary = vocabulary or VocabularyConfig()
        self.settings = settings or AnalyzerConfig()
        self.logger = get_logger("analyzer")

    def analyze(
        self,
        body: str,
        path: str,
        verbose: bool = False,
        *,
        existing: FrontMatter | None = None,
        parent: ParentMetadata | None = None,
    ) -> MetadataResult:
        """Return metadata for ``body``, keeping valid values from ``existing``."""
        existing = existing or FrontMatter()
        text = body if isinstance(body, str) else ""
        prose = strip_code(text)
        lowered = prose.lower()
        tokens = path_tokens(path or "")

        topic, topic_source = self._infer_topic(prose, path or "", existing)
        content_type, type_scores = self._infer_content_type(lowered, existing)
        categories, suggested, category_scores = self._infer_categories(lowered, tokens, existing)
        personas, persona_scores = self._infer_personas(lowered, existing)

        uncertain = categories is None
        suggestions: Optional[Suggestions] = None
        inherited = self._inherited_categories(parent)
        if uncertain or inherited:
            merged = list(suggested)
            for name in inherited:
                if name not in merged:
                    merged.append(name)
            suggestions = Suggestions(
                categories=merged,
                inherited_from=parent.path if parent is not None and inherited else None,
            )

        diagnostics: Dict[str, Any] = {}
        if verbose:
            diagnostics = {
                "topic_source": topic_source,
                "content_type_scores": type_scores,
                "category_scores": category_scores,
                "persona_scores": persona_scores,
            }
            self.logger.debug("Analysis for %s: %s", path, diagnostics)

        return MetadataResult(
            topic=topic,
            content_type=content_type,
            categories=categories,
            personas=personas,
            uncertain_categories=uncertain,
            suggestions=suggestions,
            diagnostics=diagnostics,
        )

    def _infer_topic(self, prose: str, path: str, existing: FrontMatter) -> Tuple[str, str]:
        if existing.topic:
            return existing.topic, "front_matter"
        title = existing.extra.get("title")
        if isinstance(title, str) and title.strip():
            return title.strip(), "title"
        heading = first_heading(prose)
        if heading:
            return heading, "heading"
        from_path = topic_from_path(path)
        if from_path:
            return from_path, "path"
        line = first_line(prose)
        if line:
            return line, "first_line"
        return "", "none"

    def _infer_content_type(
        self, lowered: str, existing: FrontMatter
    ) -> Tuple[str, Dict[str, int]]:
        scores = {
            name: count_patterns(lowered, CONTENT_TYPE_CUES.get(name, ()))
            for name in self.vocabulary.content_types
        }
        if existing.content_type:
            return existing.content_type, scores

        default = self.vocabulary.default_content_type
        ranked = rank(scores, self.vocabulary.content_types)
        if not ranked:
            return default, scores
        best = scores[ranked[0]]
        if scores.get(default, 0) == best:
            return default, scores
        return ranked[0], scores

    def _infer_categories(
        self, lowered: str, tokens: List[str], existing: FrontMatter
    ) -> Tuple[Optional[List[str]], List[str], Dict[str, int]]:
        scores: Dict[str, int] = {}
        for name in self.vocabulary.categories:
            keywords = CATEGORY_KEYWORDS.get(name, (name,))
            score = count_phrases(lowered, keywords)
            if any(token == name or token in keywords for token in tokens):
                score += _PATH_WEIGHT
            scores[name] = score

        if existing.categories is not None:
            return list(existing.categories), [], scores

        ranked = rank(scores, self.vocabulary.categories)
        threshold = self.settings.confident_score
        confident = [name for name in ranked if scores[name] >= threshold]
        if confident:
            return confident[:_MAX_CATEGORIES], [], scores
        return None, ranked[:_MAX_CATEGORIES], scores

    def _infer_personas(
        self, lowered: str, existing: FrontMatter
    ) -> Tuple[List[str], Dict[str, int]]:
        scores = {
            name: count_phrases(lowered, PERSONA_KEYWORDS.get(name, (name,)))
            for name in self.vocabulary.personas
        }
        if existing.personas:
            return list(existing.personas), scores

        ranked = rank(scores, self.vocabulary.personas)
        threshold = self.settings.confident_score
        confident = [name for name in ranked if scores[name] >= threshold]
        if confident:
            return confident[:_MAX_PERSONAS], scores
        return [self.vocabulary.default_persona], scores

    def _inherited_categories(self, parent: ParentMetadata | None) -> List[str]:
        if parent is None:
            return []
        allowed = self.vocabulary.categories
        return [name for name in parent.categories if name in allowed]


__all__ = ["ContentAnalyzer"]
