"""Text helpers shared by the content analyzers."""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

_FENCE_PATTERN = re.compile(r"^\s*(```|~~~)")
_MDX_STATEMENT_PATTERN = re.compile(r"^(import|export)\s")
_H1_PATTERN = re.compile(r"^#\s+(.+?)\s*#*\s*$")
_INLINE_MARKUP_PATTERN = re.compile(r"[*_`]+")
_PATH_SPLIT_PATTERN = re.compile(r"[/\\_.\s-]+")
_PARENT_STEMS = {"index", "readme"}


def strip_code(text: str) -> str:
    """Remove fenced code blocks and top-level MDX import/export lines."""
    lines: List[str] = []
    in_code = False
    for line in text.splitlines():
        if _FENCE_PATTERN.match(line):
            in_code = not in_code
            continue
        if in_code:
            continue
        if _MDX_STATEMENT_PATTERN.match(line):
            continue
        lines.append(line)
    return "\n".join(lines)


def first_heading(prose: str) -> Optional[str]:
    """Return the text of the first level-one heading, if any."""
    for line in prose.splitlines():
        match = _H1_PATTERN.match(line.strip())
        if match:
            heading = _INLINE_MARKUP_PATTERN.sub("", match.group(1)).strip()
            if heading:
                return heading
    return None


def first_line(prose: str, max_length: int = 80) -> Optional[str]:
    """Return the first non-blank line of prose, truncated for display."""
    for line in prose.splitlines():
        stripped = line.strip().lstrip("#>-* ").strip()
        if stripped:
            return truncate(stripped, max_length)
    return None


def truncate(text: str, max_length: int = 80) -> str:
    return text if len(text) <= max_length else text[: max_length - 3] + "..."


def topic_from_path(path: str) -> Optional[str]:
    """Derive a readable topic from a document path.

    Index-style documents (``index.mdx``, ``README.mdx``) are named after their
    directory.
    """
    pure = PurePosixPath(path.replace("\\", "/"))
    stem = pure.stem
    if stem.lower() in _PARENT_STEMS and pure.parent.name:
        stem = pure.parent.name
    words = [part for part in re.split(r"[-_\s]+", stem) if part]
    if not words:
        return None
    return " ".join(words)


def path_tokens(path: str) -> List[str]:
    """Lowercased path segments split on separators, without the extension."""
    pure = PurePosixPath(path.replace("\\", "/"))
    text = str(pure.with_suffix("")) if pure.suffix else str(pure)
    return [token.lower() for token in _PATH_SPLIT_PATTERN.split(text) if token]


def count_phrases(text: str, phrases: Iterable[str]) -> int:
    """Count whole-word occurrences of every phrase in lowercased ``text``."""
    total = 0
    for phrase in phrases:
        pattern = r"(?<![a-z0-9-])" + re.escape(phrase.lower()) + r"(?![a-z0-9-])"
        total += len(re.findall(pattern, text))
    return total


def count_patterns(text: str, patterns: Iterable[str]) -> int:
    """Count multiline regular-expression matches in ``text``."""
    return sum(len(re.findall(pattern, text, flags=re.MULTILINE)) for pattern in patterns)


def rank(scores: Mapping[str, int], order: Sequence[str]) -> List[str]:
    """Return keys with a positive score, highest first, ties in vocabulary order."""
    position: Dict[str, int] = {name: index for index, name in enumerate(order)}
    ranked = [name for name, score in scores.items() if score > 0]
    ranked.sort(key=lambda name: (-scores[name], position.get(name, len(position))))
    return ranked


__all__ = [
    "count_patterns",
    "count_phrases",
    "first_heading",
    "first_line",
    "path_tokens",
    "rank",
    "strip_code",
    "topic_from_path",
    "truncate",
]
