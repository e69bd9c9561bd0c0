"""Front-matter parsing, loading, and rendering for markup documents."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import frontmatter
import yaml

from .config import VocabularyConfig
from .logging import get_logger
from .models import MANAGED_FIELDS, Document, FrontMatter, MetadataResult

_LOGGER = get_logger("documents")


@dataclass
class ParsedDocument:
    """Raw front-matter mapping and body split from a document."""

    data: Dict[str, Any]
    content: str
    malformed: bool = False


@dataclass
class LoadResult:
    """Either a loaded document or the reason it could not be read."""

    path: str
    document: Optional[Document] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.document is not None


def parse(raw_text: str) -> ParsedDocument:
    """Split ``raw_text`` into front matter and body without ever raising."""
    try:
        post = frontmatter.loads(raw_text)
    except (yaml.YAMLError, ValueError, TypeError, AttributeError) as exc:
        _LOGGER.debug("Front matter could not be parsed: %s", exc)
        return ParsedDocument(data={}, content=raw_text, malformed=True)

    metadata = post.metadata
    if not isinstance(metadata, dict):
        return ParsedDocument(data={}, content=raw_text, malformed=True)
    return ParsedDocument(data=dict(metadata), content=post.content)


def read_text(path: Path) -> str:
    """Read a document, raising ``OSError`` for anything that is not a readable file."""
    if not path.exists():
        raise FileNotFoundError(f"{path} does not exist")
    if not path.is_file():
        raise IsADirectoryError(f"{path} is not a file")
    return path.read_text(encoding="utf-8")


def load_document(path: str | Path, vocabulary: VocabularyConfig) -> LoadResult:
    """Read and parse one document, reporting read faults instead of raising."""
    display = str(path)
    try:
        raw = read_text(Path(path))
    except (OSError, UnicodeDecodeError) as exc:
        return LoadResult(path=display, error=str(exc))

    parsed = parse(raw)
    document = Document(
        path=display,
        raw=raw,
        data=parsed.data,
        body=parsed.content,
        front_matter=FrontMatter.from_mapping(parsed.data, vocabulary),
        malformed=parsed.malformed,
    )
    return LoadResult(path=display, document=document)


def changed_fields(document: Document, metadata: MetadataResult) -> Dict[str, Any]:
    """Return the managed fields whose value on disk differs from ``metadata``.

    A scalar topic that YAML loaded as a number or date is compared by its text,
    so it is not rewritten when the inferred topic is that same text.
    """
    desired = metadata.to_front_matter()
    changed: Dict[str, Any] = {}
    for key in MANAGED_FIELDS:
        current = document.data.get(key)
        if key == "topic" and current is not None and not isinstance(current, bool):
            current = str(current).strip()
        if current != desired[key]:
            changed[key] = desired[key]
    return changed


def needs_update(document: Document, metadata: MetadataResult) -> bool:
    """Return True when the managed fields on disk differ from ``metadata``."""
    return bool(changed_fields(document, metadata))


def render_document(document: Document, metadata: MetadataResult) -> str:
    """Merge the changed managed fields into the document's header and render it."""
    merged: Dict[str, Any] = dict(document.data)
    merged.update(changed_fields(document, metadata))

    post = frontmatter.Post(document.body)
    post.metadata.update(merged)
    rendered = frontmatter.dumps(post, sort_keys=False)
    if not rendered.endswith("\n"):
        rendered += "\n"
    return rendered


def write_document(document: Document, metadata: MetadataResult) -> bool:
    """Persist ``metadata`` into the document on disk; returns True if the file changed."""
    if document.malformed:
        _LOGGER.warning(
            "Not rewriting %s: existing front matter could not be parsed", document.path
        )
        return False
    if not needs_update(document, metadata):
        return False
    rendered = render_document(document, metadata)
    Path(document.path).write_text(rendered, encoding="utf-8")
    _LOGGER.debug("Wrote metadata to %s", document.path)
    return True


__all__ = [
    "LoadResult",
    "ParsedDocument",
    "load_document",
    "changed_fields",
    "needs_update",
    "parse",
    "read_text",
    "render_document",
    "write_document",
]
