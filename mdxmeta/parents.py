"""Locates ancestor index documents whose categories descendants inherit."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator, List, Optional, Sequence

from .documents import parse, read_text
from .logging import get_logger
from .models import ParentMetadata

DEFAULT_PARENT_NAMES: tuple[str, ...] = ("index.mdx", "README.mdx")


class ParentMetadataResolver:
    """Finds the nearest ``index``/``README`` companion for a document.

    The same directory is searched before its parent. Candidates that cannot be
    read or whose front matter does not parse are skipped, so lookup never fails
    the caller; it returns ``None`` instead.
    """

    def __init__(self, parent_names: Sequence[str] | None = None) -> None:
        self.parent_names = tuple(parent_names or DEFAULT_PARENT_NAMES)
        self.logger = get_logger("parents")

    def find_parent_metadata(self, path: str | Path) -> Optional[ParentMetadata]:
        for candidate in self._candidates(Path(path)):
            try:
                raw = read_text(candidate)
            except (OSError, UnicodeDecodeError):
                continue
            parsed = parse(raw)
            if parsed.malformed:
                self.logger.debug("Skipping parent candidate %s: unparsable front matter", candidate)
                continue
            return ParentMetadata(
                path=candidate.as_posix(),
                categories=_as_categories(parsed.data.get("categories")),
            )
        return None

    def _candidates(self, path: Path) -> Iterator[Path]:
        directory = path.parent
        seen = {_identity(path)}
        for folder in (directory, directory.parent):
            for name in self.parent_names:
                candidate = folder / name
                key = _identity(candidate)
                if key in seen:
                    continue
                seen.add(key)
                yield candidate


def find_parent_metadata(
    path: str | Path, parent_names: Sequence[str] | None = None
) -> Optional[ParentMetadata]:
    """Convenience wrapper around :class:`ParentMetadataResolver`."""
    return ParentMetadataResolver(parent_names).find_parent_metadata(path)


def _identity(path: Path) -> str:
    return str(path.absolute())


def _as_categories(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = ["DEFAULT_PARENT_NAMES", "ParentMetadataResolver", "find_parent_metadata"]
