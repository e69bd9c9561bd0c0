"""Helper utilities for constructing temporary document trees in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping


class DocsBuilder:
    """Utility for writing MDX documents into a throwaway docs tree."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries relative to the tree root."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def read(self, relative: str) -> str:
        return (self.root / relative).read_text(encoding="utf-8")

    def read_bytes(self, relative: str) -> bytes:
        return (self.root / relative).read_bytes()

    def path(self, relative: str = "") -> Path:
        """Return an absolute path inside the tree."""
        return self.root / relative if relative else self.root


__all__ = ["DocsBuilder"]
