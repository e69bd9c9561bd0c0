from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.docs_builder import DocsBuilder


@pytest.fixture
def docs_builder(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> DocsBuilder:
    """Provide a docs tree rooted at tmp_path with the working directory inside it."""
    monkeypatch.chdir(tmp_path)
    return DocsBuilder(tmp_path)
