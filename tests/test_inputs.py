"""Tests for input path gathering."""

from __future__ import annotations

from mdxmeta.config import InputConfig
from mdxmeta.inputs import filter_paths, gather_paths, parse_changed_files
from tests._fixtures.docs_builder import DocsBuilder


def test_patterns_are_expanded_recursively(docs_builder: DocsBuilder) -> None:
    docs_builder.write(
        {
            "docs/a.mdx": "A\n",
            "docs/nested/b.mdx": "B\n",
            "docs/notes.md": "not mdx\n",
        }
    )

    paths = gather_paths(["docs/**/*.mdx", "docs/*.md"], environ={})

    assert paths == ["docs/a.mdx", "docs/nested/b.mdx"]


def test_patterns_take_precedence_over_changed_files(docs_builder: DocsBuilder) -> None:
    docs_builder.write({"docs/a.mdx": "A\n"})

    paths = gather_paths(["docs/a.mdx"], environ={"CHANGED_FILES": "docs/other.mdx\n"})

    assert paths == ["docs/a.mdx"]


def test_changed_files_variable_is_used_without_patterns() -> None:
    environ = {"CHANGED_FILES": "docs/a.mdx\n\nREADME.md\ndocs/b.mdx\ndocs/a.mdx\n"}

    paths = gather_paths([], environ=environ)

    assert paths == ["docs/a.mdx", "docs/b.mdx"]


def test_changed_files_variable_name_is_configurable() -> None:
    config = InputConfig(changed_files_env="PR_FILES")

    paths = gather_paths([], config, environ={"PR_FILES": "docs/a.mdx"})

    assert paths == ["docs/a.mdx"]


def test_no_patterns_and_no_changed_files_yield_nothing() -> None:
    assert gather_paths([], environ={}) == []
    assert gather_paths([], environ={"CHANGED_FILES": ""}) == []


def test_ignore_patterns_drop_private_pages() -> None:
    paths = filter_paths(
        ["pages/_app.mdx", "pages/intro.mdx", "site/pages/_document.mdx"],
        InputConfig(),
    )

    assert paths == ["pages/intro.mdx"]


def test_directory_ignore_patterns() -> None:
    config = InputConfig(ignore=["drafts/"])

    paths = filter_paths(["drafts/a.mdx", "docs/drafts/b.mdx", "docs/c.mdx"], config)

    assert paths == ["docs/c.mdx"]


def test_parse_changed_files_strips_whitespace() -> None:
    assert parse_changed_files("  docs/a.mdx  \r\n\n docs/b.mdx") == ["docs/a.mdx", "docs/b.mdx"]
