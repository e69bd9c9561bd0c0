"""Tests for front-matter parsing and rendering."""

from __future__ import annotations

import datetime

import frontmatter

from mdxmeta.config import VocabularyConfig
from mdxmeta.documents import (
    changed_fields,
    load_document,
    needs_update,
    parse,
    render_document,
    write_document,
)
from mdxmeta.models import MetadataResult
from tests._fixtures.docs_builder import DocsBuilder


def _metadata(**overrides: object) -> MetadataResult:
    values = {
        "topic": "Peer Discovery",
        "content_type": "guide",
        "categories": ["networking"],
        "personas": ["developer"],
    }
    values.update(overrides)
    return MetadataResult(**values)  # type: ignore[arg-type]


def test_parse_splits_header_and_body() -> None:
    parsed = parse("---\ntopic: Intro\ncategories: [storage]\n---\n# Intro\n\nBody text.\n")

    assert parsed.malformed is False
    assert parsed.data == {"topic": "Intro", "categories": ["storage"]}
    assert parsed.content.startswith("# Intro")


def test_parse_without_header_returns_empty_mapping() -> None:
    parsed = parse("# Plain document\n")

    assert parsed.data == {}
    assert parsed.malformed is False
    assert "Plain document" in parsed.content


def test_parse_tolerates_malformed_header() -> None:
    raw = "---\ntopic: [unclosed\n---\nBody\n"

    parsed = parse(raw)

    assert parsed.malformed is True
    assert parsed.data == {}
    assert parsed.content == raw


def test_load_document_reports_missing_file(docs_builder: DocsBuilder) -> None:
    result = load_document("docs/missing.mdx", VocabularyConfig())

    assert result.ok is False
    assert result.document is None
    assert result.error


def test_load_document_rejects_directories(docs_builder: DocsBuilder) -> None:
    docs_builder.path("docs/folder.mdx").mkdir(parents=True)

    result = load_document("docs/folder.mdx", VocabularyConfig())

    assert result.ok is False
    assert "not a file" in (result.error or "")


def test_load_document_builds_validated_front_matter(docs_builder: DocsBuilder) -> None:
    docs_builder.write(
        {
            "docs/a.mdx": """
            ---
            topic: Storage layout
            content_type: Reference
            categories: [storage, made-up]
            personas: [nobody]
            sidebar_position: 2
            ---
            Body
            """
        }
    )

    result = load_document("docs/a.mdx", VocabularyConfig())

    assert result.document is not None
    front_matter = result.document.front_matter
    assert front_matter.topic == "Storage layout"
    assert front_matter.content_type == "reference"
    assert front_matter.categories == ["storage"]
    assert front_matter.personas is None
    assert front_matter.extra == {"sidebar_position": 2}
    assert front_matter.rejected == {"categories": ["made-up"], "personas": ["nobody"]}


def test_empty_categories_list_is_kept(docs_builder: DocsBuilder) -> None:
    docs_builder.write({"docs/a.mdx": "---\ncategories: []\n---\nBody\n"})

    result = load_document("docs/a.mdx", VocabularyConfig())

    assert result.document is not None
    assert result.document.front_matter.categories == []


def test_render_document_preserves_unmanaged_fields(docs_builder: DocsBuilder) -> None:
    docs_builder.write(
        {
            "docs/a.mdx": """
            ---
            title: Peer discovery
            sidebar_position: 3
            ---
            # Peer discovery

            Body text.
            """
        }
    )
    document = load_document("docs/a.mdx", VocabularyConfig()).document
    assert document is not None

    rendered = render_document(document, _metadata())
    post = frontmatter.loads(rendered)

    assert list(post.metadata)[:2] == ["title", "sidebar_position"]
    assert post.metadata["topic"] == "Peer Discovery"
    assert post.metadata["categories"] == ["networking"]
    assert post.metadata["personas"] == ["developer"]
    assert post.metadata["content_type"] == "guide"
    assert "Body text." in post.content
    assert rendered.endswith("\n")


def test_write_document_is_skipped_when_already_current(docs_builder: DocsBuilder) -> None:
    docs_builder.write(
        {
            "docs/a.mdx": """
            ---
            topic: Peer Discovery
            content_type: guide
            categories: [networking]
            personas: [developer]
            ---
            Body
            """
        }
    )
    before = docs_builder.read_bytes("docs/a.mdx")
    document = load_document("docs/a.mdx", VocabularyConfig()).document
    assert document is not None

    assert needs_update(document, _metadata()) is False
    assert write_document(document, _metadata()) is False
    assert docs_builder.read_bytes("docs/a.mdx") == before


def test_write_document_never_rewrites_malformed_headers(docs_builder: DocsBuilder) -> None:
    docs_builder.write({"docs/a.mdx": "---\ntopic: [unclosed\n---\nBody\n"})
    before = docs_builder.read_bytes("docs/a.mdx")
    document = load_document("docs/a.mdx", VocabularyConfig()).document
    assert document is not None and document.malformed

    assert write_document(document, _metadata()) is False
    assert docs_builder.read_bytes("docs/a.mdx") == before


def test_date_topic_is_read_as_text(docs_builder: DocsBuilder) -> None:
    docs_builder.write({"docs/a.mdx": "---\ntopic: 2024-05-01\n---\n# Peer Discovery\n"})

    document = load_document("docs/a.mdx", VocabularyConfig()).document

    assert document is not None
    assert document.data["topic"] == datetime.date(2024, 5, 1)
    assert document.front_matter.topic == "2024-05-01"


def test_rewrite_keeps_unchanged_typed_topic(docs_builder: DocsBuilder) -> None:
    docs_builder.write({"docs/a.mdx": "---\ntopic: 2024-05-01\n---\nBody\n"})
    document = load_document("docs/a.mdx", VocabularyConfig()).document
    assert document is not None
    metadata = _metadata(topic="2024-05-01")

    assert list(changed_fields(document, metadata)) == ["content_type", "categories", "personas"]
    assert write_document(document, metadata) is True

    post = frontmatter.loads(docs_builder.read("docs/a.mdx"))
    assert post.metadata["topic"] == datetime.date(2024, 5, 1)
    assert post.metadata["categories"] == ["networking"]
