"""Tests for mdxmeta logger setup."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from mdxmeta.cli import main
from mdxmeta.errors import ConfigError
from mdxmeta.logging import configure_logging, get_logger
from tests._fixtures.docs_builder import DocsBuilder


@pytest.fixture(autouse=True)
def _reset_handlers() -> Iterator[None]:
    yield
    logger = logging.getLogger("mdxmeta")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_get_logger_uses_package_hierarchy() -> None:
    assert get_logger().name == "mdxmeta"
    assert get_logger("runner").name == "mdxmeta.runner"


def test_console_level_follows_verbose() -> None:
    quiet = configure_logging()
    assert quiet.level == logging.INFO
    assert len(quiet.handlers) == 1

    loud = configure_logging(verbose=True)
    assert loud.level == logging.DEBUG
    assert len(loud.handlers) == 1


def test_log_file_records_debug_even_when_quiet(docs_builder: DocsBuilder) -> None:
    log_file = docs_builder.path("logs/run.log")

    logger = configure_logging(log_file=log_file)
    get_logger("analyzer").debug("category scores for %s", "docs/a.mdx")

    console, sink = logger.handlers
    assert console.level == logging.INFO
    assert sink.level == logging.DEBUG
    text = log_file.read_text(encoding="utf-8")
    assert "DEBUG mdxmeta.analyzer: category scores for docs/a.mdx" in text


def test_unusable_log_file_is_a_config_error(docs_builder: DocsBuilder) -> None:
    docs_builder.write({"logs": "not a directory"})

    with pytest.raises(ConfigError):
        configure_logging(log_file=docs_builder.path("logs/run.log"))


def test_main_writes_log_file(docs_builder: DocsBuilder) -> None:
    docs_builder.write({"docs/peers.mdx": "# Peers\n\nEach peer joins the network.\n"})

    main(["docs/*.mdx", "--dry-run", "--log-file", "run.log"])

    text = docs_builder.read("run.log")
    assert "mdxmeta.inputs" in text
    assert "Expanded 1 pattern(s)" in text


def test_main_exits_non_zero_when_log_file_cannot_be_opened(
    docs_builder: DocsBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    docs_builder.write({"logs": "not a directory"})

    with pytest.raises(SystemExit) as excinfo:
        main(["docs/*.mdx", "--log-file", "logs/run.log"])

    assert excinfo.value.code == 1
    assert "Unable to open log file" in capsys.readouterr().err
