"""Resolves the set of documents a batch run should process."""

from __future__ import annotations

import glob
import os
from fnmatch import fnmatch
from typing import Iterable, List, Mapping, Optional, Sequence

from .config import InputConfig
from .errors import InputError
from .logging import get_logger

_LOGGER = get_logger("inputs")


def gather_paths(
    patterns: Sequence[str],
    config: InputConfig | None = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> List[str]:
    """Return document paths from glob ``patterns`` or the changed-files variable.

    Patterns win when given; otherwise the newline-separated list in the
    configured environment variable is used. Only paths with the document
    extension that do not match an ignore pattern are kept, in first-seen order.
    """
    config = config or InputConfig()
    env = os.environ if environ is None else environ

    if patterns:
        candidates = list(_expand(patterns))
        _LOGGER.debug("Expanded %d pattern(s) to %d path(s)", len(patterns), len(candidates))
    else:
        candidates = parse_changed_files(env.get(config.changed_files_env, ""))
        _LOGGER.debug(
            "Read %d path(s) from %s", len(candidates), config.changed_files_env
        )

    return filter_paths(candidates, config)


def parse_changed_files(value: str) -> List[str]:
    """Split a newline-separated changed-file list, dropping blank entries."""
    return [line.strip() for line in value.splitlines() if line.strip()]


def filter_paths(paths: Iterable[str], config: InputConfig) -> List[str]:
    """Keep document paths that are not ignored, de-duplicated in order."""
    kept: List[str] = []
    seen = set()
    for path in paths:
        normalized = path.replace("\\", "/")
        if not normalized.endswith(config.extension):
            continue
        if any(_pattern_matches(normalized, pattern) for pattern in config.ignore):
            _LOGGER.debug("Ignoring %s", path)
            continue
        if normalized in seen:
            continue
        seen.add(normalized)
        kept.append(path)
    return kept


def _expand(patterns: Sequence[str]) -> Iterable[str]:
    for pattern in patterns:
        try:
            matches = sorted(glob.glob(pattern, recursive=True))
        except (OSError, ValueError) as exc:
            raise InputError(f"Unable to expand pattern '{pattern}': {exc}") from exc
        if not matches:
            _LOGGER.debug("Pattern matched nothing: %s", pattern)
        yield from matches


def _pattern_matches(path: str, pattern: str) -> bool:
    if pattern.endswith("/"):
        return path.startswith(pattern) or f"/{pattern}" in f"/{path}"
    if pattern.startswith("**/"):
        return fnmatch(path, pattern) or fnmatch(path, pattern[3:])
    if "/" in pattern:
        return fnmatch(path, pattern) or fnmatch(path, f"*/{pattern}")
    return fnmatch(path.rsplit("/", 1)[-1], pattern)


__all__ = ["filter_paths", "gather_paths", "parse_changed_files"]
