"""CLI entrypoint for mdxmeta."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_config
from .errors import MdxMetaError
from .inputs import gather_paths
from .logging import configure_logging, get_logger
from .runner import BatchRunner


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdxmeta",
        description="Validate and repair front-matter metadata on MDX documents.",
    )
    parser.add_argument(
        "patterns",
        nargs="*",
        help="Glob patterns selecting documents. Defaults to the CHANGED_FILES list.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Analyze and report without writing any file changes.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show analyzer diagnostics and debug logging.",
    )
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .mdxmeta.yml or the directory containing it.",
    )
    parser.add_argument(
        "--report",
        default=None,
        help="Write a JSON summary of the run to this path.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write DEBUG-level log records to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for mdxmeta."""
    parser = _build_parser()
    args, unknown = parser.parse_known_args(argv)

    try:
        configure_logging(
            verbose=bool(args.verbose),
            log_file=Path(args.log_file) if args.log_file else None,
        )
    except MdxMetaError as exc:
        parser.exit(1, f"mdxmeta failed: {exc}\n")
    logger = get_logger("cli")
    if unknown:
        logger.debug("Ignoring unrecognized arguments: %s", " ".join(unknown))
    # Unknown options that look like paths are still treated as patterns.
    patterns = list(args.patterns) + [arg for arg in unknown if not arg.startswith("-")]

    try:
        config = load_config(Path(args.config))
        paths = gather_paths(patterns, config.inputs)
    except MdxMetaError as exc:
        parser.exit(1, f"mdxmeta failed: {exc}\n")

    if not paths:
        print(f"✓ No {config.inputs.extension.lstrip('.').upper()} files to check")
        return

    runner = BatchRunner(config)
    try:
        runner.run(
            paths,
            dry_run=bool(args.dry_run),
            verbose=bool(args.verbose),
            report_path=Path(args.report) if args.report else None,
        )
    except Exception as exc:  # pragma: no cover - top-level guard
        logger.debug("Batch run aborted", exc_info=True)
        parser.exit(1, f"mdxmeta failed: {exc}\nRun with --verbose for more details.\n")


if __name__ == "__main__":
    main(sys.argv[1:])
