"""Batch pipeline that validates and repairs document metadata."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path, PurePosixPath
from typing import Callable, List, Optional, Sequence

from .analyzers import ContentAnalyzer
from .analyzers.utils import truncate
from .config import MdxMetaConfig
from .documents import load_document, write_document
from .logging import get_logger
from .models import DocumentOutcome, ProcessingStats, RunResult, ValidationVerdict
from .parents import ParentMetadataResolver
from .validators import MetadataValidator

STATUS_SUCCESSFUL = "successful"
STATUS_NEEDS_REVIEW = "needs_review"
STATUS_FAILED = "failed"


class BatchRunner:
    """Runs analyze, resolve, and reconcile over documents one at a time.

    Human-readable narration goes through ``echo``; diagnostics go to the
    ``mdxmeta.runner`` logger. Documents are processed strictly in input order
    and a fault in one document never stops the batch.
    """

    def __init__(
        self,
        config: MdxMetaConfig,
        *,
        analyzer: ContentAnalyzer | None = None,
        resolver: ParentMetadataResolver | None = None,
        validator: MetadataValidator | None = None,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.config = config
        self.analyzer = analyzer or ContentAnalyzer(config.vocabulary, config.analyzer)
        self.resolver = resolver or ParentMetadataResolver(config.inputs.parent_names)
        self.validator = validator or MetadataValidator(config.vocabulary)
        self.echo = echo
        self.logger = get_logger("runner")

    def run(
        self,
        paths: Sequence[str],
        *,
        dry_run: bool = False,
        verbose: bool = False,
        report_path: Path | None = None,
    ) -> RunResult:
        stats = ProcessingStats(total=len(paths))
        result = RunResult(stats=stats)
        self.echo(f"Found {len(paths)} valid files to check\n")

        for path in paths:
            try:
                outcome = self._process(path, dry_run=dry_run, verbose=verbose)
            except Exception as exc:
                self.logger.debug("Unexpected failure for %s", path, exc_info=True)
                outcome = self._failed(path, str(exc) or exc.__class__.__name__)

            if outcome.status == STATUS_SUCCESSFUL:
                stats.successful += 1
            elif outcome.status == STATUS_NEEDS_REVIEW:
                stats.needs_review += 1
            else:
                stats.failed += 1
            result.outcomes.append(outcome)

        self.echo(f"{stats.total} files processed")
        if stats.needs_review > 0:
            self.echo(f"⚠️  {stats.needs_review} files need review")
        if stats.failed > 0:
            self.echo(f"⚠️  {stats.failed} files could not be processed")

        target = report_path or self.config.report.path
        if target is not None:
            self._write_report(target, result, dry_run=dry_run)
        return result

    def _process(self, path: str, *, dry_run: bool, verbose: bool) -> DocumentOutcome:
        loaded = load_document(path, self.config.vocabulary)
        if loaded.document is None:
            return self._failed(path, loaded.error or "unreadable document")
        document = loaded.document
        if document.malformed:
            self.logger.warning("%s: front matter could not be parsed; treating as empty", path)

        parent = self.resolver.find_parent_metadata(path)
        analysis = self.analyzer.analyze(
            document.body,
            path,
            verbose,
            existing=document.front_matter,
            parent=parent,
        )
        verdict = self.validator.reconcile(document.front_matter, analysis, path=path)

        self.echo(f"File: {path}")
        if verbose and analysis.diagnostics:
            self.echo(f"   diagnostics: {json.dumps(analysis.diagnostics, sort_keys=True)}")

        if not verdict.is_valid:
            self._report_review(path, verdict)
            return DocumentOutcome(
                path=path,
                status=STATUS_NEEDS_REVIEW,
                content_type=analysis.content_type,
                categories=list(analysis.categories or []),
                uncertain_categories=analysis.uncertain_categories,
                errors=list(verdict.errors),
            )

        written = False
        if dry_run:
            self.echo("   ✓ Validation passed (dry run)\n")
        else:
            written = write_document(document, analysis)
            if written:
                self.echo("   ✓ Updates applied\n")
            else:
                self.echo("   ✓ Metadata up to date\n")
        return DocumentOutcome(
            path=path,
            status=STATUS_SUCCESSFUL,
            content_type=analysis.content_type,
            categories=list(analysis.categories or []),
            uncertain_categories=analysis.uncertain_categories,
            written=written,
        )

    def _report_review(self, path: str, verdict: ValidationVerdict) -> None:
        analysis = verdict.metadata
        vocabulary = self.config.vocabulary
        suggested_categories = self.suggested_categories(verdict)
        topic = PurePosixPath(path.replace("\\", "/")).stem
        content_type = analysis.content_type or vocabulary.default_content_type

        self.echo(f"⚠️  Missing: {', '.join(verdict.errors)}")
        if analysis.suggestions is not None and analysis.suggestions.inherited_from:
            self.echo(f"   Parent categories from {analysis.suggestions.inherited_from}")
        self.echo(
            f"Suggested: content_type: {content_type}, topic: {topic}, "
            f"personas: [{vocabulary.default_persona}], "
            f"categories: {json.dumps(suggested_categories)}\n"
        )

    def suggested_categories(self, verdict: ValidationVerdict) -> List[str]:
        """Categories offered for review: analyzer suggestions, else the default."""
        suggestions = verdict.metadata.suggestions
        if suggestions is not None and suggestions.categories:
            return list(suggestions.categories)
        return [self.config.vocabulary.default_category]

    def _failed(self, path: str, error: str) -> DocumentOutcome:
        self.echo(f"⚠️  Error processing {path}: {truncate(error, 200)}\n")
        return DocumentOutcome(path=path, status=STATUS_FAILED, errors=[error])

    def _write_report(self, report_path: Path, result: RunResult, *, dry_run: bool) -> None:
        payload = {
            "dry_run": dry_run,
            "stats": {
                "total": result.stats.total,
                "successful": result.stats.successful,
                "needs_review": result.stats.needs_review,
                "failed": result.stats.failed,
            },
            "documents": [
                {
                    "path": outcome.path,
                    "status": outcome.status,
                    "content_type": outcome.content_type,
                    "categories": outcome.categories,
                    "uncertain_categories": outcome.uncertain_categories,
                    "errors": outcome.errors,
                    "written": outcome.written,
                }
                for outcome in result.outcomes
            ],
            "generated_at": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
        }
        try:
            report_path.parent.mkdir(parents=True, exist_ok=True)
            report_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
        except OSError:
            self.logger.warning("Unable to write run report to %s", report_path, exc_info=True)


def run_batch(
    paths: Sequence[str],
    config: MdxMetaConfig,
    *,
    dry_run: bool = False,
    verbose: bool = False,
    echo: Callable[[str], None] = print,
    report_path: Optional[Path] = None,
) -> ProcessingStats:
    """Process ``paths`` with default collaborators and return the counters."""
    runner = BatchRunner(config, echo=echo)
    return runner.run(paths, dry_run=dry_run, verbose=verbose, report_path=report_path).stats


__all__ = [
    "BatchRunner",
    "STATUS_FAILED",
    "STATUS_NEEDS_REVIEW",
    "STATUS_SUCCESSFUL",
    "run_batch",
]
