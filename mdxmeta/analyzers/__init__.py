"""Content analyzers that infer document metadata."""

from .content import ContentAnalyzer

__all__ = ["ContentAnalyzer"]
