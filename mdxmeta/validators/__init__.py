"""Validation package for document metadata."""

from .metadata import INVALID_VALUES, MISSING_FIELD, MetadataValidator, reconcile

__all__ = [
    "INVALID_VALUES",
    "MISSING_FIELD",
    "MetadataValidator",
    "reconcile",
]
