"""Domain layer - core business logic."""

from .models import BatchResult, Credential, Document, RawFile, SkippedFile, SkipReason

__all__ = [
    "BatchResult",
    "Credential",
    "Document",
    "RawFile",
    "SkipReason",
    "SkippedFile",
]
