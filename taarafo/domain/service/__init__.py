"""Domain services."""

from .base import Service
from .post_error_classifier import (
    Severity,
    classify_service_error,
    classify_storage_error,
)
from .post_service import PostService

__all__ = [
    "PostService",
    "Service",
    "Severity",
    "classify_service_error",
    "classify_storage_error",
]
