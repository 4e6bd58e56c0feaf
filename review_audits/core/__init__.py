"""
Core utilities: exceptions and cross-cutting concerns shared by the
models, analytics pipeline and exporters.
"""

from review_audits.core.exceptions import (
    AuditExportError,
    AuditSerializationError,
    ConfigurationError,
    InvalidReviewError,
)

__all__ = [
    "AuditExportError",
    "AuditSerializationError",
    "ConfigurationError",
    "InvalidReviewError",
]
