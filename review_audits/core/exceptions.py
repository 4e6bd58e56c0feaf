"""
Application-level exceptions.

Per-review data gaps (missing digest, missing review body, sub-threshold
quality) are not errors: the pipeline logs and skips them. Exceptions here are
for malformed input records, bad configuration and serialization failures.
"""

from __future__ import annotations


class AuditExportError(Exception):
    """Base class for all review_audits errors."""


class InvalidReviewError(AuditExportError):
    """A review record could not be parsed into a Review."""


class ConfigurationError(AuditExportError):
    """An environment setting has an unusable value."""


class AuditSerializationError(AuditExportError):
    """Writing the audits document failed. Fatal for the run."""
