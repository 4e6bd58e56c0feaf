"""
Structured logging for Review Audits.

JSON logs with timestamp, event_type, package and reviewer_id.
Use get_logger() in all modules for aggregation-friendly output.
"""

from review_audits.audits_logging.logger import bind_package, get_logger

__all__ = ["bind_package", "get_logger"]
