"""
Violation exclusion policy.

Violations from reviewers whose verified proofs URL contains one of the
configured substrings are not exported. The list ships as
policy/excluded_reviewers.json and can be replaced via
AUDIT_EXCLUDED_REVIEWERS_PATH. Endorsements are not affected.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from review_audits.audits_logging import get_logger

logger = get_logger(__name__)


def load_excluded_reviewers(path: Path) -> frozenset[str]:
    """Load URL substrings from a JSON array. Returns empty set when missing or unreadable."""
    if not path.is_file():
        logger.warning("excluded_reviewers_missing", path=str(path))
        return frozenset()
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("excluded_reviewers_load_failed", path=str(path), error=str(e))
        return frozenset()
    if not isinstance(data, list):
        logger.warning("excluded_reviewers_not_a_list", path=str(path))
        return frozenset()
    return frozenset(str(p).strip() for p in data if p and str(p).strip())


def is_excluded_violation_reviewer(verified_url: str | None, patterns: Iterable[str]) -> bool:
    """True if the reviewer's verified URL matches any exclusion substring."""
    if not verified_url:
        return False
    return any(p in verified_url for p in patterns)
