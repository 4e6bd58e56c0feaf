"""
Export settings.

Responsibilities:
- Collect configuration from environment variables and .env (see env.py).
- Expose one immutable ExportSettings object used by the pipeline for a run.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from review_audits.config import env
from review_audits.models.levels import TrustLevel
from review_audits.models.review import SOURCE_CRATES_IO


@dataclass(frozen=True)
class ExportSettings:
    """
    Settings for one export run.

    min_trust_level: Reviews from reviewers below this trust are not exported.
    include_git_revs: Annotate versions with @git:<rev> when reviewed at a git revision.
    concurrency: Worker threads for per-package groups; 1 runs inline.
    excluded_reviewers_path: JSON list of verified-URL substrings; violations
        from matching reviewers are not exported.
    excluded_reviewer_patterns: Explicit exclusion list; overrides the file when set.
    audit_page_url_template: Placeholder note for violations without notes.
    review_source: Package source whose reviews are exported.
    """

    min_trust_level: TrustLevel = env.DEFAULT_MIN_TRUST_LEVEL
    include_git_revs: bool = False
    concurrency: int = env.DEFAULT_EXPORT_CONCURRENCY
    excluded_reviewers_path: Path = env.DEFAULT_EXCLUDED_REVIEWERS_PATH
    excluded_reviewer_patterns: tuple[str, ...] | None = None
    audit_page_url_template: str = env.DEFAULT_AUDIT_PAGE_URL_TEMPLATE
    review_source: str = SOURCE_CRATES_IO


def get_settings() -> ExportSettings:
    """Return settings resolved from the current environment."""
    return ExportSettings(
        min_trust_level=env.get_min_trust_level(),
        include_git_revs=env.include_git_revs(),
        concurrency=env.get_export_concurrency(),
        excluded_reviewers_path=env.get_excluded_reviewers_path(),
        audit_page_url_template=env.get_audit_page_url_template(),
        review_source=env.get_review_source(),
    )
