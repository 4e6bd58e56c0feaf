"""
Data models: qualitative levels, input reviews and output audit records.
"""

from review_audits.models.audit import AuditEntry, AuditsFile, CriteriaEntry
from review_audits.models.levels import (
    LEVEL_RANK,
    RATING_RANK,
    TRUST_RANK,
    Level,
    Rating,
    TrustLevel,
    level_rank,
    max_level,
    rating_rank,
    trust_rank,
)
from review_audits.models.review import (
    SOURCE_CRATES_IO,
    Advisory,
    Issue,
    PackageInfo,
    Review,
    ReviewBody,
    parse_version,
    review_from_dict,
)

__all__ = [
    "AuditEntry",
    "AuditsFile",
    "CriteriaEntry",
    "LEVEL_RANK",
    "RATING_RANK",
    "TRUST_RANK",
    "Level",
    "Rating",
    "TrustLevel",
    "level_rank",
    "max_level",
    "rating_rank",
    "trust_rank",
    "SOURCE_CRATES_IO",
    "Advisory",
    "Issue",
    "PackageInfo",
    "Review",
    "ReviewBody",
    "parse_version",
    "review_from_dict",
]
