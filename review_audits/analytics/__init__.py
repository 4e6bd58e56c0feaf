"""
Review export analytics.

Turns trusted reviews into cargo-vet audit entries.
Modules: scoring, trust_filter, ordering, dedup, criteria, exclusions,
provenance, taxonomy, pipeline.
"""

from review_audits.analytics.criteria import classify
from review_audits.analytics.dedup import retain_undominated
from review_audits.analytics.ordering import order_reviews
from review_audits.analytics.pipeline import AuditExporter, convert_reviews
from review_audits.analytics.scoring import ScoredReview, quality, score
from review_audits.analytics.taxonomy import standard_criteria

__all__ = [
    "classify",
    "retain_undominated",
    "order_reviews",
    "AuditExporter",
    "convert_reviews",
    "ScoredReview",
    "quality",
    "score",
    "standard_criteria",
]
