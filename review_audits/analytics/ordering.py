"""
Grouping and ordering of reviews within a package.

Reviews of a package are ordered newest version first, then most trusted
reviewer, then highest quality, then most recent submission. The order drives
dominance deduplication and is the order entries appear in the output.
"""

from __future__ import annotations

from typing import Iterable

from review_audits.analytics.scoring import ScoredReview
from review_audits.models.levels import trust_rank


def sort_key(scored: ScoredReview) -> tuple:
    return (
        scored.review.version,
        trust_rank(scored.trust),
        scored.quality,
        scored.review.date,
    )


def order_reviews(reviews: Iterable[ScoredReview]) -> list[ScoredReview]:
    """Descending by sort_key. Stable: fully tied reviews keep input order."""
    return sorted(reviews, key=sort_key, reverse=True)


def group_by_package(reviews: Iterable[ScoredReview]) -> dict[str, list[ScoredReview]]:
    """Group by package name, in order of first appearance."""
    groups: dict[str, list[ScoredReview]] = {}
    for scored in reviews:
        groups.setdefault(scored.review.name, []).append(scored)
    return groups
