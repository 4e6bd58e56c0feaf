"""
Trust admission gate.

The only place reviews enter the pipeline: reviewers below the configured
minimum trust, and proofs without a review body, are dropped silently (a debug
log, never an error) before any scoring runs.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from review_audits.analytics.scoring import ScoredReview, annotate
from review_audits.audits_logging import get_logger
from review_audits.models.levels import TrustLevel, trust_rank
from review_audits.models.review import Review
from review_audits.sources.ports import TrustOracle

logger = get_logger(__name__)


def is_trusted(trust: TrustLevel, min_trust_level: TrustLevel) -> bool:
    return trust_rank(trust) >= trust_rank(min_trust_level)


def admit_reviews(
    reviews: Iterable[Review],
    oracle: TrustOracle,
    min_trust_level: TrustLevel,
) -> Iterator[ScoredReview]:
    """Yield scored reviews whose reviewer meets min_trust_level."""
    for review in reviews:
        if review.body is None:
            logger.debug(
                "review_skipped",
                package=review.name,
                reviewer_id=review.reviewer_id,
                reason="no_review_body",
            )
            continue
        trust = oracle.get_effective_trust_level(review.reviewer_id)
        if not is_trusted(trust, min_trust_level):
            logger.debug(
                "review_skipped",
                package=review.name,
                reviewer_id=review.reviewer_id,
                reason="below_min_trust",
                trust=trust.value,
            )
            continue
        scored = annotate(review, trust)
        if scored is not None:
            yield scored
