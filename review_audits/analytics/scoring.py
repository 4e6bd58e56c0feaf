"""
Review quality scoring.

quality = score(thoroughness) + score(understanding). The score table is
superlinear so that one High outweighs two Mediums. Reviews with equal
thoroughness and understanding score 0, 2, 6 or 14; mixed levels land in
between (e.g. Medium + High = 10).
"""

from __future__ import annotations

from dataclasses import dataclass

from review_audits.models.levels import Level, Rating, TrustLevel
from review_audits.models.review import Review, ReviewBody

LEVEL_SCORE = {
    Level.NONE: 0,
    Level.LOW: 1,
    Level.MEDIUM: 3,
    Level.HIGH: 7,
}


def score(level: Level) -> int:
    return LEVEL_SCORE[level]


def quality(body: ReviewBody) -> int:
    """Quality score of a review body."""
    return score(body.thoroughness) + score(body.understanding)


@dataclass(frozen=True)
class ScoredReview:
    """
    A review annotated with its reviewer's trust and its quality score.

    digest is the signed proof's content digest, attached once the review is
    an export candidate.
    """

    review: Review
    body: ReviewBody
    trust: TrustLevel
    quality: int
    digest: bytes | None = None

    @property
    def is_violation(self) -> bool:
        return self.body.rating == Rating.NEGATIVE


def annotate(review: Review, trust: TrustLevel) -> ScoredReview | None:
    """Attach trust and quality; None for proofs without a review body."""
    if review.body is None:
        return None
    return ScoredReview(
        review=review,
        body=review.body,
        trust=trust,
        quality=quality(review.body),
    )
