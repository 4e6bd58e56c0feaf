"""
Criteria classification: which cargo-vet criteria a review earns.

Negative reviews become violations whose criteria follow the worst reported
severity. All other reviews are endorsements: they must first clear a
minimum quality that depends on reviewer trust and rating (less trusted
reviewers and weaker ratings need deeper reviews), then earn rating, level,
trust and safe-to-run / safe-to-deploy tags.
"""

from __future__ import annotations

from review_audits.analytics.scoring import ScoredReview, score
from review_audits.models.levels import (
    Level,
    Rating,
    TrustLevel,
    level_rank,
    max_level,
    trust_rank,
)

CRITERION_SAFE_TO_RUN = "safe-to-run"
CRITERION_SAFE_TO_DEPLOY = "safe-to-deploy"
CRITERION_UNMAINTAINED = "unmaintained"

VIOLATION_CRITERIA = {
    Level.NONE: ["level-none"],
    Level.LOW: ["level-low"],
    Level.MEDIUM: [CRITERION_SAFE_TO_DEPLOY],
    Level.HIGH: [CRITERION_SAFE_TO_RUN, CRITERION_SAFE_TO_DEPLOY],
}

# Severity assumed for a negative review with no itemized issues
DEFAULT_VIOLATION_SEVERITY = Level.MEDIUM

# Minimum quality contributed by reviewer trust; None = never exported
TRUST_MIN_QUALITY = {
    TrustLevel.DISTRUST: None,
    TrustLevel.NONE: None,
    TrustLevel.LOW: score(Level.HIGH),
    TrustLevel.MEDIUM: score(Level.MEDIUM),
    TrustLevel.HIGH: score(Level.LOW),
}

RATING_MIN_QUALITY = {
    Rating.NEGATIVE: score(Level.NONE),
    Rating.NEUTRAL: score(Level.MEDIUM),
    Rating.POSITIVE: score(Level.LOW),
    Rating.STRONG: score(Level.NONE),
}

# Quality needed for safe-to-run, by rating
SAFE_TO_RUN_MIN_QUALITY = {
    Rating.NEUTRAL: score(Level.MEDIUM) + score(Level.MEDIUM),
    Rating.POSITIVE: score(Level.MEDIUM) + score(Level.LOW),
    Rating.STRONG: score(Level.LOW) + score(Level.LOW),
}

# Thoroughness needed for safe-to-deploy, by rating
SAFE_TO_DEPLOY_MIN_THOROUGHNESS = {
    Rating.NEUTRAL: Level.HIGH,
    Rating.POSITIVE: Level.MEDIUM,
    Rating.STRONG: Level.LOW,
}

RATING_CRITERION = {
    Rating.NEGATIVE: "negative",
    Rating.NEUTRAL: "neutral",
    Rating.POSITIVE: "positive",
    Rating.STRONG: "strong",
}

TRUST_CRITERION = {
    TrustLevel.LOW: "trust-low",
    TrustLevel.MEDIUM: "trust-medium",
    TrustLevel.HIGH: "trust-high",
}

# (min quality, criterion), checked highest first
LEVEL_CRITERIA = (
    (score(Level.HIGH) * 2, "level-high"),
    (score(Level.MEDIUM) * 2, "level-medium"),
    (score(Level.LOW) * 2, "level-low"),
)
LEVEL_CRITERION_FLOOR = "level-none"


def violation_severity(scored: ScoredReview) -> Level:
    """Worst severity across issues and advisories."""
    review = scored.review
    severities = [i.severity for i in review.issues] + [a.severity for a in review.advisories]
    return max_level(severities, default=DEFAULT_VIOLATION_SEVERITY)


def violation_criteria(scored: ScoredReview) -> list[str]:
    return list(VIOLATION_CRITERIA[violation_severity(scored)])


def min_quality(trust: TrustLevel, rating: Rating) -> int | None:
    """Minimum quality for an endorsement to be exported; None if never."""
    trust_term = TRUST_MIN_QUALITY[trust]
    if trust_term is None:
        return None
    return trust_term + RATING_MIN_QUALITY[rating]


def meets_threshold(scored: ScoredReview) -> bool:
    threshold = min_quality(scored.trust, scored.body.rating)
    return threshold is not None and scored.quality >= threshold


def is_safe_to_run(scored: ScoredReview) -> bool:
    if trust_rank(scored.trust) < trust_rank(TrustLevel.MEDIUM):
        return False
    floor = SAFE_TO_RUN_MIN_QUALITY.get(scored.body.rating)
    return floor is not None and scored.quality >= floor


def is_safe_to_deploy(scored: ScoredReview) -> bool:
    body = scored.body
    if not is_safe_to_run(scored):
        return False
    if level_rank(body.understanding) < level_rank(Level.MEDIUM):
        return False
    floor = SAFE_TO_DEPLOY_MIN_THOROUGHNESS.get(body.rating)
    return floor is not None and level_rank(body.thoroughness) >= level_rank(floor)


def level_criterion(quality: int) -> str:
    for min_q, criterion in LEVEL_CRITERIA:
        if quality >= min_q:
            return criterion
    return LEVEL_CRITERION_FLOOR


def endorsement_criteria(scored: ScoredReview) -> list[str]:
    """
    Criteria for a non-negative review that already met its threshold.

    Order: rating, level, trust, then safe-to-deploy, safe-to-run and
    unmaintained when they apply.
    """
    criteria = [
        RATING_CRITERION[scored.body.rating],
        level_criterion(scored.quality),
        TRUST_CRITERION[scored.trust],
    ]
    if is_safe_to_deploy(scored):
        criteria.append(CRITERION_SAFE_TO_DEPLOY)
    if is_safe_to_run(scored):
        criteria.append(CRITERION_SAFE_TO_RUN)
    if scored.review.unmaintained:
        criteria.append(CRITERION_UNMAINTAINED)
    return criteria


def classify(scored: ScoredReview) -> list[str] | None:
    """Criteria for a review, or None when the review must not be exported."""
    if scored.is_violation:
        return violation_criteria(scored)
    if not meets_threshold(scored):
        return None
    return endorsement_criteria(scored)
