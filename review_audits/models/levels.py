"""
Qualitative levels used by reviews and the trust oracle.

Every enum here is a closed set of string values. Semantic order lives in the
explicit rank tables below; never compare members by declaration order.
"""

from __future__ import annotations

from enum import Enum


class Level(str, Enum):
    """Thoroughness, understanding and issue severity."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Rating(str, Enum):
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    POSITIVE = "positive"
    STRONG = "strong"


class TrustLevel(str, Enum):
    """Effective trust in a reviewer, as computed by the external trust oracle."""

    DISTRUST = "distrust"
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


LEVEL_RANK = {
    Level.NONE: 0,
    Level.LOW: 1,
    Level.MEDIUM: 2,
    Level.HIGH: 3,
}

RATING_RANK = {
    Rating.NEGATIVE: 0,
    Rating.NEUTRAL: 1,
    Rating.POSITIVE: 2,
    Rating.STRONG: 3,
}

TRUST_RANK = {
    TrustLevel.DISTRUST: 0,
    TrustLevel.NONE: 1,
    TrustLevel.LOW: 2,
    TrustLevel.MEDIUM: 3,
    TrustLevel.HIGH: 4,
}


def level_rank(level: Level) -> int:
    return LEVEL_RANK[level]


def rating_rank(rating: Rating) -> int:
    return RATING_RANK[rating]


def trust_rank(trust: TrustLevel) -> int:
    return TRUST_RANK[trust]


def max_level(levels, default: Level) -> Level:
    """Highest level by rank; default when levels is empty."""
    return max(levels, key=level_rank, default=default)
