"""
Review and trust sources: capability protocols plus in-memory adapters.
"""

from review_audits.sources.memory import (
    InMemoryReviewRepository,
    StaticTrustOracle,
    TrustSnapshot,
    review_key,
)
from review_audits.sources.ports import ReviewRepository, TrustOracle

__all__ = [
    "InMemoryReviewRepository",
    "StaticTrustOracle",
    "TrustSnapshot",
    "review_key",
    "ReviewRepository",
    "TrustOracle",
]
