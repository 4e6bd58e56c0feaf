"""
In-memory implementations of the review repository and trust oracle.

Used for tests and for callers that already materialized a review snapshot.
TrustSnapshot wraps any oracle so each reviewer's trust is resolved once per
export run.
"""

from __future__ import annotations

import threading
from typing import Iterable

from review_audits.models.levels import TrustLevel
from review_audits.models.review import Review
from review_audits.sources.ports import TrustOracle

ReviewKey = tuple[str, str, str, str]


def review_key(review: Review) -> ReviewKey:
    """Identity of a review proof: reviewer, source, package name, version."""
    return (review.reviewer_id, review.package.source, review.name, str(review.version))


class InMemoryReviewRepository:
    """Review repository backed by plain Python collections."""

    def __init__(
        self,
        reviews: Iterable[Review] = (),
        verified_urls: dict[str, str] | None = None,
        digests: dict[ReviewKey, bytes] | None = None,
    ) -> None:
        self._reviews = list(reviews)
        self._verified_urls = dict(verified_urls or {})
        self._digests = dict(digests or {})

    def add(self, review: Review, digest: bytes | None = None) -> None:
        self._reviews.append(review)
        if digest is not None:
            self._digests[review_key(review)] = digest

    def set_verified_url(self, reviewer_id: str, url: str) -> None:
        self._verified_urls[reviewer_id] = url

    def get_pkg_reviews_for_source(self, source: str) -> list[Review]:
        return [r for r in self._reviews if r.package.source == source]

    def lookup_verified_url(self, reviewer_id: str) -> str | None:
        return self._verified_urls.get(reviewer_id)

    def get_proof_digest(self, review: Review) -> bytes | None:
        return self._digests.get(review_key(review))


class StaticTrustOracle:
    """Trust oracle answering from a precomputed reviewer -> level mapping."""

    def __init__(
        self,
        levels: dict[str, TrustLevel] | None = None,
        default: TrustLevel = TrustLevel.NONE,
    ) -> None:
        self._levels = dict(levels or {})
        self._default = default

    def get_effective_trust_level(self, reviewer_id: str) -> TrustLevel:
        return self._levels.get(reviewer_id, self._default)


class TrustSnapshot:
    """Thread-safe memo of an oracle's answers for the duration of one run."""

    def __init__(self, oracle: TrustOracle) -> None:
        self._oracle = oracle
        self._store: dict[str, TrustLevel] = {}
        self._lock = threading.Lock()

    def get_effective_trust_level(self, reviewer_id: str) -> TrustLevel:
        with self._lock:
            level = self._store.get(reviewer_id)
            if level is None:
                level = self._oracle.get_effective_trust_level(reviewer_id)
                self._store[reviewer_id] = level
            return level

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
