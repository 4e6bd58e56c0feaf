"""
Pytest fixtures for review_audits tests. Builds synthetic in-memory review
snapshots so the pipeline runs without a proof database or trust graph.
"""

from __future__ import annotations

import hashlib
from datetime import datetime, timezone

import pytest

from review_audits.analytics.scoring import annotate
from review_audits.config.settings import ExportSettings
from review_audits.models import (
    Level,
    PackageInfo,
    Rating,
    Review,
    ReviewBody,
    TrustLevel,
    parse_version,
)
from review_audits.sources import InMemoryReviewRepository, StaticTrustOracle

AUDIT_ENV_VARS = (
    "AUDIT_MIN_TRUST_LEVEL",
    "AUDIT_INCLUDE_GIT_REVS",
    "AUDIT_EXPORT_CONCURRENCY",
    "AUDIT_EXCLUDED_REVIEWERS_PATH",
    "AUDIT_PAGE_URL_TEMPLATE",
    "AUDIT_REVIEW_SOURCE",
)

BASE_DATE = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def clean_audit_env(monkeypatch):
    """Each test starts without AUDIT_* overrides."""
    for var in AUDIT_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def fake_digest(review: Review) -> bytes:
    key = f"{review.reviewer_id}/{review.name}/{review.version}".encode()
    return hashlib.sha256(key).digest()


@pytest.fixture
def make_review():
    """Factory for Review objects with sensible defaults."""

    def _make(
        name: str = "foo",
        version: str = "1.0.0",
        reviewer: str = "alice",
        rating: Rating | None = Rating.POSITIVE,
        thoroughness: Level = Level.MEDIUM,
        understanding: Level = Level.MEDIUM,
        date: datetime = BASE_DATE,
        diff_base: str | None = None,
        revision: str = "",
        revision_type: str = "",
        **kwargs,
    ) -> Review:
        body = None
        if rating is not None:
            body = ReviewBody(rating=rating, thoroughness=thoroughness, understanding=understanding)
        base = None
        if diff_base is not None:
            base = PackageInfo(name=name, version=parse_version(diff_base))
        return Review(
            package=PackageInfo(
                name=name,
                version=parse_version(version),
                revision=revision,
                revision_type=revision_type,
            ),
            reviewer_id=reviewer,
            date=date,
            body=body,
            diff_base=base,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_scored(make_review):
    """Factory for ScoredReview objects: trust plus Review keyword arguments."""

    def _make(trust: TrustLevel = TrustLevel.MEDIUM, **kwargs):
        return annotate(make_review(**kwargs), trust)

    return _make


@pytest.fixture
def make_repository():
    """Repository holding the given reviews, with digests for all but `missing_digest`."""

    def _make(reviews, verified_urls=None, missing_digest=()):
        repo = InMemoryReviewRepository(verified_urls=verified_urls)
        for review in reviews:
            digest = None if review in missing_digest else fake_digest(review)
            repo.add(review, digest)
        return repo

    return _make


@pytest.fixture
def trust_oracle():
    """Oracle with one reviewer per trust level; unknown reviewers get none."""
    return StaticTrustOracle({
        "mallory": TrustLevel.DISTRUST,
        "nobody": TrustLevel.NONE,
        "carol": TrustLevel.LOW,
        "alice": TrustLevel.MEDIUM,
        "bob": TrustLevel.HIGH,
    })


@pytest.fixture
def export_settings():
    return ExportSettings(excluded_reviewer_patterns=("MaulingM",))
