"""
Tests for models: level rank tables, review parsing and audit record layout.
"""

from __future__ import annotations

from datetime import timezone

import pytest

from review_audits.core.exceptions import InvalidReviewError
from review_audits.models import (
    LEVEL_RANK,
    RATING_RANK,
    TRUST_RANK,
    AuditEntry,
    AuditsFile,
    CriteriaEntry,
    Level,
    Rating,
    TrustLevel,
    max_level,
    review_from_dict,
)


def test_rank_tables_cover_every_member():
    """Each enum member has exactly one rank; ranks are strictly increasing in semantic order."""
    assert set(LEVEL_RANK) == set(Level)
    assert set(RATING_RANK) == set(Rating)
    assert set(TRUST_RANK) == set(TrustLevel)
    assert TRUST_RANK[TrustLevel.DISTRUST] < TRUST_RANK[TrustLevel.NONE] < TRUST_RANK[TrustLevel.LOW]
    assert TRUST_RANK[TrustLevel.LOW] < TRUST_RANK[TrustLevel.MEDIUM] < TRUST_RANK[TrustLevel.HIGH]
    assert RATING_RANK[Rating.NEUTRAL] < RATING_RANK[Rating.POSITIVE] < RATING_RANK[Rating.STRONG]


def test_max_level():
    assert max_level([Level.LOW, Level.HIGH, Level.MEDIUM], default=Level.NONE) == Level.HIGH
    assert max_level([], default=Level.MEDIUM) == Level.MEDIUM


def test_review_from_dict_full():
    """All optional parts of a record are parsed."""
    review = review_from_dict({
        "package": {"name": "foo", "version": "1.2.0", "revision": "abc", "revision_type": "git"},
        "reviewer_id": "alice",
        "date": "2024-03-01T12:00:00",
        "review": {"rating": "Positive", "thoroughness": "medium", "understanding": "high"},
        "diff_base": {"version": "1.1.0"},
        "issues": [{"id": "RUSTSEC-1", "severity": "high", "comment": "bad"}],
        "advisories": [{"ids": ["A", "B"], "severity": "low"}],
        "unmaintained": True,
        "comment": "looks fine",
    })
    assert review.name == "foo"
    assert str(review.version) == "1.2.0"
    assert review.package.revision == "abc"
    assert review.body.rating == Rating.POSITIVE
    assert review.body.understanding == Level.HIGH
    assert review.diff_base.name == "foo"
    assert str(review.diff_base.version) == "1.1.0"
    assert review.is_incremental
    assert review.issues[0].severity == Level.HIGH
    assert review.advisories[0].ids == ("A", "B")
    assert review.unmaintained
    assert review.date.tzinfo == timezone.utc


def test_review_from_dict_without_body():
    review = review_from_dict({
        "package": {"name": "foo", "version": "1.0.0"},
        "reviewer_id": "alice",
        "date": "2024-03-01T12:00:00+00:00",
    })
    assert review.body is None
    assert not review.is_incremental


def test_review_from_dict_prerelease():
    review = review_from_dict({
        "package": {"name": "foo", "version": "2.0.0-rc.1"},
        "reviewer_id": "alice",
        "date": "2024-03-01",
    })
    assert review.package.is_prerelease


@pytest.mark.parametrize(
    "record",
    [
        {"reviewer_id": "alice", "date": "2024-01-01"},
        {"package": {"name": "foo", "version": "not-a-version"}, "reviewer_id": "alice", "date": "2024-01-01"},
        {"package": {"name": "foo", "version": "1.0.0"}, "date": "2024-01-01"},
        {"package": {"name": "foo", "version": "1.0.0"}, "reviewer_id": "alice", "date": "yesterday"},
        {
            "package": {"name": "foo", "version": "1.0.0"},
            "reviewer_id": "alice",
            "date": "2024-01-01",
            "review": {"rating": "amazing"},
        },
        {"package": {"name": "foo", "version": "1.0.0"}, "reviewer_id": "alice", "date": "2024-01-01",
         "review": "positive"},
        {"package": {"name": "foo", "version": "1.0.0"}, "reviewer_id": "alice", "date": "2024-01-01",
         "issues": ["RUSTSEC-1"]},
        {"package": {"name": "foo", "version": "1.0.0"}, "reviewer_id": "alice", "date": "2024-01-01",
         "advisories": {"ids": ["A"]}},
        {"package": {"name": "foo", "version": "1.0.0"}, "reviewer_id": "alice", "date": "2024-01-01",
         "diff_base": "0.9.0"},
        {"package": {"name": "foo", "version": "1.0.0"}, "reviewer_id": 42, "date": "2024-01-01"},
        {"package": {"name": ["foo"], "version": "1.0.0"}, "reviewer_id": "alice", "date": "2024-01-01"},
        {"package": "foo", "reviewer_id": "alice", "date": "2024-01-01"},
        {"package": {"name": "foo", "version": "1.0.0"}, "reviewer_id": "alice", "date": "2024-01-01",
         "comment": 7},
        ["not", "a", "mapping"],
    ],
)
def test_review_from_dict_invalid(record):
    with pytest.raises(InvalidReviewError):
        review_from_dict(record)


def test_audit_entry_to_dict_order_and_omissions():
    """Keys follow cargo-vet field order; unset optionals are omitted; aggregated-from is kebab-case."""
    entry = AuditEntry(
        criteria=["safe-to-deploy"],
        who="alice",
        aggregated_from=["crev:user/alice", "crev:review/xyz"],
        violation="=1.0.0",
        notes="broken",
    )
    out = entry.to_dict()
    assert list(out) == ["who", "criteria", "violation", "notes", "aggregated-from"]
    assert "version" not in out and "delta" not in out


def test_audits_file_sorted():
    doc = AuditsFile(
        criteria={"b": CriteriaEntry("b"), "a": CriteriaEntry("a")},
        audits={"zeta": [AuditEntry(["x"], "w")], "alpha": [AuditEntry(["x"], "w"), AuditEntry(["y"], "w")]},
    )
    assert list(doc.criteria) == ["a", "b"]
    assert list(doc.audits) == ["alpha", "zeta"]
    assert doc.entry_count() == 3
