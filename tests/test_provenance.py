"""
Tests for attribution, provenance links, notes and version selection.
"""

from __future__ import annotations

import pytest

from review_audits.analytics.provenance import (
    aggregated_from,
    author_from_id,
    build_notes,
    digest_to_base64,
    select_version,
    violation_marker,
    violation_placeholder_note,
)
from review_audits.models import Advisory, Issue, Level


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://github.com/dpc/crev-proofs", '"dpc" (https://github.com/dpc)'),
        ("https://gitlab.com/someone/proofs", '"someone" (https://gitlab.com/someone/proofs)'),
        ("https://git.sr.ht/~user/crev-proofs", '"user" (https://git.sr.ht/~user)'),
        ("https://example.org/reviews/crev-proofs", '"example.org" (https://example.org/reviews)'),
        ("http://plain.example/proofs", "http://plain.example/proofs"),
    ],
)
def test_author_from_verified_url(url, expected):
    assert author_from_id("abc", url) == expected


def test_author_without_verified_url():
    assert author_from_id("abc123", None) == "https://web.crev.dev/rust-reviews/reviewer/abc123"


def test_digest_base64_is_urlsafe_unpadded():
    encoded = digest_to_base64(bytes([0xFB, 0xFF, 0xFE]))
    assert encoded == "-__-"
    assert "=" not in digest_to_base64(b"\x00")


def test_aggregated_from():
    digest = b"\x01\x02\x03"
    assert aggregated_from("abc", "https://github.com/dpc/crev-proofs", digest) == [
        "https://github.com/dpc/crev-proofs#abc",
        "crev:review/AQID",
    ]
    assert aggregated_from("abc", None, digest)[0] == "crev:user/abc"


def test_notes_comment_only(make_review):
    assert build_notes(make_review(comment="Looks fine.")) == "Looks fine."
    assert build_notes(make_review(comment="   ")) is None
    assert build_notes(make_review()) is None


def test_notes_with_advisory_and_issue(make_review):
    review = make_review(
        comment="Found problems.",
        advisories=(Advisory(ids=("RUSTSEC-1", "CVE-2"), severity=Level.HIGH, comment="Memory safety"),),
        issues=(Issue(id="i-1", severity=Level.LOW),),
    )
    assert build_notes(review) == (
        "Found problems.\n"
        "severity: high\nid: RUSTSEC-1, CVE-2\n\nMemory safety\n"
        "severity: low\nid: i-1\n"
    )


def test_notes_advisory_without_ids(make_review):
    review = make_review(advisories=(Advisory(severity=Level.MEDIUM),))
    assert build_notes(review) == "severity: medium\n"


def test_violation_placeholder_note():
    assert violation_placeholder_note("foo", "https://lib.rs/crates/{name}/audit") == (
        "<https://lib.rs/crates/foo/audit>"
    )


def test_select_version_absolute(make_review):
    assert select_version(make_review(version="1.2.3"), violation=False) == ("1.2.3", None)


def test_select_version_delta(make_review):
    review = make_review(version="1.3.0", diff_base="1.2.0")
    assert select_version(review, violation=False) == (None, "1.2.0 -> 1.3.0")


def test_select_version_violation(make_review):
    review = make_review(version="1.3.0", diff_base="1.2.0")
    assert select_version(review, violation=True) == (None, None)
    assert violation_marker(review) == "=1.3.0"


def test_git_revision_annotation(make_review):
    review = make_review(version="0.4.0", revision="deadbeef", revision_type="git")
    assert select_version(review, violation=False) == ("0.4.0", None)
    assert select_version(review, violation=False, include_git_revs=True) == ("0.4.0@git:deadbeef", None)
