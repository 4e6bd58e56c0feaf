"""
Review records consumed by the export pipeline.

A Review is one reviewer's signed assessment of one package version. Records
are immutable snapshots owned by the external review store; the pipeline only
reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import semver

from review_audits.core.exceptions import InvalidReviewError
from review_audits.models.levels import Level, Rating

SOURCE_CRATES_IO = "https://crates.io"


@dataclass(frozen=True)
class PackageInfo:
    """Package coordinates plus the source revision the reviewer looked at."""

    name: str
    version: semver.Version
    source: str = SOURCE_CRATES_IO
    revision: str = ""
    revision_type: str = ""

    @property
    def is_prerelease(self) -> bool:
        return bool(self.version.prerelease)


@dataclass(frozen=True)
class Issue:
    id: str
    severity: Level = Level.MEDIUM
    comment: str = ""


@dataclass(frozen=True)
class Advisory:
    ids: tuple[str, ...] = ()
    severity: Level = Level.MEDIUM
    comment: str = ""


@dataclass(frozen=True)
class ReviewBody:
    """The scored part of a review: rating plus depth of the review."""

    rating: Rating
    thoroughness: Level
    understanding: Level


@dataclass(frozen=True)
class Review:
    """
    A package review proof.

    body is None for proofs that carry no assessment (e.g. only flags);
    those are never exported. diff_base is set for incremental reviews
    that only cover the changes since a previously reviewed version.
    """

    package: PackageInfo
    reviewer_id: str
    date: datetime
    body: ReviewBody | None = None
    diff_base: PackageInfo | None = None
    issues: tuple[Issue, ...] = ()
    advisories: tuple[Advisory, ...] = ()
    unmaintained: bool = False
    comment: str = ""

    @property
    def name(self) -> str:
        return self.package.name

    @property
    def version(self) -> semver.Version:
        return self.package.version

    @property
    def is_incremental(self) -> bool:
        return self.diff_base is not None


def parse_version(raw: Any) -> semver.Version:
    """Parse a semver string; raises InvalidReviewError on bad input."""
    if isinstance(raw, semver.Version):
        return raw
    try:
        return semver.Version.parse(str(raw).strip())
    except (TypeError, ValueError) as e:
        raise InvalidReviewError(f"invalid version {raw!r}: {e}") from e


def _parse_enum(enum_cls: type, raw: Any, field_name: str) -> Any:
    try:
        return enum_cls(str(raw).strip().lower())
    except ValueError as e:
        raise InvalidReviewError(f"invalid {field_name} {raw!r}") from e


def _parse_date(raw: Any) -> datetime:
    if isinstance(raw, datetime):
        value = raw
    else:
        try:
            value = datetime.fromisoformat(str(raw).strip())
        except ValueError as e:
            raise InvalidReviewError(f"invalid date {raw!r}") from e
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _mapping(raw: Any, field_name: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise InvalidReviewError(f"{field_name} must be a mapping, got {type(raw).__name__}")
    return raw


def _text(raw: Any, field_name: str, strip: bool = True) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise InvalidReviewError(f"{field_name} must be a string, got {type(raw).__name__}")
    return raw.strip() if strip else raw


def _items(raw: Any, field_name: str) -> list[dict[str, Any]]:
    if not raw:
        return []
    if not isinstance(raw, list):
        raise InvalidReviewError(f"{field_name} must be a list")
    return [_mapping(item, f"{field_name} item") for item in raw]


def _package_from_dict(data: dict[str, Any], default_name: str | None = None) -> PackageInfo:
    name = _text(data.get("name"), "package name") or default_name or ""
    if not name:
        raise InvalidReviewError("package name is required")
    return PackageInfo(
        name=name,
        version=parse_version(data.get("version")),
        source=_text(data.get("source"), "package source") or SOURCE_CRATES_IO,
        revision=_text(data.get("revision"), "revision"),
        revision_type=_text(data.get("revision_type"), "revision_type"),
    )


def review_from_dict(data: dict[str, Any]) -> Review:
    """
    Build a Review from a plain dict (e.g. decoded JSON from a review snapshot).

    Expected keys: package {name, version, source?, revision?, revision_type?},
    reviewer_id, date (ISO 8601), review {rating, thoroughness, understanding}
    (optional), diff_base {version, ...} (optional), issues [{id, severity,
    comment}], advisories [{ids, severity, comment}], unmaintained, comment.
    Raises InvalidReviewError for any field of the wrong shape.
    """
    data = _mapping(data, "review record")
    if data.get("package") is None:
        raise InvalidReviewError("review record has no package")
    package = _package_from_dict(_mapping(data["package"], "package"))

    reviewer_id = _text(data.get("reviewer_id"), "reviewer_id")
    if not reviewer_id:
        raise InvalidReviewError("reviewer_id is required")

    body = None
    if data.get("review"):
        body_data = _mapping(data["review"], "review")
        body = ReviewBody(
            rating=_parse_enum(Rating, body_data.get("rating", "neutral"), "rating"),
            thoroughness=_parse_enum(Level, body_data.get("thoroughness", "none"), "thoroughness"),
            understanding=_parse_enum(Level, body_data.get("understanding", "none"), "understanding"),
        )

    diff_base = None
    if data.get("diff_base"):
        diff_base = _package_from_dict(_mapping(data["diff_base"], "diff_base"), default_name=package.name)

    issues = tuple(
        Issue(
            id=str(i.get("id") or ""),
            severity=_parse_enum(Level, i.get("severity", "medium"), "severity"),
            comment=_text(i.get("comment"), "issue comment", strip=False),
        )
        for i in _items(data.get("issues"), "issues")
    )
    advisories = tuple(
        Advisory(
            ids=tuple(str(x) for x in a.get("ids") or []),
            severity=_parse_enum(Level, a.get("severity", "medium"), "severity"),
            comment=_text(a.get("comment"), "advisory comment", strip=False),
        )
        for a in _items(data.get("advisories"), "advisories")
    )

    return Review(
        package=package,
        reviewer_id=reviewer_id,
        date=_parse_date(data.get("date")),
        body=body,
        diff_base=diff_base,
        issues=issues,
        advisories=advisories,
        unmaintained=bool(data.get("unmaintained", False)),
        comment=_text(data.get("comment"), "comment", strip=False),
    )
