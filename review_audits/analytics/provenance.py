"""
Attribution, provenance links, notes and version fields of an audit entry.
"""

from __future__ import annotations

import base64

from review_audits.models.review import Advisory, Issue, PackageInfo, Review

REVIEWER_PAGE_URL = "https://web.crev.dev/rust-reviews/reviewer/{id}"
PROOFS_SUFFIX = "/crev-proofs"
# Hosts where the first path segment is the username
USERNAME_URL_PREFIXES = (
    "https://github.com/",
    "https://gitlab.com/",
    "https://git.sr.ht/~",
)


def digest_to_base64(digest: bytes) -> str:
    """URL-safe base64 without padding, as used in crev proof ids."""
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


def reviewer_base_url(reviewer_id: str, verified_url: str | None) -> str:
    if verified_url:
        return f"{verified_url}#{reviewer_id}"
    return f"crev:user/{reviewer_id}"


def aggregated_from(reviewer_id: str, verified_url: str | None, digest: bytes) -> list[str]:
    return [
        reviewer_base_url(reviewer_id, verified_url),
        f"crev:review/{digest_to_base64(digest)}",
    ]


def author_from_id(reviewer_id: str, verified_url: str | None) -> str:
    """
    Human-readable attribution for the `who` field.

    '"user" (url)' for known code hosts, '"host" (url)' for other https
    URLs, the bare URL otherwise, and the reviewer's web page when the
    reviewer has no verified URL.
    """
    if not verified_url:
        return REVIEWER_PAGE_URL.format(id=reviewer_id)
    url = verified_url
    if url.endswith(PROOFS_SUFFIX):
        url = url[: -len(PROOFS_SUFFIX)]
    for prefix in USERNAME_URL_PREFIXES:
        if url.startswith(prefix):
            username = url[len(prefix):].split("/", 1)[0]
            return f'"{username}" ({url})'
    if url.startswith("https://"):
        host = url[len("https://"):].split("/", 1)[0]
        return f'"{host}" ({url})'
    return url


def _advisory_block(advisory: Advisory) -> str:
    block = f"severity: {advisory.severity.value}\n"
    if advisory.ids:
        block += "id: " + ", ".join(advisory.ids) + "\n"
    if advisory.comment:
        block += "\n" + advisory.comment
    return block


def _issue_block(issue: Issue) -> str:
    block = f"severity: {issue.severity.value}\nid: {issue.id}\n"
    if issue.comment:
        block += "\n" + issue.comment
    return block


def build_notes(review: Review) -> str | None:
    """Review comment followed by one block per advisory, then per issue."""
    notes = review.comment if review.comment.strip() else None
    blocks = [_advisory_block(a) for a in review.advisories]
    blocks += [_issue_block(i) for i in review.issues]
    details = "\n".join(blocks)
    if not details:
        return notes
    if notes is None:
        return details
    return f"{notes}\n{details}"


def violation_placeholder_note(package_name: str, url_template: str) -> str:
    return "<" + url_template.format(name=package_name) + ">"


def vet_version(package: PackageInfo, include_git_revs: bool = False) -> str:
    """Version as cargo-vet reads it, optionally pinned to a git revision."""
    if include_git_revs and package.revision_type == "git" and package.revision:
        return f"{package.version}@git:{package.revision}"
    return str(package.version)


def select_version(
    review: Review,
    violation: bool,
    include_git_revs: bool = False,
) -> tuple[str | None, str | None]:
    """
    (version, delta) for an entry.

    Violations carry neither (they pin the version in `violation`),
    incremental reviews carry "base -> current", others an absolute version.
    """
    if violation:
        return None, None
    if review.diff_base is not None:
        base = vet_version(review.diff_base, include_git_revs)
        current = vet_version(review.package, include_git_revs)
        return None, f"{base} -> {current}"
    return vet_version(review.package, include_git_revs), None


def violation_marker(review: Review) -> str:
    return f"={review.version}"
