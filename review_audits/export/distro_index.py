"""
Audits from Linux distribution package indexes.

Distributions that package a crate have vetted it to their own standards.
These converters turn already-loaded index records (fetching and parsing the
indexes is done elsewhere) into audits documents with the same entry schema as
review exports, but with fixed criteria and no criteria taxonomy.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from review_audits.export.toml_export import to_toml
from review_audits.models.audit import AuditEntry, AuditsFile

DEBCARGO_CONF_REPO_URL = "https://salsa.debian.org/rust-team/debcargo-conf"
GUIX_REPO_URL = "https://git.savannah.gnu.org/git/guix.git"

DEBIAN_CRITERIA = ("safe-to-run", "safe-to-deploy")
GUIX_CRITERIA = ("safe-to-run",)

# "Name <email>", "<email>" or a bare email address
_AUTHOR_RE = re.compile(r"^\s*(?P<name>[^<]*?)\s*(?:<(?P<email>[^>]*)>)?\s*$")


@dataclass(frozen=True)
class DebianPackage:
    name: str
    version: str
    maintainer_name: str | None = None
    maintainer_email: str | None = None
    uploaders: tuple[str, ...] = ()
    distros: tuple[str, ...] = ()
    changelog: str = ""


@dataclass(frozen=True)
class GuixPackage:
    category: str
    name: str
    version: str


@dataclass(frozen=True)
class Author:
    name: str | None = None
    email: str | None = None


def parse_author(raw: str) -> Author:
    """Split an RFC 822 style "Name <email>" string."""
    match = _AUTHOR_RE.match(raw or "")
    if match is None:
        return Author(name=(raw or "").strip() or None)
    name = match.group("name") or None
    email = (match.group("email") or "").strip() or None
    if email is None and name and "@" in name and " " not in name:
        return Author(email=name)
    return Author(name=name, email=email)


def _quoted(name: str | None, email: str) -> str:
    return f'"{name or ""}" <{email}>'


def debian_who(package: DebianPackage) -> list[str]:
    """Maintainer then uploaders, skipping anyone already listed by name or email."""
    who: list[str] = []
    seen: set[str] = set()
    if package.maintainer_email:
        who.append(_quoted(package.maintainer_name, package.maintainer_email))
        seen.add(package.maintainer_email)
        if package.maintainer_name:
            seen.add(package.maintainer_name)
    for raw in package.uploaders:
        author = parse_author(raw)
        if not author.email:
            continue
        if author.name:
            if author.name in seen:
                continue
            seen.add(author.name)
        if author.email in seen:
            continue
        seen.add(author.email)
        who.append(_quoted(author.name, author.email))
    return who


def audits_from_debian(packages: Iterable[DebianPackage]) -> AuditsFile:
    audits: dict[str, list[AuditEntry]] = {}
    for package in packages:
        distros = ", ".join(package.distros) or "unreleased"
        audits.setdefault(package.name, []).append(AuditEntry(
            criteria=list(DEBIAN_CRITERIA),
            who=debian_who(package),
            aggregated_from=[DEBCARGO_CONF_REPO_URL],
            notes=f"Packaged for Debian ({distros}). Changelog:\n{package.changelog}",
            version=package.version,
        ))
    return AuditsFile(criteria={}, audits=audits)


def audits_from_guix(packages: Iterable[GuixPackage]) -> AuditsFile:
    audits: dict[str, list[AuditEntry]] = {}
    for package in packages:
        audits.setdefault(package.name, []).append(AuditEntry(
            criteria=list(GUIX_CRITERIA),
            who=[],
            aggregated_from=[GUIX_REPO_URL],
            notes=f"Packaged for Guix ({package.category})",
            version=package.version,
        ))
    return AuditsFile(criteria={}, audits=audits)


def debian_to_toml(packages: Iterable[DebianPackage]) -> str:
    return to_toml(audits_from_debian(packages), source="debcargo-conf repo")


def guix_to_toml(packages: Iterable[GuixPackage]) -> str:
    return to_toml(audits_from_guix(packages), source="guix repo")
