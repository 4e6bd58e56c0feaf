"""
Output records in the cargo-vet audits.toml layout.

Field names of AuditEntry and CriteriaEntry are a compatibility contract with
cargo-vet: to_dict() emits exactly the keys cargo-vet reads, in a fixed order,
omitting unset optional fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class AuditEntry:
    """
    One audit of one package version (or version delta).

    Exactly one of version / delta / violation is set: endorsements carry an
    absolute version or a delta, violations carry a version requirement.
    """

    criteria: list[str]
    who: str | list[str]
    aggregated_from: list[str] = field(default_factory=list)
    notes: str | None = None
    violation: str | None = None
    version: str | None = None
    delta: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "who": list(self.who) if isinstance(self.who, list) else self.who,
            "criteria": list(self.criteria),
        }
        if self.version is not None:
            out["version"] = self.version
        if self.delta is not None:
            out["delta"] = self.delta
        if self.violation is not None:
            out["violation"] = self.violation
        if self.notes is not None:
            out["notes"] = self.notes
        if self.aggregated_from:
            out["aggregated-from"] = list(self.aggregated_from)
        return out


@dataclass(frozen=True)
class CriteriaEntry:
    """A named criterion in the audits file taxonomy."""

    description: str
    implies: tuple[str, ...] = ()
    aggregated_from: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "description": self.description,
            "implies": list(self.implies),
        }
        if self.aggregated_from:
            out["aggregated-from"] = list(self.aggregated_from)
        return out


@dataclass
class AuditsFile:
    """
    The complete audits document.

    criteria and audits are kept sorted by key so serialization is
    stable across runs.
    """

    criteria: dict[str, CriteriaEntry] = field(default_factory=dict)
    audits: dict[str, list[AuditEntry]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.criteria = dict(sorted(self.criteria.items()))
        self.audits = dict(sorted(self.audits.items()))

    def entry_count(self) -> int:
        return sum(len(entries) for entries in self.audits.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "criteria": {name: c.to_dict() for name, c in self.criteria.items()},
            "audits": {
                name: [e.to_dict() for e in entries]
                for name, entries in self.audits.items()
            },
        }
