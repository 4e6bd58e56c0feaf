"""
Fixed criteria taxonomy written into every exported audits file.

Trust and level criteria mean "at least this much", so each implies the next
lower one. safe-to-run and safe-to-deploy are cargo-vet built-ins and are not
declared here.
"""

from __future__ import annotations

from review_audits.models.audit import CriteriaEntry

CRITERIA_SOURCE_URL = "https://github.com/crev-dev"

_CRITERIA = (
    (
        "trust-high",
        "Author of this review is well known and trusted by the publisher of this audit repository. "
        "This means 'at least this much', so higher levels imply all lower levels",
        ("trust-medium",),
    ),
    (
        "trust-medium",
        "Author of this review is somewhat known and trusted by the publisher of this audit repository",
        ("trust-low",),
    ),
    (
        "trust-low",
        "Author of this review is not well known, or not trusted much, by the publisher of this audit repository",
        (),
    ),
    ("strong", "Strong endorsement. It implies a positive rating", ("positive",)),
    ("positive", "Positive review rating", ()),
    ("neutral", "There is no rating either way. Check the comments for reports of issues", ()),
    (
        "level-high",
        "The code has been thoroughly reviewed and/or with high understanding. "
        "This means 'at least this much' so higher levels imply all lower levels",
        ("level-medium",),
    ),
    (
        "level-medium",
        "The code has been reviewed with average thoroughness or understanding. "
        "This means 'at least this much' so higher levels imply all lower levels",
        ("level-low",),
    ),
    (
        "level-low",
        "The code has been only checked at a glance and/or with low understanding. "
        "This means 'at least this much' so higher levels imply all lower levels",
        ("level-none",),
    ),
    ("level-none", "The code hasn't been reviewed or hasn't been understood", ()),
    ("unmaintained", "The package has been flagged as unmaintained", ()),
)


def standard_criteria() -> dict[str, CriteriaEntry]:
    """The eleven criteria, sorted by name."""
    return {
        name: CriteriaEntry(
            description=description,
            implies=implies,
            aggregated_from=(CRITERIA_SOURCE_URL,),
        )
        for name, description, implies in sorted(_CRITERIA)
    }


def validate_taxonomy(criteria: dict[str, CriteriaEntry]) -> list[str]:
    """
    Problems with an implies graph: unknown targets and cycles.
    Empty list means the taxonomy is well-formed.
    """
    problems: list[str] = []
    for name, entry in criteria.items():
        for target in entry.implies:
            if target not in criteria:
                problems.append(f"{name} implies unknown criterion {target}")

    visiting: set[str] = set()
    done: set[str] = set()

    def visit(name: str, path: list[str]) -> None:
        if name in done or name not in criteria:
            return
        if name in visiting:
            problems.append("implies cycle: " + " -> ".join(path + [name]))
            return
        visiting.add(name)
        for target in criteria[name].implies:
            visit(target, path + [name])
        visiting.discard(name)
        done.add(name)

    for name in criteria:
        visit(name, [])
    return problems
