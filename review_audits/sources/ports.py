"""
Read-only capabilities the export pipeline needs from the outside world.

The review store and the trust oracle are external collaborators. The pipeline
only talks to them through these two narrow protocols, so it can run against
in-memory fixtures as easily as against a real proof database.
"""

from __future__ import annotations

from typing import Iterable, Protocol

from review_audits.models.levels import TrustLevel
from review_audits.models.review import Review


class ReviewRepository(Protocol):
    def get_pkg_reviews_for_source(self, source: str) -> Iterable[Review]:
        """All package reviews for one package source (e.g. https://crates.io)."""
        ...

    def lookup_verified_url(self, reviewer_id: str) -> str | None:
        """Verified public proofs URL of a reviewer, or None when unverified."""
        ...

    def get_proof_digest(self, review: Review) -> bytes | None:
        """Content digest of the signed proof behind a review, or None if unknown."""
        ...


class TrustOracle(Protocol):
    def get_effective_trust_level(self, reviewer_id: str) -> TrustLevel:
        """Effective trust in a reviewer from the publisher's point of view."""
        ...
