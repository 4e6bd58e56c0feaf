"""
Pareto-dominance deduplication of endorsements.

Walks a package's reviews in export order carrying the best endorsement seen
so far (quality, trust, version). A later endorsement is dropped when that
marker is at least as good on all three axes and strictly better on version
or trust. Violations are never dropped here and never become the marker.

Only plain, stable, better-than-neutral reviews can become the marker:
incremental (diff_base) reviews and prerelease versions say nothing about
later full releases.
"""

from __future__ import annotations

from functools import reduce
from typing import Iterable, NamedTuple

import semver

from review_audits.analytics.scoring import ScoredReview
from review_audits.models.levels import Rating, TrustLevel, rating_rank, trust_rank


class DominanceMarker(NamedTuple):
    quality: int
    trust: TrustLevel
    version: semver.Version


class _Retained(NamedTuple):
    """Persistent cons list of retained reviews, newest first."""

    head: ScoredReview
    tail: _Retained | None


_FoldState = tuple[DominanceMarker | None, _Retained | None]


def marker_for(scored: ScoredReview) -> DominanceMarker | None:
    """Marker for a review that may dominate later ones, else None."""
    review = scored.review
    if rating_rank(scored.body.rating) <= rating_rank(Rating.NEUTRAL):
        return None
    if review.is_incremental or review.package.is_prerelease:
        return None
    return DominanceMarker(scored.quality, scored.trust, review.version)


def is_dominated(marker: DominanceMarker | None, scored: ScoredReview) -> bool:
    if marker is None or scored.is_violation:
        return False
    if scored.quality > marker.quality:
        return False
    marker_trust = trust_rank(marker.trust)
    trust = trust_rank(scored.trust)
    version = scored.review.version
    if marker.version > version and marker_trust >= trust:
        return True
    return marker.version >= version and marker_trust > trust


def _step(state: _FoldState, scored: ScoredReview) -> _FoldState:
    marker, retained = state
    if is_dominated(marker, scored):
        return state
    return marker_for(scored) or marker, _Retained(scored, retained)


def retain_undominated(ordered: Iterable[ScoredReview]) -> list[ScoredReview]:
    """Subsequence of ordered reviews that no earlier retained endorsement dominates."""
    _, link = reduce(_step, ordered, (None, None))
    retained: list[ScoredReview] = []
    while link is not None:
        retained.append(link.head)
        link = link.tail
    retained.reverse()
    return retained
