"""
Review export pipeline: reviews -> trust gate -> ordering -> dedup -> criteria -> audits.

Single entrypoint for turning a review snapshot into an AuditsFile:
admit reviews by trust, group them by package, order each group, drop
sub-threshold and dominated endorsements, classify the survivors and attach
attribution and provenance. Package groups are independent and may run on a
thread pool; each group is processed sequentially.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import replace
from typing import Any

from review_audits.analytics.criteria import (
    endorsement_criteria,
    meets_threshold,
    violation_criteria,
)
from review_audits.analytics.dedup import retain_undominated
from review_audits.analytics.exclusions import (
    is_excluded_violation_reviewer,
    load_excluded_reviewers,
)
from review_audits.analytics.ordering import group_by_package, order_reviews
from review_audits.analytics.provenance import (
    aggregated_from,
    author_from_id,
    build_notes,
    select_version,
    violation_marker,
    violation_placeholder_note,
)
from review_audits.analytics.scoring import ScoredReview
from review_audits.analytics.taxonomy import standard_criteria
from review_audits.analytics.trust_filter import admit_reviews
from review_audits.audits_logging import bind_package, get_logger
from review_audits.config.settings import ExportSettings, get_settings
from review_audits.export.toml_export import CREV_HEADER_SOURCE, to_toml
from review_audits.models.audit import AuditEntry, AuditsFile
from review_audits.sources.memory import TrustSnapshot
from review_audits.sources.ports import ReviewRepository, TrustOracle

logger = get_logger(__name__)


class AuditExporter:
    """
    Converts reviews from a repository into a cargo-vet audits document.

    Trust levels are resolved once per reviewer per exporter instance.
    """

    def __init__(
        self,
        repository: ReviewRepository,
        oracle: TrustOracle,
        settings: ExportSettings | None = None,
    ) -> None:
        self._repository = repository
        self._trusts = TrustSnapshot(oracle)
        self._settings = settings or get_settings()
        if self._settings.excluded_reviewer_patterns is not None:
            self._excluded = frozenset(self._settings.excluded_reviewer_patterns)
        else:
            self._excluded = load_excluded_reviewers(self._settings.excluded_reviewers_path)

    @property
    def settings(self) -> ExportSettings:
        return self._settings

    def convert_to_document(self) -> AuditsFile:
        settings = self._settings
        reviews = self._repository.get_pkg_reviews_for_source(settings.review_source)
        admitted = admit_reviews(reviews, self._trusts, settings.min_trust_level)
        groups = group_by_package(admitted)
        logger.info(
            "audit_export_start",
            source=settings.review_source,
            packages=len(groups),
            min_trust_level=settings.min_trust_level.value,
            concurrency=settings.concurrency,
        )

        audits: dict[str, list[AuditEntry]] = {}
        if settings.concurrency > 1 and len(groups) > 1:
            with ThreadPoolExecutor(max_workers=settings.concurrency) as executor:
                futures = {
                    executor.submit(self.audit_package, name, group): name
                    for name, group in groups.items()
                }
                for fut in as_completed(futures):
                    entries = fut.result()
                    if entries:
                        audits[futures[fut]] = entries
        else:
            for name, group in groups.items():
                entries = self.audit_package(name, group)
                if entries:
                    audits[name] = entries

        document = AuditsFile(criteria=standard_criteria(), audits=audits)
        logger.info(
            "audit_export_done",
            packages=len(document.audits),
            entries=document.entry_count(),
            reviewers=len(self._trusts),
        )
        return document

    def convert_to_toml(self) -> str:
        """The audits document as cargo-vet-compatible audits.toml text."""
        return to_toml(self.convert_to_document(), source=CREV_HEADER_SOURCE)

    def audit_package(self, name: str, group: list[ScoredReview]) -> list[AuditEntry]:
        """Entries for one package's admitted reviews, in export order."""
        log = bind_package(name, __name__)
        candidates: list[ScoredReview] = []
        for scored in order_reviews(group):
            if not scored.is_violation and not meets_threshold(scored):
                _log_skip(log, scored, "below_quality_threshold")
                continue
            digest = self._repository.get_proof_digest(scored.review)
            if digest is None:
                _log_skip(log, scored, "missing_digest")
                continue
            candidates.append(replace(scored, digest=digest))

        retained = retain_undominated(candidates)
        if len(retained) < len(candidates):
            log.debug("reviews_dominated", dropped=len(candidates) - len(retained))

        entries: list[AuditEntry] = []
        for scored in retained:
            entry = self._build_entry(scored, log)
            if entry is not None:
                entries.append(entry)
        return entries

    def _build_entry(self, scored: ScoredReview, log: Any) -> AuditEntry | None:
        """Entry for a candidate that passed threshold and dedup; None if excluded."""
        review = scored.review
        violation = scored.is_violation
        verified_url = self._repository.lookup_verified_url(review.reviewer_id)
        if violation and is_excluded_violation_reviewer(verified_url, self._excluded):
            _log_skip(log, scored, "excluded_violation_reviewer")
            return None
        criteria = violation_criteria(scored) if violation else endorsement_criteria(scored)

        version, delta = select_version(review, violation, self._settings.include_git_revs)
        notes = build_notes(review)
        if notes is None and violation:
            notes = violation_placeholder_note(review.name, self._settings.audit_page_url_template)

        return AuditEntry(
            criteria=criteria,
            who=author_from_id(review.reviewer_id, verified_url),
            aggregated_from=aggregated_from(review.reviewer_id, verified_url, scored.digest),
            notes=notes,
            violation=violation_marker(review) if violation else None,
            version=version,
            delta=delta,
        )


def _log_skip(log: Any, scored: ScoredReview, reason: str) -> None:
    log.debug(
        "review_skipped",
        reviewer_id=scored.review.reviewer_id,
        version=str(scored.review.version),
        reason=reason,
    )


def convert_reviews(
    repository: ReviewRepository,
    oracle: TrustOracle,
    settings: ExportSettings | None = None,
) -> AuditsFile:
    """Run a full export and return the audits document."""
    return AuditExporter(repository, oracle, settings).convert_to_document()
