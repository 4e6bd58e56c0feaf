"""
Environment variable loading and validation for review exports.

- AUDIT_MIN_TRUST_LEVEL: distrust | none | low | medium | high (default: low)
- AUDIT_INCLUDE_GIT_REVS: annotate versions with the reviewed git revision (default: off)
- AUDIT_EXPORT_CONCURRENCY: worker threads for per-package groups (default: 1)
- AUDIT_EXCLUDED_REVIEWERS_PATH: JSON list of verified-URL substrings whose violations are not exported
- AUDIT_PAGE_URL_TEMPLATE: link used as note for violations without notes
- AUDIT_REVIEW_SOURCE: package source whose reviews are exported (default: https://crates.io)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from review_audits.core.exceptions import ConfigurationError
from review_audits.models.levels import TrustLevel
from review_audits.models.review import SOURCE_CRATES_IO

# Project root: config is review_audits/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_MIN_TRUST_LEVEL = TrustLevel.LOW
DEFAULT_EXPORT_CONCURRENCY = 1
MAX_EXPORT_CONCURRENCY = 64
DEFAULT_EXCLUDED_REVIEWERS_PATH = _PACKAGE_DIR / "policy" / "excluded_reviewers.json"
DEFAULT_AUDIT_PAGE_URL_TEMPLATE = "https://lib.rs/crates/{name}/audit"

_TRUTHY = ("1", "true", "yes", "on")


def load_audit_env() -> None:
    """Load .env from project root. Safe to call multiple times; real env wins."""
    load_dotenv(_ENV_PATH, override=False)


def get_min_trust_level() -> TrustLevel:
    """Return AUDIT_MIN_TRUST_LEVEL as a TrustLevel. Default: low."""
    load_audit_env()
    raw = (os.getenv("AUDIT_MIN_TRUST_LEVEL") or "").strip().lower()
    if not raw:
        return DEFAULT_MIN_TRUST_LEVEL
    try:
        return TrustLevel(raw)
    except ValueError as e:
        allowed = ", ".join(t.value for t in TrustLevel)
        raise ConfigurationError(
            f"AUDIT_MIN_TRUST_LEVEL={raw!r} is not one of: {allowed}"
        ) from e


def include_git_revs() -> bool:
    """
    Return True if versions should carry @git:<rev> annotations.
    cargo-vet ignores audits with a git revision, so this is off by default.
    """
    load_audit_env()
    return (os.getenv("AUDIT_INCLUDE_GIT_REVS") or "").strip().lower() in _TRUTHY


def get_export_concurrency() -> int:
    """Return AUDIT_EXPORT_CONCURRENCY clamped to [1, MAX_EXPORT_CONCURRENCY]."""
    load_audit_env()
    raw = (os.getenv("AUDIT_EXPORT_CONCURRENCY") or "").strip()
    if not raw:
        return DEFAULT_EXPORT_CONCURRENCY
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"AUDIT_EXPORT_CONCURRENCY={raw!r} is not an integer") from e
    return max(1, min(MAX_EXPORT_CONCURRENCY, value))


def get_excluded_reviewers_path() -> Path:
    """Return path to the violation exclusion list (JSON array of URL substrings)."""
    load_audit_env()
    raw = (os.getenv("AUDIT_EXCLUDED_REVIEWERS_PATH") or "").strip()
    return Path(raw) if raw else DEFAULT_EXCLUDED_REVIEWERS_PATH


def get_audit_page_url_template() -> str:
    load_audit_env()
    template = (os.getenv("AUDIT_PAGE_URL_TEMPLATE") or "").strip() or DEFAULT_AUDIT_PAGE_URL_TEMPLATE
    if "{name}" not in template:
        raise ConfigurationError("AUDIT_PAGE_URL_TEMPLATE must contain {name}")
    return template


def get_review_source() -> str:
    load_audit_env()
    return (os.getenv("AUDIT_REVIEW_SOURCE") or "").strip() or SOURCE_CRATES_IO
