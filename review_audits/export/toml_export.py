"""
audits.toml serialization.

Renders an AuditsFile with tomlkit: one [criteria.<name>] table per criterion
and one [[audits.<package>]] array-of-tables entry per audit, keys in the
fixed order of AuditEntry.to_dict(). Multi-line notes are written as
multi-line strings so the file stays readable in diffs.
"""

from __future__ import annotations

from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from review_audits import __version__
from review_audits.audits_logging import get_logger
from review_audits.core.exceptions import AuditSerializationError
from review_audits.models.audit import AuditsFile

logger = get_logger(__name__)

CREV_HEADER_SOURCE = "cargo-crev reviews"
GENERATOR_NAME = "review-audits"


def header_line(source: str) -> str:
    return f"# Automatically generated by {GENERATOR_NAME} {__version__} from {source}\n\n"


def _string(value: str) -> Any:
    """
    Multi-line basic string for readable notes. TOML readers normalize a raw
    CRLF inside multi-line strings, so values with \\r stay single-line and
    escaped.
    """
    if "\n" in value and "\r" not in value and '"""' not in value:
        return tomlkit.string(value, multiline=True)
    return tomlkit.string(value)


def _table(values: dict[str, Any]) -> Any:
    table = tomlkit.table()
    for key, value in values.items():
        table.add(key, _string(value) if isinstance(value, str) else value)
    return table


def to_document(audits_file: AuditsFile) -> tomlkit.TOMLDocument:
    doc = tomlkit.document()
    if audits_file.criteria:
        criteria = tomlkit.table(is_super_table=True)
        for name, entry in audits_file.criteria.items():
            criteria.add(name, _table(entry.to_dict()))
        doc.add("criteria", criteria)

    # An empty super table renders nothing; consumers need the key present
    audits = tomlkit.table(is_super_table=bool(audits_file.audits))
    for name, entries in audits_file.audits.items():
        aot = tomlkit.aot()
        for entry in entries:
            aot.append(_table(entry.to_dict()))
        audits.add(name, aot)
    doc.add("audits", audits)
    return doc


def to_toml(audits_file: AuditsFile, source: str = CREV_HEADER_SOURCE) -> str:
    """Serialize with a generated-by header. Raises AuditSerializationError on failure."""
    try:
        body = tomlkit.dumps(to_document(audits_file))
    except (TOMLKitError, TypeError, ValueError) as e:
        logger.error("audits_toml_serialize_failed", source=source, error=str(e))
        raise AuditSerializationError(f"cannot serialize audits document: {e}") from e
    return header_line(source) + body
