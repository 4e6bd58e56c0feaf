"""
Tests for audits.toml rendering.
"""

from __future__ import annotations

import tomlkit

from review_audits import __version__
from review_audits.analytics.taxonomy import standard_criteria
from review_audits.export.toml_export import header_line, to_toml
from review_audits.models import AuditEntry, AuditsFile


def _sample() -> AuditsFile:
    return AuditsFile(
        criteria=standard_criteria(),
        audits={
            "foo": [
                AuditEntry(
                    criteria=["positive", "level-medium", "trust-medium"],
                    who='"dpc" (https://github.com/dpc)',
                    aggregated_from=["https://github.com/dpc/crev-proofs#abc", "crev:review/AQID"],
                    notes="first line\nsecond line",
                    version="1.2.0",
                ),
                AuditEntry(
                    criteria=["safe-to-deploy"],
                    who="crev:user/xyz",
                    violation="=1.0.0",
                    notes="<https://lib.rs/crates/foo/audit>",
                ),
            ],
        },
    )


def test_header():
    text = to_toml(_sample())
    assert text.startswith(
        f"# Automatically generated by review-audits {__version__} from cargo-crev reviews\n\n"
    )
    assert header_line("guix repo").endswith("from guix repo\n\n")


def test_parses_back_to_same_data():
    parsed = tomlkit.parse(to_toml(_sample())).unwrap()
    assert parsed["criteria"]["trust-high"]["implies"] == ["trust-medium"]
    assert parsed["criteria"]["trust-high"]["aggregated-from"] == ["https://github.com/crev-dev"]
    foo = parsed["audits"]["foo"]
    assert len(foo) == 2
    assert foo[0]["version"] == "1.2.0"
    assert foo[0]["notes"] == "first line\nsecond line"
    assert foo[0]["aggregated-from"][1] == "crev:review/AQID"
    assert foo[1]["violation"] == "=1.0.0"
    assert "version" not in foo[1]


def test_layout_uses_array_of_tables():
    text = to_toml(_sample())
    assert "[[audits.foo]]" in text
    assert "[criteria.level-high]" in text
    assert '"""' in text


def test_empty_criteria_section_omitted():
    text = to_toml(AuditsFile(audits={"bar": [AuditEntry(["safe-to-run"], [], version="1.0.0")]}))
    assert "[criteria" not in text
    assert tomlkit.parse(text).unwrap()["audits"]["bar"][0]["who"] == []


def test_output_is_stable():
    assert to_toml(_sample()) == to_toml(_sample())


def test_notes_with_crlf_backslash_and_quotes_survive():
    """Windows line endings, backslashes, triple quotes and control chars parse back unchanged."""
    notes = 'line1\r\nline2\ttab \x01 ctl """quoted""" C:\\path\\'
    doc = AuditsFile(audits={"foo": [AuditEntry(["safe-to-run"], "w", notes=notes, version="1.0.0")]})
    parsed = tomlkit.parse(to_toml(doc)).unwrap()
    assert parsed["audits"]["foo"][0]["notes"] == notes


def test_multiline_notes_with_backslash_survive():
    notes = "first\nsecond \\ slash\n"
    doc = AuditsFile(audits={"foo": [AuditEntry(["safe-to-run"], "w", notes=notes, version="1.0.0")]})
    text = to_toml(doc)
    assert '"""' in text
    assert tomlkit.parse(text).unwrap()["audits"]["foo"][0]["notes"] == notes


def test_empty_document_keeps_audits_table():
    """An export with nothing to publish still has an [audits] table."""
    text = to_toml(AuditsFile())
    assert "[audits]" in text
    assert tomlkit.parse(text).unwrap() == {"audits": {}}
