"""
Review Audits: export trusted package reviews as cargo-vet audits.

Takes a snapshot of peer reviews plus the reviewer trust levels computed by an
external web-of-trust oracle, keeps the reviews worth exporting, tags each with
vetting criteria, collapses pareto-dominated endorsements, and produces an
audits document ready for serialization to audits.toml.
"""

__version__ = "0.1.0"
