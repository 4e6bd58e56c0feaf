"""
Audits document exporters: audits.toml rendering, distribution index
conversion and publishing links.
"""

from review_audits.export.distro_index import (
    DebianPackage,
    GuixPackage,
    audits_from_debian,
    audits_from_guix,
    debian_to_toml,
    guix_to_toml,
)
from review_audits.export.repo_links import RepoLinks, repo_links
from review_audits.export.toml_export import to_toml

__all__ = [
    "DebianPackage",
    "GuixPackage",
    "audits_from_debian",
    "audits_from_guix",
    "debian_to_toml",
    "guix_to_toml",
    "RepoLinks",
    "repo_links",
    "to_toml",
]
