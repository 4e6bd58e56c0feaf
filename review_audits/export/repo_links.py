"""
Public links for a published audits.toml.

Given the git remote of the proofs repository the audits file is committed
to, derive the https URL of the repo, the raw URL cargo-vet can import the
file from, and the repository owner (used as the import name).
"""

from __future__ import annotations

from dataclasses import dataclass

AUDITS_FILE_NAME = "audits.toml"


@dataclass(frozen=True)
class RepoLinks:
    repo_git_url: str | None
    repo_https_url: str | None = None
    repo_name: str | None = None


def normalize_remote_url(remote_url: str) -> str:
    """git@host:path -> https://host/path; other URLs unchanged."""
    if remote_url.startswith("git@"):
        host, sep, rest = remote_url[len("git@"):].partition(":")
        if sep:
            return f"https://{host}/{rest}"
    return remote_url


def repo_links(remote_url: str | None) -> RepoLinks:
    """Raw audits.toml URL and owner for GitHub and GitLab remotes."""
    if not remote_url:
        return RepoLinks(repo_git_url=None)
    git_url = normalize_remote_url(remote_url.strip())
    url = git_url.rstrip("/")
    if url.endswith(".git"):
        url = url[: -len(".git")]

    github = "https://github.com/"
    gitlab = "https://gitlab.com/"
    if url.startswith(github):
        rest = url[len(github):]
        return RepoLinks(
            repo_git_url=git_url,
            repo_https_url=f"https://raw.githubusercontent.com/{rest}/HEAD/{AUDITS_FILE_NAME}",
            repo_name=rest.split("/", 1)[0],
        )
    if url.startswith(gitlab):
        rest = url[len(gitlab):]
        return RepoLinks(
            repo_git_url=git_url,
            repo_https_url=f"https://gitlab.com/{rest}/-/raw/HEAD/{AUDITS_FILE_NAME}",
            repo_name=rest.split("/", 1)[0],
        )
    return RepoLinks(repo_git_url=git_url)
