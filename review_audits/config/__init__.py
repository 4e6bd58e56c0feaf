"""
Configuration management for review exports.

Loads settings from environment variables and an optional .env file and
exposes them as a single ExportSettings object.
"""

from review_audits.config.settings import ExportSettings, get_settings  # noqa: F401

__all__ = ["ExportSettings", "get_settings"]
