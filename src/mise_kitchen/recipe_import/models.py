"""Data models for recipe import."""

from dataclasses import dataclass


@dataclass
class ImportValidation:
    """Result of validating an import document."""

    valid: bool
    error: str | None = None
