"""Runtime collaborators shared by every handler invocation."""

from __future__ import annotations

from dataclasses import dataclass, field

from row_transform.config import get_settings
from row_transform.utils.identifiers import IdentifierProvider, get_identifier_provider


@dataclass(frozen=True)
class TransformContext:
    """
    Collaborators handed to transformation handlers.

    Attributes:
        identifiers: Source of fresh identifiers for generate-identifier
        default_zone: Zone for date transformations without zone/timezone
    """

    identifiers: IdentifierProvider = field(default_factory=get_identifier_provider)
    default_zone: str = "UTC"

    @classmethod
    def from_settings(cls) -> "TransformContext":
        """Build a context using the configured default zone."""
        return cls(default_zone=get_settings().default_timezone)


__all__ = ["TransformContext"]
