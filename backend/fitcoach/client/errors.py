"""
Error taxonomy of the coaching client.

Every failure surfaced to the dashboard is one of these; none of them is
fatal to the session. ``PartialResult`` is not raised: it is attached to a
successful enrichment whose record is missing some fields.
"""
from dataclasses import dataclass, field
from typing import List, Optional


class CoachError(Exception):
    """Base class for client side failures."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NetworkFailure(CoachError):
    """Transport error or 5xx. Safe to retry."""


class NotFound(CoachError):
    pass


class ValidationFailure(CoachError):
    """Rejected before sending, or by the backend with a 400/422."""


class GenerationError(CoachError):
    """The AI produced no usable result."""


@dataclass
class PartialResult:
    missing_fields: List[str] = field(default_factory=list)

    @property
    def warning(self) -> str:
        return f"Incomplete exercise details: {', '.join(self.missing_fields)}"
