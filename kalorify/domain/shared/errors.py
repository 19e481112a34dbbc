"""
Domain exceptions.

Typed exceptions for explicit error handling.
The localization resolver is total and has no exception of its own.
"""

from __future__ import annotations

from typing import Optional


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain-specific exceptions inherit from this.
    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# ANALYSIS DOMAIN EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class AnalysisError(DomainError):
    """Base exception for food analysis."""

    pass


class MalformedResponseError(AnalysisError):
    """
    Analysis response does not have the expected shape.

    Raised when:
    - Body is not valid JSON
    - Body is not a list of envelopes
    - First envelope has no usable `output` object

    Example:
        >>> raise MalformedResponseError("Envelope 0 has no 'output' object")
    """

    pass


# ═══════════════════════════════════════════════════════════
# EXTERNAL SERVICE EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ExternalServiceError(DomainError):
    """
    External service call failed.

    Base class for all external service errors.
    """

    pass


class TransportError(ExternalServiceError):
    """
    Analysis webhook call failed.

    Raised when:
    - Webhook answered with a non-success HTTP status
    - Network error before any status was received

    Attributes:
        status_code: HTTP status, None when no response arrived

    Example:
        >>> error = TransportError("HTTP error! status: 502", status_code=502)
        >>> assert error.status_code == 502
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
