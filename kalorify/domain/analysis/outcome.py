"""
Analysis outcome models.

What the caller receives for one submitted photo: a report, the
"no result" state, or a user-facing failure message.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from kalorify.domain.localization.models import LocalizedReport


class AnalysisStatus(str, Enum):
    """Final state of one analysis request."""

    COMPLETED = "COMPLETED"  # Report available
    NO_RESULT = "NO_RESULT"  # Analyzer returned no envelope
    FAILED = "FAILED"  # Transport or response-shape failure


class FailureKind(str, Enum):
    """Internal failure category, kept for diagnostics."""

    TRANSPORT = "TRANSPORT"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"


class AnalysisOutcome(BaseModel):
    """
    Result of analyzing one photo.

    Invariants:
    - COMPLETED carries a report and no error
    - NO_RESULT and FAILED carry no report (never a partial one)
    - FAILED carries error_kind and error_message

    Example:
        >>> outcome = AnalysisOutcome.no_result()
        >>> assert outcome.report is None
    """

    model_config = ConfigDict(frozen=True)

    status: AnalysisStatus
    report: Optional[LocalizedReport] = None
    error_kind: Optional[FailureKind] = None
    error_message: Optional[str] = Field(None, description="User-facing message")

    @model_validator(mode="after")
    def consistent_state(self) -> AnalysisOutcome:
        """Ensure fields match the status."""
        if self.status == AnalysisStatus.COMPLETED:
            if self.report is None or self.error_kind is not None:
                raise ValueError("COMPLETED outcome requires a report and no error")
        elif self.report is not None:
            raise ValueError(f"{self.status.value} outcome cannot carry a report")
        if self.status == AnalysisStatus.FAILED:
            if self.error_kind is None or not self.error_message:
                raise ValueError("FAILED outcome requires error kind and message")
        return self

    @classmethod
    def completed(cls, report: LocalizedReport) -> AnalysisOutcome:
        """Outcome with a resolved report."""
        return cls(status=AnalysisStatus.COMPLETED, report=report)

    @classmethod
    def no_result(cls) -> AnalysisOutcome:
        """Outcome for an empty envelope list."""
        return cls(status=AnalysisStatus.NO_RESULT)

    @classmethod
    def failed(cls, kind: FailureKind, message: str) -> AnalysisOutcome:
        """Outcome for a failed request."""
        return cls(status=AnalysisStatus.FAILED, error_kind=kind, error_message=message)

    def is_success(self) -> bool:
        """True unless the request failed."""
        return self.status != AnalysisStatus.FAILED
