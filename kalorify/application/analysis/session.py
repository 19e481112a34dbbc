"""
Analysis session.

Holds the outcome currently on display. One outcome at a time: a new
submission replaces the previous one, reset discards it.
"""

from __future__ import annotations

from typing import Optional

from kalorify.application.analysis.service import FoodAnalysisService
from kalorify.domain.analysis.models import ImageUpload
from kalorify.domain.analysis.outcome import AnalysisOutcome


class AnalysisSession:
    """
    Single-result holder for one user.

    Overlapping submissions are not blocked here; the last one to finish
    owns the session.

    Example:
        >>> session = AnalysisSession(service)
        >>> outcome = await session.submit(ImageUpload.from_path("meal.jpg"))
        >>> assert session.outcome is outcome
        >>> session.reset()
        >>> assert session.outcome is None
    """

    def __init__(self, service: FoodAnalysisService):
        self.service = service
        self.outcome: Optional[AnalysisOutcome] = None
        self.upload: Optional[ImageUpload] = None
        self._pending = 0

    @property
    def is_analyzing(self) -> bool:
        """True while at least one submission is in flight."""
        return self._pending > 0

    async def submit(self, upload: ImageUpload) -> AnalysisOutcome:
        """
        Analyze a photo and make it the current outcome.

        The previous outcome is cleared as soon as the photo is submitted.
        """
        self.upload = upload
        self.outcome = None
        self._pending += 1
        try:
            outcome = await self.service.analyze(upload)
        finally:
            self._pending -= 1
        self.outcome = outcome
        return outcome

    def reset(self) -> None:
        """Discard the current photo and outcome."""
        self.upload = None
        self.outcome = None
