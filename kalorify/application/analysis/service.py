"""
Food Analysis Service.

Coordinates one photo analysis: webhook call, response parsing and
localization. Failures are logged and turned into a single user-facing
message; no partial report is ever returned.

Design Pattern: Service Layer + Dependency Injection
"""

from __future__ import annotations

import time
from typing import Optional

import structlog

from kalorify.domain.analysis.models import ImageUpload
from kalorify.domain.analysis.outcome import AnalysisOutcome, FailureKind
from kalorify.domain.analysis.parser import ResponseParser
from kalorify.domain.analysis.ports import IAnalysisTransport
from kalorify.domain.localization.resolver import LocalizationResolver
from kalorify.domain.shared.errors import MalformedResponseError, TransportError

logger = structlog.get_logger(__name__)

_SPLIT_MESSAGE_KEYS = {
    FailureKind.TRANSPORT: "transport_failed",
    FailureKind.MALFORMED_RESPONSE: "malformed_response",
}


class FoodAnalysisService:
    """
    Analyzes food photos end to end.

    Dependencies (injected):
    - transport: IAnalysisTransport - remote analysis webhook
    - resolver: LocalizationResolver - display language tables

    By default transport and malformed-response failures share one
    message; split_errors=True gives each its own.

    Example:
        >>> async with AnalysisWebhookClient() as client:
        ...     service = FoodAnalysisService(
        ...         transport=client,
        ...         resolver=LocalizationResolver(load_catalog("tr")),
        ...     )
        ...     outcome = await service.analyze(ImageUpload.from_path("meal.jpg"))
        >>> print(outcome.status)
    """

    def __init__(
        self,
        transport: IAnalysisTransport,
        resolver: LocalizationResolver,
        split_errors: bool = False,
    ):
        """
        Initialize service with dependencies.

        Args:
            transport: Analysis webhook transport
            resolver: Localization resolver
            split_errors: Distinct user-facing message per failure kind
        """
        self.transport = transport
        self.resolver = resolver
        self.split_errors = split_errors

    def failure_message(self, kind: FailureKind) -> str:
        """User-facing message for a failure kind."""
        if self.split_errors:
            return self.resolver.catalog.message(_SPLIT_MESSAGE_KEYS[kind])
        return self.resolver.catalog.message("analysis_failed")

    async def analyze(self, upload: ImageUpload) -> AnalysisOutcome:
        """
        Analyze one food photo.

        Workflow:
        1. Submit photo to the webhook
        2. Parse response, keep envelope 0
        3. Localize every text field

        Args:
            upload: Photo to analyze

        Returns:
            AnalysisOutcome: COMPLETED with report, NO_RESULT, or FAILED
        """
        start_time = time.time()

        try:
            response = await self.transport.submit(upload)
            result = ResponseParser.parse(response)
        except TransportError as e:
            return self._failed(FailureKind.TRANSPORT, e, start_time, status_code=e.status_code)
        except MalformedResponseError as e:
            return self._failed(FailureKind.MALFORMED_RESPONSE, e, start_time)

        processing_time_ms = int((time.time() - start_time) * 1000)

        if result is None:
            logger.info(
                "Analysis returned no result",
                filename=upload.filename,
                processing_time_ms=processing_time_ms,
            )
            return AnalysisOutcome.no_result()

        report = self.resolver.resolve_result(result)
        logger.info(
            "Analysis completed",
            filename=upload.filename,
            items=len(report.items),
            language=self.resolver.language,
            processing_time_ms=processing_time_ms,
        )
        return AnalysisOutcome.completed(report)

    def _failed(
        self,
        kind: FailureKind,
        error: Exception,
        start_time: float,
        status_code: Optional[int] = None,
    ) -> AnalysisOutcome:
        logger.error(
            "Analysis failed",
            error_kind=kind.value,
            error=str(error),
            status_code=status_code,
            processing_time_ms=int((time.time() - start_time) * 1000),
        )
        return AnalysisOutcome.failed(kind, self.failure_message(kind))
