"""Analysis webhook client - Implements IAnalysisTransport port.

Posts one food photo to the remote analysis webhook and returns the raw
response. One request per submission: no retry, no circuit breaker.
Status and body interpretation is left to ResponseParser.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
import structlog

from kalorify.domain.analysis.models import ImageUpload, RawAnalysisResponse
from kalorify.domain.shared.errors import TransportError
from kalorify.infrastructure.config import DEFAULT_TIMEOUT_S, DEFAULT_WEBHOOK_URL

logger = structlog.get_logger(__name__)


class AnalysisWebhookClient:
    """
    Analysis webhook client implementing IAnalysisTransport port.

    Example:
        >>> async with AnalysisWebhookClient() as client:
        ...     upload = ImageUpload.from_path("meal.jpg")
        ...     response = await client.submit(upload)
        ...     print(response.status_code)
    """

    FORM_FIELD = "file"

    def __init__(
        self,
        url: str = DEFAULT_WEBHOOK_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_S,
    ) -> None:
        """
        Initialize webhook client.

        Args:
            url: Webhook endpoint
            timeout_seconds: Request timeout
        """
        self.url = url
        self.timeout_seconds = timeout_seconds
        self._session: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> AnalysisWebhookClient:
        """Async context manager entry."""
        self._session = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout_seconds))
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        if self._session:
            await self._session.aclose()
            self._session = None

    async def submit(self, upload: ImageUpload) -> RawAnalysisResponse:
        """
        Submit a photo for analysis.

        Implements IAnalysisTransport.submit() port.

        Args:
            upload: Photo to analyze

        Returns:
            RawAnalysisResponse with status code and body, for any status

        Raises:
            TransportError: If client not initialized or request failed
        """
        if not self._session:
            raise TransportError("Client not initialized. Use async context manager.")

        logger.info(
            "Submitting photo for analysis",
            filename=upload.filename,
            size_bytes=len(upload.content),
        )

        files = {self.FORM_FIELD: (upload.filename, upload.content, upload.content_type)}
        try:
            response = await self._session.post(self.url, files=files)
        except httpx.HTTPError as e:
            logger.error(
                "Analysis webhook request failed",
                url=self.url,
                error=str(e),
            )
            raise TransportError(f"Analysis webhook request failed: {e}") from e

        logger.info(
            "Analysis webhook responded",
            status=response.status_code,
            size_bytes=len(response.content),
        )

        return RawAnalysisResponse(
            status_code=response.status_code,
            body=response.content,
        )
