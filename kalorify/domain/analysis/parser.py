"""
Analysis response parser.

Validates the webhook response and extracts the analysis record of the
first envelope. Pure and synchronous: safe to call from any context.
"""

from __future__ import annotations

import json
from typing import Any, Optional

import structlog
from pydantic import ValidationError

from kalorify.domain.analysis.models import AnalysisResult, RawAnalysisResponse
from kalorify.domain.shared.errors import MalformedResponseError, TransportError

logger = structlog.get_logger(__name__)


class ResponseParser:
    """
    Parser for analysis webhook responses.

    The webhook answers with a JSON array of envelopes shaped as
    ``{"output": {"items": [...], "totals": {...}, "summary": {...}}}``.
    Only envelope 0 is consumed; an empty array means "no result".

    Example:
        >>> response = RawAnalysisResponse(status_code=200, body=b"[]")
        >>> assert ResponseParser.parse(response) is None
    """

    @staticmethod
    def parse(response: RawAnalysisResponse) -> Optional[AnalysisResult]:
        """
        Parse a webhook response.

        Args:
            response: Status code and raw body from the transport

        Returns:
            AnalysisResult of the first envelope, None for an empty array

        Raises:
            TransportError: If status is not 2xx
            MalformedResponseError: If body is not the expected JSON shape
        """
        if not response.is_success():
            raise TransportError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = json.loads(response.body)
        except (TypeError, ValueError) as e:
            raise MalformedResponseError(f"Response body is not valid JSON: {e}") from e

        return ResponseParser.parse_envelopes(data)

    @staticmethod
    def parse_envelopes(data: Any) -> Optional[AnalysisResult]:
        """
        Extract the analysis record from decoded envelopes.

        Args:
            data: Decoded JSON body

        Returns:
            AnalysisResult of envelope 0, None when there are no envelopes

        Raises:
            MalformedResponseError: If data is not a list of envelopes
        """
        if not isinstance(data, list):
            raise MalformedResponseError(
                f"Expected a list of envelopes, got {type(data).__name__}"
            )

        if not data:
            logger.debug("Empty envelope list")
            return None

        envelope = data[0]
        if not isinstance(envelope, dict) or not isinstance(envelope.get("output"), dict):
            raise MalformedResponseError("Envelope 0 has no 'output' object")

        try:
            result = AnalysisResult.model_validate(envelope["output"])
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid analysis output: {e}") from e

        logger.debug(
            "Parsed analysis envelope",
            envelopes=len(data),
            items=len(result.items),
        )
        return result
