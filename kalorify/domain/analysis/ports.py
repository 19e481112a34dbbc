"""
Ports (Interfaces) for analysis dependencies.

Design Pattern: Ports & Adapters (Hexagonal Architecture)
"""

from typing import Protocol, runtime_checkable

from kalorify.domain.analysis.models import ImageUpload, RawAnalysisResponse


@runtime_checkable
class IAnalysisTransport(Protocol):
    """
    Port for the remote food analysis service.

    Implementations send one photo and hand back the raw response.
    Status and body interpretation belongs to ResponseParser.
    """

    async def submit(self, upload: ImageUpload) -> RawAnalysisResponse:
        """
        Submit a photo for analysis.

        Args:
            upload: Photo bytes and metadata

        Returns:
            RawAnalysisResponse with status code and body

        Raises:
            TransportError: If no response could be obtained
        """
        ...
