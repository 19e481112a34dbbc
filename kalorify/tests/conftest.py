"""
Shared fixtures for Kalorify tests.

Payloads follow the analysis webhook format: a JSON array of envelopes,
only the first one being consumed.
"""

import json
from typing import Any, Union
from unittest.mock import AsyncMock

import pytest

from kalorify.application.analysis.service import FoodAnalysisService
from kalorify.domain.analysis.models import ImageUpload, RawAnalysisResponse
from kalorify.domain.localization.catalog import LocalizationCatalog, load_catalog
from kalorify.domain.localization.resolver import LocalizationResolver
from kalorify.infrastructure.webhook.client import AnalysisWebhookClient


def make_response(payload: Union[list[Any], dict[str, Any]], status_code: int = 200) -> RawAnalysisResponse:
    """Build a raw webhook response with a JSON body."""
    return RawAnalysisResponse(status_code=status_code, body=json.dumps(payload).encode("utf-8"))


# ═══════════════════════════════════════════════════════════
# PAYLOAD FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def pizza_payload() -> list[dict[str, Any]]:
    """Single pizza, quality/overallTip summary pair."""
    return [
        {
            "output": {
                "items": [
                    {
                        "name": "Pizza",
                        "portion_g": 150,
                        "calories_kcal": 400,
                        "protein_g": 15,
                        "carbs_g": 45,
                        "fat_g": 18,
                        "method": "vision",
                        "dietFit": ["high-fat"],
                        "note": "",
                        "tip": "",
                    }
                ],
                "totals": {
                    "portion_g": 150,
                    "calories_kcal": 400,
                    "protein_g": 15,
                    "carbs_g": 45,
                    "fat_g": 18,
                },
                "summary": {"quality": "High in carbs and fats, moderate protein."},
            }
        }
    ]


@pytest.fixture
def steak_payload() -> list[dict[str, Any]]:
    """Steak plate with two items, balance/general_tip summary pair."""
    return [
        {
            "output": {
                "items": [
                    {
                        "name": "Grilled Ribeye Steak",
                        "portion_g": 250,
                        "calories_kcal": 680,
                        "protein_g": 58,
                        "carbs_g": 0,
                        "fat_g": 49,
                        "method": "vision",
                        "dietFit": ["high-protein", "low-carb", "keto"],
                        "note": "High in protein and essential nutrients like iron and B12, but also high in saturated fat.",
                        "tip": "Consider trimming visible fat or reducing portion size to 170g",
                    },
                    {
                        "name": "Mixed Green Salad",
                        "portion_g": 80,
                        "calories_kcal": 20,
                        "protein_g": 1.5,
                        "carbs_g": 3.5,
                        "fat_g": 0.2,
                        "method": "vision",
                        "dietFit": ["vegan", "low-calorie"],
                        "note": "Rich in vitamins, minerals, and fiber",
                        "tip": "Add a variety of colorful vegetables for more nutrients",
                    },
                ],
                "totals": {
                    "portion_g": 330,
                    "calories_kcal": 700,
                    "protein_g": 59.5,
                    "carbs_g": 3.5,
                    "fat_g": 49.2,
                },
                "summary": {
                    "balance": "High protein and high fat meal with moderate carbs, dominated by the steak portion",
                    "general_tip": "Consider reducing steak portion and increasing vegetables for better balance, or choose a leaner cut of meat",
                },
            }
        }
    ]


@pytest.fixture
def sample_upload() -> ImageUpload:
    """Small fake JPEG upload."""
    return ImageUpload(filename="meal.jpg", content=b"\xff\xd8\xff\xe0fake", content_type="image/jpeg")


# ═══════════════════════════════════════════════════════════
# LOCALIZATION FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def tr_catalog() -> LocalizationCatalog:
    """Turkish catalog shipped with the package."""
    return load_catalog("tr")


@pytest.fixture
def resolver(tr_catalog: LocalizationCatalog) -> LocalizationResolver:
    """Turkish resolver."""
    return LocalizationResolver(tr_catalog)


# ═══════════════════════════════════════════════════════════
# SERVICE FIXTURES WITH DEPENDENCY INJECTION
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def mock_transport() -> AsyncMock:
    """Mock analysis webhook client.

    Default behavior: empty envelope list.
    Override submit.return_value / side_effect in tests.
    """
    transport = AsyncMock(spec=AnalysisWebhookClient)
    transport.submit.return_value = make_response([])
    return transport


@pytest.fixture
def analysis_service(mock_transport: AsyncMock, resolver: LocalizationResolver) -> FoodAnalysisService:
    """Analysis service with mocked transport and Turkish resolver."""
    return FoodAnalysisService(transport=mock_transport, resolver=resolver)
