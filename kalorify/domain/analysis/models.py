"""
Domain models for food photo analysis.

Mirror the payload of the remote analysis webhook. Numeric fields are
passed through as received: the analyzer owns their integrity. Values
that read as numbers become floats, anything else is kept as sent.
"""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Number when parseable, raw text otherwise (e.g. "~150")
Amount = Union[float, str]


class AnalysisItem(BaseModel):
    """
    Single food entity detected in the photo.

    Attributes:
        name: Food name in the analyzer's (English) vocabulary
        portion_g: Estimated portion mass in grams
        calories_kcal: Energy in kcal
        protein_g: Protein in grams
        carbs_g: Carbohydrates in grams
        fat_g: Fat in grams
        method: How the analyzer estimated the values (e.g. "vision")
        diet_fit: Diet compatibility tags, in service order
        note: Nutritional note
        tip: Actionable tip

    Example:
        >>> item = AnalysisItem.model_validate({
        ...     "name": "Pizza",
        ...     "portion_g": 150,
        ...     "calories_kcal": 400,
        ...     "dietFit": ["high-fat"],
        ... })
        >>> assert item.diet_fit == ("high-fat",)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Food name")
    portion_g: Optional[Amount] = Field(None, union_mode="left_to_right", description="Portion mass (g)")
    calories_kcal: Optional[Amount] = Field(None, union_mode="left_to_right", description="Energy (kcal)")
    protein_g: Optional[Amount] = Field(None, union_mode="left_to_right", description="Protein (g)")
    carbs_g: Optional[Amount] = Field(None, union_mode="left_to_right", description="Carbohydrates (g)")
    fat_g: Optional[Amount] = Field(None, union_mode="left_to_right", description="Fat (g)")
    method: Optional[str] = Field(None, description="Estimation method")
    diet_fit: tuple[str, ...] = Field(
        default_factory=tuple, alias="dietFit", description="Diet compatibility tags"
    )
    note: Optional[str] = Field(None, description="Nutritional note")
    tip: Optional[str] = Field(None, description="Improvement tip")

    @field_validator("diet_fit", mode="before")
    @classmethod
    def null_diet_fit(cls, v: Any) -> Any:
        """Treat null tags as no tags."""
        return () if v is None else v


class Totals(BaseModel):
    """
    Aggregate values for the whole photo.

    Expected to approximate the sum of the items, but never recomputed:
    the analyzer's totals are displayed as given.
    """

    model_config = ConfigDict(frozen=True)

    portion_g: Optional[Amount] = Field(None, union_mode="left_to_right")
    calories_kcal: Optional[Amount] = Field(None, union_mode="left_to_right")
    protein_g: Optional[Amount] = Field(None, union_mode="left_to_right")
    carbs_g: Optional[Amount] = Field(None, union_mode="left_to_right")
    fat_g: Optional[Amount] = Field(None, union_mode="left_to_right")


class Summary(BaseModel):
    """
    Qualitative assessment of the meal.

    The analyzer fills one of two field pairs:
    (quality, overallTip) or (balance, general_tip).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    quality: Optional[str] = None
    overall_tip: Optional[str] = Field(None, alias="overallTip")
    balance: Optional[str] = None
    general_tip: Optional[str] = None


class AnalysisResult(BaseModel):
    """
    Complete analysis of one submitted photo.

    Lives for a single request; replaced, never merged, by the next one.
    """

    model_config = ConfigDict(frozen=True)

    items: tuple[AnalysisItem, ...] = Field(..., description="Detected food items")
    totals: Totals = Field(..., description="Aggregate values")
    summary: Summary = Field(default_factory=Summary, description="Assessment")

    @field_validator("summary", mode="before")
    @classmethod
    def null_summary(cls, v: Any) -> Any:
        """Treat a null summary as an empty one."""
        return {} if v is None else v


class RawAnalysisResponse(BaseModel):
    """
    Webhook response as received from the transport.

    Attributes:
        status_code: HTTP status code
        body: Raw response body
    """

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: Union[bytes, str] = b""

    def is_success(self) -> bool:
        """True for 2xx status codes."""
        return 200 <= self.status_code < 300


class ImageUpload(BaseModel):
    """
    Food photo to submit for analysis.

    Example:
        >>> upload = ImageUpload(filename="meal.jpg", content=b"...")
        >>> assert upload.content_type == "image/jpeg"
    """

    model_config = ConfigDict(frozen=True)

    filename: str = Field(..., min_length=1)
    content: bytes = Field(..., repr=False)
    content_type: str = "image/jpeg"

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> ImageUpload:
        """Read an image file, guessing its MIME type from the extension."""
        file_path = Path(path)
        guessed, _ = mimetypes.guess_type(file_path.name)
        return cls(
            filename=file_path.name,
            content=file_path.read_bytes(),
            content_type=guessed or "application/octet-stream",
        )
