"""Pydantic schemas for request/response validation."""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum

from horse_diet.core.calculations import Status


class WeightUnit(str, Enum):
    KG = "kg"
    LBS = "lbs"


# Feed catalog schemas
class FeedProfile(BaseModel):
    """One record of the feed data file (camelCase keys)."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, max_length=200)
    digestible_energy: float = Field(..., ge=0, alias="digestibleEnergy")  # Mcal/lb
    crude_protein: float = Field(..., ge=0, le=100, alias="crudeProtein")  # %
    calcium: float = Field(..., ge=0)  # g/lb
    phosphorus: float = Field(..., ge=0)  # g/lb
    vitamin_e: float = Field(..., ge=0, alias="vitaminE")  # IU/lb


class FeedResponse(BaseModel):
    feed_id: str
    name: str
    digestible_energy: float
    crude_protein: float
    calcium: float
    phosphorus: float
    vitamin_e: float

    class Config:
        from_attributes = True


# Diet evaluation schemas
class DietEntry(BaseModel):
    # Loosely typed so a bad row is skipped instead of failing the request
    feed_id: Any = None
    amount: Any = Field(None, description="Amount fed in lbs/day")


class DietEvaluateRequest(BaseModel):
    weight: float = Field(..., gt=0, allow_inf_nan=False, description="Horse body weight")
    weight_unit: WeightUnit = WeightUnit.LBS
    entries: list[DietEntry] = []


class NutrientValuesResponse(BaseModel):
    energy: float
    protein: float
    calcium: float
    phosphorus: float
    vitamin_e: float


class NutrientStatusResponse(BaseModel):
    nutrient: str
    label: str
    required: float
    intake: float
    percent_met: Optional[float]
    status: Status


class DietEvaluateResponse(BaseModel):
    weight_lbs: float
    has_valid_feed: bool
    valid_entries: int
    skipped_entries: int
    message: Optional[str] = None
    requirements: NutrientValuesResponse
    totals: Optional[NutrientValuesResponse] = None
    nutrients: list[NutrientStatusResponse] = []
