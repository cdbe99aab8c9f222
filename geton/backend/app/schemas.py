from typing import Any, Literal

from pydantic import BaseModel, Field

FilterBy = Literal["all", "high_match", "has_guarantor", "no_pets"]


class CompatibilityRequest(BaseModel):
    # raw renter_profiles / properties rows; snake_case or camelCase keys
    renter: dict[str, Any]
    property: dict[str, Any]


class RankRequest(BaseModel):
    property: dict[str, Any]
    renters: list[dict[str, Any]] = Field(default_factory=list)
    filter_by: FilterBy = "all"
    descending: bool = True


class BreakdownOut(BaseModel):
    affordability: int = Field(..., ge=0, le=30)
    location: int = Field(..., ge=0, le=20)
    timing: int = Field(..., ge=0, le=15)
    property_fit: int = Field(..., ge=0, le=20)
    tenant_history: int = Field(..., ge=0, le=15)


class FlagOut(BaseModel):
    flag: str
    description: str
    type: Literal["positive", "neutral", "attention"]


class TierOut(BaseModel):
    tier: Literal["excellent", "good", "fair", "low"]
    label: str
    color: str


class CompatibilityOut(BaseModel):
    overall: int = Field(..., ge=0, le=100)
    formatted: str
    breakdown: BreakdownOut
    flags: list[FlagOut]
    tier: TierOut
    affordability_text: str
    explain: str


class RankedRenterOut(BaseModel):
    renter_id: str | None = None
    compatibility: CompatibilityOut


class RankResult(BaseModel):
    property_id: str | None = None
    filter_by: FilterBy
    count: int = Field(..., ge=0)
    renters: list[RankedRenterOut]
