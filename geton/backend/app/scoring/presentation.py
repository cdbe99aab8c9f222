# app/scoring/presentation.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..domain.types import CompatibilityFlag, CompatibilityScore
from .compatibility import WEIGHTS

FlagType = Literal["positive", "neutral", "attention"]
Tier = Literal["excellent", "good", "fair", "low"]

FLAG_DESCRIPTIONS: dict[str, str] = {
    CompatibilityFlag.income_marginal.value: "Income is 2-2.5x rent (acceptable)",
    CompatibilityFlag.income_strong.value: "Income is 3x+ rent (excellent)",
    CompatibilityFlag.move_date_mismatch.value: "Move-in dates may need alignment",
    CompatibilityFlag.move_date_flexible.value: "Flexible on move-in date",
    CompatibilityFlag.pet_requires_approval.value: "Has pets requiring approval",
    CompatibilityFlag.first_time_renter.value: "First-time renter",
    CompatibilityFlag.excellent_references.value: "Excellent previous ratings",
    CompatibilityFlag.has_guarantor.value: "Has a guarantor",
    CompatibilityFlag.verified_income.value: "Income verified",
    CompatibilityFlag.long_term_seeker.value: "Looking for long-term tenancy",
}

POSITIVE_FLAGS: frozenset[str] = frozenset(
    {
        CompatibilityFlag.income_strong.value,
        CompatibilityFlag.excellent_references.value,
        CompatibilityFlag.has_guarantor.value,
        CompatibilityFlag.verified_income.value,
        CompatibilityFlag.move_date_flexible.value,
        CompatibilityFlag.long_term_seeker.value,
    }
)

NEUTRAL_FLAGS: frozenset[str] = frozenset(
    {
        CompatibilityFlag.first_time_renter.value,
        CompatibilityFlag.income_marginal.value,
    }
)

BREAKDOWN_LABELS: dict[str, str] = {
    "affordability": "Affordability",
    "location": "Location",
    "timing": "Move-in Timing",
    "property_fit": "Property Fit",
    "tenant_history": "Rental History",
}

# front-end payloads use camelCase keys
_BREAKDOWN_KEY_ALIASES: dict[str, str] = {
    "propertyFit": "property_fit",
    "tenantHistory": "tenant_history",
}


@dataclass(frozen=True)
class ScoreTier:
    tier: Tier
    label: str
    color: str


def _flag_str(flag: CompatibilityFlag | str) -> str:
    return flag.value if isinstance(flag, CompatibilityFlag) else str(flag)


def get_flag_description(flag: CompatibilityFlag | str) -> str:
    s = _flag_str(flag)
    return FLAG_DESCRIPTIONS.get(s, s)


def get_flag_type(flag: CompatibilityFlag | str) -> FlagType:
    s = _flag_str(flag)
    if s in POSITIVE_FLAGS:
        return "positive"
    if s in NEUTRAL_FLAGS:
        return "neutral"
    return "attention"


def get_score_tier(overall: float) -> ScoreTier:
    if overall >= 80:
        return ScoreTier("excellent", "Excellent Match", "text-success-600")
    if overall >= 60:
        return ScoreTier("good", "Good Match", "text-primary-600")
    if overall >= 40:
        return ScoreTier("fair", "Fair Match", "text-warning-600")
    return ScoreTier("low", "Low Match", "text-neutral-500")


def format_score(overall: int) -> str:
    return f"{overall}%"


def _breakdown_key(key: str) -> str:
    return _BREAKDOWN_KEY_ALIASES.get(key, key)


def get_breakdown_label(key: str) -> str:
    """Raises KeyError for anything that isn't one of the five breakdown keys."""
    return BREAKDOWN_LABELS[_breakdown_key(key)]


def get_breakdown_max(key: str) -> int:
    return WEIGHTS[_breakdown_key(key)]


def affordability_text(affordability: int) -> str:
    """Short badge copy for the renter card, derived from the affordability points."""
    if affordability >= 27:
        return "3x+ rent"
    if affordability >= 24:
        return "~3x rent"
    if affordability >= 18:
        return "2.5x rent"
    if affordability >= 15:
        return "~2.5x rent"
    return "Check affordability"


def explain(score: CompatibilityScore) -> str:
    """
    Human-debuggable explanation string.

    Example:
      affordability=30/30 | location=16/20 | timing=15/15 | property_fit=18/20 |
      tenant_history=8/15 | overall=87 | income_strong,move_date_flexible
    """
    bits: list[str] = []
    b = score.breakdown
    for k in ("affordability", "location", "timing", "property_fit", "tenant_history"):
        bits.append(f"{k}={getattr(b, k)}/{WEIGHTS[k]}")

    bits.append(f"overall={score.overall}")
    if score.flags:
        bits.append(",".join(f.value for f in score.flags))

    return " | ".join(bits)
