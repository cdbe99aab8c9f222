# app/scoring/compatibility.py
"""
Renter <-> property compatibility scoring.

Score breakdown (100 points total):
  - affordability   30  (income vs rent ratio)
  - location        20  (area match)
  - timing          15  (move-in date alignment)
  - property_fit    20  (occupancy, pets, smoking, guarantor, history)
  - tenant_history  15  (previous ratings)

Pure and deterministic: no I/O, no config, never raises for well-typed input.
"""
from __future__ import annotations

import math
from typing import Any

from ..domain.locality import normalize_area, same_region, same_subregion
from ..domain.parsing import enum_str, to_datetime, to_non_negative_float
from ..domain.types import (
    CompatibilityBreakdown,
    CompatibilityFlag,
    CompatibilityScore,
    Property,
    RenterProfile,
    UserRatingsSummary,
)

WEIGHTS: dict[str, int] = {
    "affordability": 30,
    "location": 20,
    "timing": 15,
    "property_fit": 20,
    "tenant_history": 15,
}

INCOME_RATIO_IDEAL = 3.0
INCOME_RATIO_GOOD = 2.5
INCOME_RATIO_MINIMUM = 2.0

TIMING_PERFECT_WINDOW_DAYS = 7
TIMING_GOOD_WINDOW_DAYS = 30
TIMING_ACCEPTABLE_WINDOW_DAYS = 60

EXCELLENT_REFERENCES_MIN_AVG = 4.5

SITUATION_OCCUPANTS: dict[str, int] = {
    "Single": 1,
    "Couple": 2,
    "Family": 4,  # average family size
    "Professional Sharers": 3,
}
DEFAULT_EXPECTED_OCCUPANTS = 2
DEFAULT_MAX_OCCUPANTS = 4


def round_half_up(x: float) -> int:
    """Round .5 away from zero for non-negative x (not banker's rounding)."""
    return int(math.floor(x + 0.5))


def affordability_score(monthly_income: float | None, rent_pcm: float | None) -> tuple[int, CompatibilityFlag | None]:
    """
    Ratio bands (income / rent):
      >= 3.0     => 30                 income_strong
      2.5 - 3.0  => 80-100% of 30      (no flag)
      2.0 - 2.5  => 50-80% of 30       income_marginal
      < 2.0      => 0-50% of 30
    """
    max_points = WEIGHTS["affordability"]
    income = to_non_negative_float(monthly_income)
    rent = to_non_negative_float(rent_pcm)

    if income <= 0:
        return 0, None
    if rent <= 0:
        # free property with some income => perfect
        return max_points, CompatibilityFlag.income_strong

    ratio = income / rent
    if ratio >= INCOME_RATIO_IDEAL:
        return max_points, CompatibilityFlag.income_strong
    if ratio >= INCOME_RATIO_GOOD:
        p = (ratio - INCOME_RATIO_GOOD) / (INCOME_RATIO_IDEAL - INCOME_RATIO_GOOD)
        return round_half_up(max_points * (0.8 + 0.2 * p)), None
    if ratio >= INCOME_RATIO_MINIMUM:
        p = (ratio - INCOME_RATIO_MINIMUM) / (INCOME_RATIO_GOOD - INCOME_RATIO_MINIMUM)
        return round_half_up(max_points * (0.5 + 0.3 * p)), CompatibilityFlag.income_marginal

    p = ratio / INCOME_RATIO_MINIMUM
    return round_half_up(max_points * 0.5 * p), None


def location_score(renter_area: str | None, property_city: str | None) -> int:
    max_points = WEIGHTS["location"]
    a = normalize_area(renter_area)
    b = normalize_area(property_city)

    if a == b:
        return max_points
    if same_subregion(a, b):
        return round_half_up(max_points * 0.8)
    if same_region(a, b):
        return round_half_up(max_points * 0.5)
    # floor: they might still be interested
    return round_half_up(max_points * 0.25)


def days_apart(a: Any, b: Any) -> float | None:
    da = to_datetime(a)
    db = to_datetime(b)
    if da is None or db is None:
        return None
    return abs((da - db).total_seconds()) / 86400.0


def timing_score(
    preferred_move_in: Any,
    available_from: Any,
) -> tuple[int, CompatibilityFlag | None]:
    max_points = WEIGHTS["timing"]

    if to_datetime(preferred_move_in) is None:
        return max_points, CompatibilityFlag.move_date_flexible

    d = days_apart(preferred_move_in, available_from)
    if d is None:
        # property has no usable availability date: nothing to misalign with
        return max_points, None

    if d <= TIMING_PERFECT_WINDOW_DAYS:
        return max_points, None
    if d <= TIMING_GOOD_WINDOW_DAYS:
        p = (TIMING_GOOD_WINDOW_DAYS - d) / (TIMING_GOOD_WINDOW_DAYS - TIMING_PERFECT_WINDOW_DAYS)
        return round_half_up(max_points * (0.7 + 0.3 * p)), None
    if d <= TIMING_ACCEPTABLE_WINDOW_DAYS:
        p = (TIMING_ACCEPTABLE_WINDOW_DAYS - d) / (TIMING_ACCEPTABLE_WINDOW_DAYS - TIMING_GOOD_WINDOW_DAYS)
        return round_half_up(max_points * (0.4 + 0.3 * p)), None
    return round_half_up(max_points * 0.2), CompatibilityFlag.move_date_mismatch


def situation_score(situation: Any, max_occupants: int | None) -> int:
    """Occupancy fit, 0-7."""
    expected = SITUATION_OCCUPANTS.get(enum_str(situation) or "", DEFAULT_EXPECTED_OCCUPANTS)
    capacity = max_occupants if max_occupants and max_occupants > 0 else DEFAULT_MAX_OCCUPANTS

    if expected > capacity:
        return 2

    utilization = expected / capacity
    if utilization >= 0.5:
        return 7
    if utilization >= 0.25:
        return 5
    return 3


def pet_score(renter: RenterProfile, prop: Property) -> int:
    """Pet compatibility, 1-5. No pets => 5."""
    if not renter.has_pets:
        return 5

    policy = prop.pets_policy
    if policy is None or not policy.will_consider_pets:
        return 2

    pets = renter.pet_details or ()
    preferred = set(policy.preferred_pet_types or ())
    unsuitable = set(policy.property_unsuitable_for or ())

    score = 3.0
    for pet in pets:
        if pet.type in preferred:
            score += 0.5
        if pet.type == "dog" and "large_dogs" in unsuitable:
            score -= 1.0

    if any(p.has_insurance for p in pets):
        score += 1.0

    return max(1, min(5, round_half_up(score)))


def smoking_score(smoking_status: Any) -> int:
    s = enum_str(smoking_status)
    if s == "Non-Smoker" or s is None:
        return 3
    if s == "Vaper":
        return 2
    return 1


def property_fit_score(renter: RenterProfile, prop: Property) -> int:
    score = 0.0
    score += situation_score(renter.situation, prop.max_occupants)
    score += pet_score(renter, prop)
    score += smoking_score(renter.smoking_status)

    if renter.has_guarantor:
        score += 2

    if renter.has_rental_history and renter.previous_landlord_reference is not None:
        score += 3
    elif renter.has_rental_history:
        score += 1.5

    return min(round_half_up(score), WEIGHTS["property_fit"])


def tenant_history_score(ratings: UserRatingsSummary | None) -> int:
    """
    No summary => neutral 50% (first-time renters aren't penalised).
    Any summary, even with zero ratings counted, is scored from its average:
    average (0-5) scaled to 15, plus 0-2 experience bonus, capped.
    """
    max_points = WEIGHTS["tenant_history"]
    if ratings is None:
        return round_half_up(max_points * 0.5)

    avg = max(0.0, min(5.0, to_non_negative_float(ratings.average_overall_score)))
    rating_points = (avg / 5.0) * max_points

    total = ratings.total_ratings or 0
    experience_bonus = 0
    if total >= 5:
        experience_bonus = 2
    elif total >= 2:
        experience_bonus = 1

    return min(round_half_up(rating_points + experience_bonus), max_points)


def calculate_compatibility(renter: RenterProfile, prop: Property) -> CompatibilityScore:
    affordability, income_flag = affordability_score(renter.monthly_income, prop.rent_pcm)
    timing, timing_flag = timing_score(renter.preferred_move_in_date, prop.available_from)

    city = prop.address.city if prop.address is not None else None
    breakdown = CompatibilityBreakdown(
        affordability=affordability,
        location=location_score(renter.local_area, city),
        timing=timing,
        property_fit=property_fit_score(renter, prop),
        tenant_history=tenant_history_score(renter.ratings_summary),
    )

    flags: list[CompatibilityFlag] = []
    if income_flag is not None:
        flags.append(income_flag)
    if timing_flag is not None:
        flags.append(timing_flag)
    if renter.has_pets:
        flags.append(CompatibilityFlag.pet_requires_approval)
    if not renter.has_rental_history:
        flags.append(CompatibilityFlag.first_time_renter)
    rs = renter.ratings_summary
    if rs is not None and to_non_negative_float(rs.average_overall_score) >= EXCELLENT_REFERENCES_MIN_AVG:
        flags.append(CompatibilityFlag.excellent_references)
    if renter.has_guarantor:
        flags.append(CompatibilityFlag.has_guarantor)

    return CompatibilityScore(
        overall=round_half_up(breakdown.total()),
        breakdown=breakdown,
        flags=tuple(flags),
    )
