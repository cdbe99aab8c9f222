# app/service_layer/scoring.py
from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from ..domain.types import CompatibilityScore
from ..schemas import (
    BreakdownOut,
    CompatibilityOut,
    FlagOut,
    RankedRenterOut,
    RankResult,
    TierOut,
)
from ..scoring.compatibility import calculate_compatibility
from ..scoring.presentation import (
    affordability_text,
    explain,
    format_score,
    get_flag_description,
    get_flag_type,
    get_score_tier,
)
from ..scoring.ranker import rank_renters
from ..services.normalize import property_from_payload, renter_from_payload

log = logging.getLogger(__name__)


def to_out(score: CompatibilityScore) -> CompatibilityOut:
    """Attach the display layer (tier, flag copy, explain) to a raw score."""
    tier = get_score_tier(score.overall)
    return CompatibilityOut(
        overall=score.overall,
        formatted=format_score(score.overall),
        breakdown=BreakdownOut(**asdict(score.breakdown)),
        flags=[
            FlagOut(flag=f.value, description=get_flag_description(f), type=get_flag_type(f))
            for f in score.flags
        ],
        tier=TierOut(tier=tier.tier, label=tier.label, color=tier.color),
        affordability_text=affordability_text(score.breakdown.affordability),
        explain=explain(score),
    )


def score_pair(renter_payload: dict[str, Any], property_payload: dict[str, Any]) -> CompatibilityOut:
    """
    Payload-in / response-out wrapper around calculate_compatibility.
    ValueError propagates for rows missing income/area/rent/city.
    """
    renter = renter_from_payload(renter_payload)
    prop = property_from_payload(property_payload)
    score = calculate_compatibility(renter, prop)
    log.debug("scored renter=%s property=%s %s", renter.id, prop.id, explain(score))
    return to_out(score)


def rank_for_property(
    property_payload: dict[str, Any],
    renter_payloads: list[dict[str, Any]],
    *,
    filter_by: str = "all",
    descending: bool = True,
    high_match_threshold: int = 70,
) -> RankResult:
    prop = property_from_payload(property_payload)
    renters = [renter_from_payload(r) for r in renter_payloads]

    ranked = rank_renters(
        prop,
        renters,
        filter_by=filter_by,
        descending=descending,
        high_match_threshold=high_match_threshold,
    )
    log.info("ranked %d/%d renters for property=%s filter=%s", len(ranked), len(renters), prop.id, filter_by)

    return RankResult(
        property_id=prop.id,
        filter_by=filter_by,
        count=len(ranked),
        renters=[RankedRenterOut(renter_id=r.renter.id, compatibility=to_out(r.score)) for r in ranked],
    )
