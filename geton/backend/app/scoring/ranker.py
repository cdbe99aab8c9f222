# app/scoring/ranker.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Literal

from ..domain.types import CompatibilityScore, Property, RenterProfile
from .compatibility import calculate_compatibility

log = logging.getLogger(__name__)

FilterBy = Literal["all", "high_match", "has_guarantor", "no_pets"]
FILTERS: tuple[str, ...] = ("all", "high_match", "has_guarantor", "no_pets")

DEFAULT_HIGH_MATCH_THRESHOLD = 70


@dataclass(frozen=True)
class RankedRenter:
    renter: RenterProfile
    score: CompatibilityScore


def _keep(r: RankedRenter, filter_by: str, high_match_threshold: int) -> bool:
    if filter_by == "high_match":
        return r.score.overall >= high_match_threshold
    if filter_by == "has_guarantor":
        return r.renter.has_guarantor
    if filter_by == "no_pets":
        return not r.renter.has_pets
    return True


def rank_renters(
    prop: Property,
    renters: Iterable[RenterProfile],
    *,
    filter_by: str = "all",
    descending: bool = True,
    high_match_threshold: int = DEFAULT_HIGH_MATCH_THRESHOLD,
) -> list[RankedRenter]:
    """
    Landlord "interested renters" view:
      score every renter against one property, filter, sort by overall.
    Sort is stable, so ties keep the caller's order (e.g. most recent interest first).
    """
    if filter_by not in FILTERS:
        raise ValueError(f"Unknown filter_by: {filter_by!r} (expected one of {', '.join(FILTERS)})")

    scored = [RankedRenter(renter=r, score=calculate_compatibility(r, prop)) for r in renters]
    kept = [r for r in scored if _keep(r, filter_by, high_match_threshold)]
    kept.sort(key=lambda r: r.score.overall, reverse=descending)

    log.debug(
        "ranked renters property=%s scored=%d kept=%d filter=%s",
        prop.id,
        len(scored),
        len(kept),
        filter_by,
    )
    return kept
