# app/domain/locality.py
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

# Nearby-area groupings. A town may sit in more than one (Warrington).
SUBREGIONS: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "merseyside": frozenset({"liverpool", "southport", "formby", "st helens"}),
        "greater_manchester": frozenset({"manchester", "warrington", "wigan"}),
        "lancashire": frozenset({"preston", "blackpool"}),
        "cheshire": frozenset({"chester", "warrington"}),
    }
)

# Coarser groupings, expressed as sets of sub-regions.
REGIONS: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "north_west": frozenset({"merseyside", "greater_manchester", "lancashire", "cheshire"}),
    }
)


def normalize_area(name: str | None) -> str:
    if not name:
        return ""
    return re.sub(r"\s+", " ", str(name)).strip().lower()


def subregions_of(area: str | None) -> set[str]:
    a = normalize_area(area)
    if not a:
        return set()
    return {sub for sub, towns in SUBREGIONS.items() if a in towns}


def regions_of(area: str | None) -> set[str]:
    subs = subregions_of(area)
    return {region for region, members in REGIONS.items() if subs & members}


def same_subregion(a: str | None, b: str | None) -> bool:
    return bool(subregions_of(a) & subregions_of(b))


def same_region(a: str | None, b: str | None) -> bool:
    return bool(regions_of(a) & regions_of(b))
