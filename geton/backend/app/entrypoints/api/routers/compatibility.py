# app/entrypoints/api/routers/compatibility.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..deps import require_api_key
from ....config import settings
from ....schemas import CompatibilityOut, CompatibilityRequest, RankRequest, RankResult
from ....service_layer.scoring import rank_for_property, score_pair

router = APIRouter(tags=["compatibility"], dependencies=[Depends(require_api_key)])


@router.post("/compatibility", response_model=CompatibilityOut)
def compatibility(body: CompatibilityRequest) -> CompatibilityOut:
    try:
        return score_pair(body.renter, body.property)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/compatibility/rank", response_model=RankResult)
def rank(body: RankRequest) -> RankResult:
    try:
        return rank_for_property(
            body.property,
            body.renters,
            filter_by=body.filter_by,
            descending=body.descending,
            high_match_threshold=settings.HIGH_MATCH_THRESHOLD,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
