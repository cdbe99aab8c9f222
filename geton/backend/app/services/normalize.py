# backend/app/services/normalize.py
from __future__ import annotations

from typing import Any

from ..domain.parsing import get_first, get_nested, to_bool, to_datetime, to_float, to_int
from ..domain.types import (
    Address,
    PetDetail,
    PetsPolicy,
    PreviousLandlordReference,
    Property,
    RenterProfile,
    RenterSituation,
    SmokingStatus,
    UserRatingsSummary,
)

# Upstream rows come either straight from the database (snake_case)
# or from front-end payloads (camelCase). Every lookup tries both.


def _smoking_status(raw: Any) -> SmokingStatus:
    if raw is None:
        return SmokingStatus.non_smoker
    s = str(getattr(raw, "value", raw)).strip().lower().replace("_", "-").replace(" ", "-")
    if s in ("smoker",):
        return SmokingStatus.smoker
    if s in ("vaper", "vape"):
        return SmokingStatus.vaper
    return SmokingStatus.non_smoker


def _situation(raw: Any) -> RenterSituation | None:
    if raw is None:
        return None
    s = str(getattr(raw, "value", raw)).strip().lower().replace("_", " ")
    for sit in RenterSituation:
        if sit.value.lower() == s:
            return sit
    return None


def _pet_details(raw: Any) -> tuple[PetDetail, ...]:
    if not isinstance(raw, list):
        return ()
    out: list[PetDetail] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        ptype = get_first(item, "type", "pet_type", "petType")
        if not ptype:
            continue
        out.append(
            PetDetail(
                type=str(ptype).strip().lower(),
                count=to_int(get_first(item, "count")) or 1,
                has_insurance=to_bool(get_first(item, "has_insurance", "hasInsurance")),
            )
        )
    return tuple(out)


def _reference(raw: Any) -> PreviousLandlordReference | None:
    if not isinstance(raw, dict) or not raw:
        return None
    start = to_datetime(get_first(raw, "tenancy_start", "tenancyStart"))
    end = to_datetime(get_first(raw, "tenancy_end", "tenancyEnd"))
    return PreviousLandlordReference(
        landlord_name=get_first(raw, "landlord_name", "landlordName", "name"),
        contact=get_first(raw, "contact", "email", "phone"),
        tenancy_start=start.date() if start else None,
        tenancy_end=end.date() if end else None,
    )


def _ratings(raw: Any) -> UserRatingsSummary | None:
    if not isinstance(raw, dict) or not raw:
        return None
    avg = to_float(get_first(raw, "average_overall_score", "averageOverallScore"))
    total = to_int(get_first(raw, "total_ratings", "totalRatings"))
    if avg is None or total is None:
        return None
    return UserRatingsSummary(
        average_overall_score=avg,
        total_ratings=total,
        would_recommend_percentage=to_float(
            get_first(raw, "would_recommend_percentage", "wouldRecommendPercentage")
        )
        or 0.0,
    )


def _pets_policy(raw: Any) -> PetsPolicy | None:
    if not isinstance(raw, dict) or not raw:
        return None

    def _strs(*keys: str) -> tuple[str, ...]:
        v = get_first(raw, *keys)
        if not isinstance(v, list):
            return ()
        return tuple(str(x).strip().lower() for x in v if x)

    return PetsPolicy(
        will_consider_pets=to_bool(get_first(raw, "will_consider_pets", "willConsiderPets")),
        preferred_pet_types=_strs("preferred_pet_types", "preferredPetTypes"),
        property_unsuitable_for=_strs("property_unsuitable_for", "propertyUnsuitableFor"),
        requires_pet_insurance=to_bool(get_first(raw, "requires_pet_insurance", "requiresPetInsurance")),
        max_pets_allowed=to_int(get_first(raw, "max_pets_allowed", "maxPetsAllowed")),
    )


def renter_from_payload(p: dict[str, Any]) -> RenterProfile:
    """
    Build a RenterProfile from a renter_profiles row or a camelCase payload.
    Raises ValueError when the fields scoring depends on are missing.
    """
    income = to_float(get_first(p, "monthly_income", "monthlyIncome"))
    area = get_first(p, "local_area", "localArea")

    if income is None or area is None:
        hint = {
            "monthly_income": income is not None,
            "local_area": area is not None,
            "keys": sorted(list(p.keys()))[:25],
        }
        raise ValueError(f"Missing required renter fields for scoring. hint={hint}")

    pet_details = _pet_details(get_first(p, "pet_details", "petDetails"))
    has_pets = to_bool(get_first(p, "has_pets", "hasPets"), default=bool(pet_details))
    renter_id = get_first(p, "id", "renter_id", "renterId")

    return RenterProfile(
        id=str(renter_id) if renter_id is not None else None,
        monthly_income=income,
        local_area=str(area).strip(),
        preferred_move_in_date=to_datetime(get_first(p, "preferred_move_in_date", "preferredMoveInDate")),
        smoking_status=_smoking_status(get_first(p, "smoking_status", "smokingStatus")),
        has_guarantor=to_bool(get_first(p, "has_guarantor", "hasGuarantor")),
        has_pets=has_pets,
        pet_details=pet_details,
        has_rental_history=to_bool(get_first(p, "has_rental_history", "hasRentalHistory")),
        previous_landlord_reference=_reference(
            get_first(p, "previous_landlord_reference", "previousLandlordReference")
        ),
        ratings_summary=_ratings(get_first(p, "ratings_summary", "ratingsSummary")),
        situation=_situation(get_first(p, "situation")),
    )


def property_from_payload(p: dict[str, Any]) -> Property:
    """
    Build a Property from a properties row or a camelCase payload.
    City may be nested under address or flat on the row.
    """
    rent = to_float(get_first(p, "rent_pcm", "rentPcm", "rent"))
    city = get_nested(p, "address.city") or get_first(p, "city")

    if rent is None or not city:
        hint = {
            "rent_pcm": rent is not None,
            "city": bool(city),
            "keys": sorted(list(p.keys()))[:25],
        }
        raise ValueError(f"Missing required property fields for scoring. hint={hint}")

    street = get_nested(p, "address.street") or get_first(p, "street", "address_line") or ""
    postcode = get_nested(p, "address.postcode") or get_first(p, "postcode")
    council = get_nested(p, "address.council") or get_first(p, "council")
    prop_id = get_first(p, "id", "property_id", "propertyId")

    return Property(
        id=str(prop_id) if prop_id is not None else None,
        rent_pcm=rent,
        address=Address(
            street=str(street).strip(),
            city=str(city).strip(),
            postcode=str(postcode).strip() if postcode else None,
            council=str(council).strip() if council else None,
        ),
        available_from=to_datetime(get_first(p, "available_from", "availableFrom")),
        max_occupants=to_int(get_first(p, "max_occupants", "maxOccupants")),
        pets_policy=_pets_policy(get_first(p, "pets_policy", "petsPolicy")),
    )
