from datetime import datetime

import pytest

from app.domain.types import RenterSituation, SmokingStatus
from app.services.normalize import property_from_payload, renter_from_payload


def test_renter_from_snake_case_row():
    r = renter_from_payload(
        {
            "id": 42,
            "monthly_income": "2800",
            "local_area": " Southport ",
            "preferred_move_in_date": "2026-04-01T09:00:00Z",
            "smoking_status": "Vaper",
            "has_guarantor": "true",
            "has_pets": True,
            "pet_details": [{"type": "Cat", "count": 2, "has_insurance": True}, {"count": 1}],
            "has_rental_history": 1,
            "previous_landlord_reference": {"landlord_name": "J. Doyle", "tenancy_end": "2025-12-31"},
            "ratings_summary": {"average_overall_score": 4.2, "total_ratings": 3},
            "situation": "Couple",
        }
    )

    assert r.id == "42"
    assert r.monthly_income == 2800.0
    assert r.local_area == "Southport"
    assert r.preferred_move_in_date == datetime(2026, 4, 1, 9, 0)
    assert r.smoking_status == SmokingStatus.vaper
    assert r.has_guarantor is True
    assert r.has_pets is True
    assert len(r.pet_details) == 1 and r.pet_details[0].type == "cat" and r.pet_details[0].count == 2
    assert r.has_rental_history is True
    assert r.previous_landlord_reference.landlord_name == "J. Doyle"
    assert r.ratings_summary.total_ratings == 3
    assert r.situation == RenterSituation.couple


def test_renter_from_camel_case_payload_defaults():
    r = renter_from_payload({"monthlyIncome": 2000, "localArea": "Wigan"})

    assert r.preferred_move_in_date is None
    assert r.smoking_status == SmokingStatus.non_smoker
    assert r.has_pets is False
    assert r.pet_details == ()
    assert r.ratings_summary is None
    assert r.situation is None


def test_renter_missing_required_fields_raises_with_hint():
    with pytest.raises(ValueError) as e:
        renter_from_payload({"local_area": "Wigan"})
    assert "monthly_income" in str(e.value)


def test_property_nested_and_flat_city():
    nested = property_from_payload(
        {
            "id": "p1",
            "rentPcm": 950,
            "address": {"street": "1 Lord St", "city": "Southport", "postcode": "PR8 1AA"},
            "availableFrom": "2026-05-01",
            "maxOccupants": "3",
            "petsPolicy": {"willConsiderPets": True, "preferredPetTypes": ["Cat"]},
        }
    )
    flat = property_from_payload({"rent_pcm": 800, "city": "Wigan"})

    assert nested.address.city == "Southport"
    assert nested.available_from == datetime(2026, 5, 1)
    assert nested.max_occupants == 3
    assert nested.pets_policy.will_consider_pets is True
    assert nested.pets_policy.preferred_pet_types == ("cat",)

    assert flat.address.city == "Wigan"
    assert flat.available_from is None
    assert flat.pets_policy is None


def test_property_missing_city_raises():
    with pytest.raises(ValueError):
        property_from_payload({"rent_pcm": 800})
