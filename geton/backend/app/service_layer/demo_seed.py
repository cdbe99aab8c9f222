# app/service_layer/demo_seed.py
from __future__ import annotations

from datetime import date, timedelta
from typing import Any


def demo_property(*, today: date | None = None) -> dict[str, Any]:
    """A Liverpool two-bed in the shape of a properties row."""
    today = today or date.today()
    return {
        "id": "demo-property-1",
        "rent_pcm": 1000,
        "address": {
            "street": "12 Bold Street",
            "city": "Liverpool",
            "postcode": "L1 4DS",
            "council": "Liverpool City Council",
        },
        "available_from": today.isoformat(),
        "max_occupants": 2,
        "pets_policy": {
            "will_consider_pets": True,
            "preferred_pet_types": ["cat", "small_caged"],
            "property_unsuitable_for": ["large_dogs"],
        },
    }


def demo_renters(*, today: date | None = None) -> list[dict[str, Any]]:
    """
    A handful of renter_profiles rows spanning the score tiers.
    Deterministic for a given `today`.
    """
    today = today or date.today()
    return [
        {
            "id": "demo-renter-strong",
            "monthly_income": 3200,
            "local_area": "Liverpool",
            "smoking_status": "Non-Smoker",
            "has_guarantor": True,
            "has_rental_history": True,
            "previous_landlord_reference": {"landlord_name": "J. Doyle"},
            "ratings_summary": {"average_overall_score": 4.8, "total_ratings": 6, "would_recommend_percentage": 100},
            "situation": "Couple",
        },
        {
            "id": "demo-renter-nearby",
            "monthly_income": 2600,
            "local_area": "Southport",
            "preferred_move_in_date": (today + timedelta(days=20)).isoformat(),
            "smoking_status": "Vaper",
            "has_pets": True,
            "pet_details": [{"type": "cat", "count": 1, "has_insurance": True}],
            "has_rental_history": True,
            "situation": "Single",
        },
        {
            "id": "demo-renter-first-timer",
            "monthly_income": 2100,
            "local_area": "Preston",
            "preferred_move_in_date": (today + timedelta(days=45)).isoformat(),
            "smoking_status": "Non-Smoker",
            "has_rental_history": False,
            "situation": "Professional Sharers",
        },
        {
            "id": "demo-renter-stretch",
            "monthly_income": 1200,
            "local_area": "Leeds",
            "preferred_move_in_date": (today + timedelta(days=90)).isoformat(),
            "smoking_status": "Smoker",
            "has_pets": True,
            "pet_details": [{"type": "dog", "count": 1}],
            "situation": "Family",
        },
    ]
