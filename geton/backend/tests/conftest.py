# tests/conftest.py
from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from app.domain.types import (
    Address,
    PetsPolicy,
    Property,
    RenterProfile,
    RenterSituation,
    SmokingStatus,
)

AVAILABLE_FROM = date(2026, 3, 1)


@pytest.fixture
def make_renter():
    """
    Baseline: Liverpool single non-smoker on 3000/month, rental history
    without a reference, no move date, no ratings.
    """
    base = RenterProfile(
        id="renter-test-1",
        monthly_income=3000,
        local_area="Liverpool",
        smoking_status=SmokingStatus.non_smoker,
        has_guarantor=False,
        has_pets=False,
        has_rental_history=True,
        situation=RenterSituation.single,
    )

    def _make(**overrides) -> RenterProfile:
        return replace(base, **overrides)

    return _make


@pytest.fixture
def make_property():
    """Baseline: Liverpool flat, 1000 pcm, two occupants, considers cats/small caged pets."""
    base = Property(
        id="property-test-1",
        rent_pcm=1000,
        address=Address(street="123 Test Street", city="Liverpool", postcode="L1 1AA"),
        available_from=AVAILABLE_FROM,
        max_occupants=2,
        pets_policy=PetsPolicy(will_consider_pets=True, preferred_pet_types=("cat", "small_caged")),
    )

    def _make(**overrides) -> Property:
        if "city" in overrides:
            overrides["address"] = replace(base.address, city=overrides.pop("city"))
        return replace(base, **overrides)

    return _make
