# app/domain/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum


class SmokingStatus(str, Enum):
    non_smoker = "Non-Smoker"
    smoker = "Smoker"
    vaper = "Vaper"


class RenterSituation(str, Enum):
    single = "Single"
    couple = "Couple"
    family = "Family"
    professional_sharers = "Professional Sharers"


class CompatibilityFlag(str, Enum):
    income_marginal = "income_marginal"
    income_strong = "income_strong"
    move_date_mismatch = "move_date_mismatch"
    move_date_flexible = "move_date_flexible"
    pet_requires_approval = "pet_requires_approval"
    first_time_renter = "first_time_renter"
    excellent_references = "excellent_references"
    has_guarantor = "has_guarantor"
    # never emitted by the scorer, only described
    verified_income = "verified_income"
    long_term_seeker = "long_term_seeker"


@dataclass(frozen=True)
class PetDetail:
    type: str
    count: int = 1
    has_insurance: bool = False


@dataclass(frozen=True)
class PreviousLandlordReference:
    landlord_name: str | None = None
    contact: str | None = None
    tenancy_start: date | None = None
    tenancy_end: date | None = None


@dataclass(frozen=True)
class UserRatingsSummary:
    average_overall_score: float
    total_ratings: int
    would_recommend_percentage: float = 0.0


@dataclass(frozen=True)
class PetsPolicy:
    will_consider_pets: bool
    preferred_pet_types: tuple[str, ...] = ()
    property_unsuitable_for: tuple[str, ...] = ()
    requires_pet_insurance: bool = False
    max_pets_allowed: int | None = None


@dataclass(frozen=True)
class Address:
    street: str
    city: str
    postcode: str | None = None
    council: str | None = None


@dataclass(frozen=True)
class RenterProfile:
    monthly_income: float
    local_area: str
    preferred_move_in_date: date | datetime | str | None = None
    smoking_status: SmokingStatus = SmokingStatus.non_smoker
    has_guarantor: bool = False
    has_pets: bool = False
    pet_details: tuple[PetDetail, ...] = ()
    has_rental_history: bool = False
    previous_landlord_reference: PreviousLandlordReference | None = None
    ratings_summary: UserRatingsSummary | None = None
    situation: RenterSituation | None = None
    id: str | None = None


@dataclass(frozen=True)
class Property:
    rent_pcm: float
    address: Address
    available_from: date | datetime | str | None = None
    max_occupants: int | None = None
    pets_policy: PetsPolicy | None = None
    id: str | None = None


@dataclass(frozen=True)
class CompatibilityBreakdown:
    affordability: int
    location: int
    timing: int
    property_fit: int
    tenant_history: int

    def total(self) -> int:
        return self.affordability + self.location + self.timing + self.property_fit + self.tenant_history


@dataclass(frozen=True)
class CompatibilityScore:
    overall: int
    breakdown: CompatibilityBreakdown
    flags: tuple[CompatibilityFlag, ...] = field(default_factory=tuple)
