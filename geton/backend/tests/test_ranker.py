from datetime import date

import pytest

from app.scoring.ranker import rank_renters
from app.service_layer.demo_seed import demo_property, demo_renters
from app.service_layer.scoring import rank_for_property
from app.services.normalize import property_from_payload, renter_from_payload

TODAY = date(2026, 3, 1)


@pytest.fixture
def demo():
    prop = property_from_payload(demo_property(today=TODAY))
    renters = [renter_from_payload(r) for r in demo_renters(today=TODAY)]
    return prop, renters


def _ids(ranked):
    return [r.renter.id for r in ranked]


def test_rank_sorts_by_overall_descending(demo):
    prop, renters = demo
    ranked = rank_renters(prop, renters)

    assert _ids(ranked) == [
        "demo-renter-strong",
        "demo-renter-nearby",
        "demo-renter-first-timer",
        "demo-renter-stretch",
    ]
    assert [r.score.overall for r in ranked] == [100, 77, 53, 30]


def test_rank_ascending(demo):
    prop, renters = demo
    ranked = rank_renters(prop, renters, descending=False)
    assert _ids(ranked)[0] == "demo-renter-stretch"


def test_rank_filters(demo):
    prop, renters = demo

    assert _ids(rank_renters(prop, renters, filter_by="high_match")) == ["demo-renter-strong", "demo-renter-nearby"]
    assert _ids(rank_renters(prop, renters, filter_by="high_match", high_match_threshold=90)) == ["demo-renter-strong"]
    assert _ids(rank_renters(prop, renters, filter_by="has_guarantor")) == ["demo-renter-strong"]
    assert _ids(rank_renters(prop, renters, filter_by="no_pets")) == ["demo-renter-strong", "demo-renter-first-timer"]


def test_rank_ties_keep_input_order(demo):
    prop, renters = demo
    same = [renters[0], renters[0]]
    ranked = rank_renters(prop, [renters[1]] + same)
    assert ranked[0].renter is renters[0] and ranked[1].renter is renters[0]


def test_rank_unknown_filter_raises(demo):
    prop, renters = demo
    with pytest.raises(ValueError):
        rank_renters(prop, renters, filter_by="cheapest")


def test_rank_for_property_returns_display_models():
    result = rank_for_property(demo_property(today=TODAY), demo_renters(today=TODAY), filter_by="no_pets")

    assert result.property_id == "demo-property-1"
    assert result.count == 2
    top = result.renters[0]
    assert top.renter_id == "demo-renter-strong"
    assert top.compatibility.formatted == "100%"
    assert top.compatibility.tier.tier == "excellent"
