"""
Optimization suggestions: one test per rule, padding with the generic line, cap at 5.
"""

from dataclasses import replace

import pytest

from agropredict.soil_health import (
    MAINTAIN_PRACTICES,
    SUGGESTION_RULES,
    fired_rules,
    get_optimization_suggestions,
)
from agropredict.yield_estimator import FieldData

MESSAGES = {rule.name: rule.message for rule in SUGGESTION_RULES}


@pytest.fixture
def quiet_field(example_field) -> FieldData:
    """Corn in mild conditions: no rule fires."""
    return FieldData.from_mapping(dict(example_field, crop_type="corn"))


def test_quiet_field_fires_nothing(quiet_field):
    assert fired_rules(quiet_field) == []
    assert get_optimization_suggestions(quiet_field) == [MAINTAIN_PRACTICES]


@pytest.mark.parametrize("changes,rule", [
    ({"rainfall": 150}, "low_rainfall"),
    ({"nitrogen": 30}, "low_nitrogen"),
    ({"soil_pH": 6.0}, "acidic_soil"),
    ({"soil_pH": 8.0}, "alkaline_soil"),
    ({"temperature": 32}, "heat_stress"),
    ({"crop_type": "wheat", "rainfall": 240}, "wheat_drought"),
    ({"crop_type": "soybeans", "soil_pH": 5.8}, "soybeans_acidic"),
    ({"crop_type": "cotton", "temperature": 14}, "cotton_cold"),
    ({"crop_type": "barley", "nitrogen": 90}, "barley_lodging"),
    ({"crop_type": "sunflower", "humidity": 85}, "sunflower_humidity"),
    ({"phosphorus": 20}, "low_phosphorus"),
    ({"potassium": 25}, "low_potassium"),
])
def test_each_rule_fires(quiet_field, changes, rule):
    field = replace(quiet_field, **changes)
    assert rule in [r.name for r in fired_rules(field)]
    assert MESSAGES[rule] in get_optimization_suggestions(field)


@pytest.mark.parametrize("crop,changes", [
    ("corn", {"rainfall": 240}),
    ("corn", {"soil_pH": 5.8}),
    ("corn", {"temperature": 14}),
    ("corn", {"nitrogen": 90}),
    ("corn", {"humidity": 85}),
])
def test_crop_specific_rules_need_their_crop(quiet_field, crop, changes):
    names = [r.name for r in fired_rules(replace(quiet_field, crop_type=crop, **changes))]
    assert not any(n.startswith(("wheat", "soybeans", "cotton", "barley", "sunflower")) for n in names)


@pytest.mark.parametrize("ph", [6.5, 7.0, 7.5])
def test_ph_in_range_needs_no_amendment(quiet_field, ph):
    names = [r.name for r in fired_rules(replace(quiet_field, soil_pH=ph))]
    assert "acidic_soil" not in names and "alkaline_soil" not in names


def test_lime_and_sulfur_are_exclusive(quiet_field):
    acidic = get_optimization_suggestions(replace(quiet_field, soil_pH=5.0))
    alkaline = get_optimization_suggestions(replace(quiet_field, soil_pH=9.0))
    assert MESSAGES["acidic_soil"] in acidic and MESSAGES["alkaline_soil"] not in acidic
    assert MESSAGES["alkaline_soil"] in alkaline and MESSAGES["acidic_soil"] not in alkaline


def test_two_rules_are_padded(quiet_field):
    field = replace(quiet_field, nitrogen=30, potassium=25)
    assert get_optimization_suggestions(field) == [
        MESSAGES["low_nitrogen"],
        MESSAGES["low_potassium"],
        MAINTAIN_PRACTICES,
    ]


def test_three_rules_are_not_padded(quiet_field):
    field = replace(quiet_field, nitrogen=30, phosphorus=20, potassium=25)
    suggestions = get_optimization_suggestions(field)
    assert len(suggestions) == 3
    assert MAINTAIN_PRACTICES not in suggestions


def test_capped_at_five_in_rule_order(quiet_field):
    field = replace(quiet_field, rainfall=100, nitrogen=10, soil_pH=5.0,
                    temperature=35, phosphorus=10, potassium=10)
    assert len(fired_rules(field)) == 6
    assert get_optimization_suggestions(field) == [
        MESSAGES["low_rainfall"],
        MESSAGES["low_nitrogen"],
        MESSAGES["acidic_soil"],
        MESSAGES["heat_stress"],
        MESSAGES["low_phosphorus"],
    ]


def test_wheat_drought_follows_generic_irrigation(quiet_field):
    field = replace(quiet_field, crop_type="wheat", rainfall=150)
    suggestions = get_optimization_suggestions(field)
    assert suggestions.index(MESSAGES["low_rainfall"]) < suggestions.index(MESSAGES["wheat_drought"])
