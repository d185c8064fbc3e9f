"""
Unit tests for scenario resolution and rule sets.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

import pytest
from heterotroph.errors import InvalidRuleSet, InvalidScenario
from heterotroph.rules import RuleSet, get_rule_set
from heterotroph.scenarios import (
    build_population,
    describe_scenario,
    implemented_scenarios,
    resolve_scenario,
)


@pytest.mark.parametrize("scenario_id", [
    "oxygen_limiting", 2, "2", "2: Oxygen Limiting",
])
def test_resolve_accepted_forms(scenario_id):
    assert resolve_scenario(scenario_id) == "oxygen_limiting"


def test_implemented_scenarios():
    assert implemented_scenarios() == ["unlimited_oxygen", "oxygen_limiting"]


@pytest.mark.parametrize("scenario_id", ["oxygen_pulse", "photoautotroph", 3, "4: Photoautotroph"])
def test_unimplemented_scenarios_fail_fast(scenario_id):
    with pytest.raises(InvalidScenario):
        resolve_scenario(scenario_id)


@pytest.mark.parametrize("scenario_id", ["bogus", 9, None, True, ""])
def test_unknown_scenarios(scenario_id):
    with pytest.raises(InvalidScenario):
        resolve_scenario(scenario_id)


def test_invalid_scenario_is_value_error():
    with pytest.raises(ValueError):
        resolve_scenario("bogus")


def test_describe_scenario():
    assert describe_scenario("unlimited_oxygen") == "1: Unlimited Oxygen"


def test_rule_set_parameters():
    per_electron = get_rule_set("per_electron")
    batched = get_rule_set("batched")

    assert per_electron.evolution_cost == 6
    assert per_electron.maintenance is False
    assert batched.evolution_cost == 3
    assert batched.maintenance is True


def test_default_rule_set():
    assert get_rule_set().name == "batched"
    rules = get_rule_set("per_electron")
    assert get_rule_set(rules) is rules


def test_unknown_rule_set():
    with pytest.raises(InvalidRuleSet):
        get_rule_set("hybrid")
    with pytest.raises(InvalidRuleSet):
        RuleSet("odd", "continuous", False, 3, 0, 1, {})


def test_starting_population():
    pop = build_population(get_rule_set("per_electron"))
    assert pop.atp == 6
    assert pop.count == 1

    pop = build_population(get_rule_set("batched"))
    assert pop.atp == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
