"""
Scenario table and initial game-state construction.
"""

import re

from .config import SCENARIOS
from .errors import InvalidScenario
from .population import Population
from .resources import ResourceRegistry

_NUMBERED_LABEL = re.compile(r"^\s*(\d+)\s*(?::.*)?$")


def implemented_scenarios():
    """Scenario ids that can be started."""
    return [sid for sid, params in SCENARIOS.items() if params["implemented"]]


def resolve_scenario(scenario_id):
    """
    Map any accepted scenario identifier to its canonical id.

    Accepted forms are the string id ("oxygen_limiting"), the menu number
    (2 or "2") and the menu label ("2: Oxygen Limiting").

    Args:
        scenario_id (str or int): Scenario identifier

    Returns:
        str: Canonical scenario id

    Raises:
        InvalidScenario: If the scenario is unknown or has no rules implemented
    """
    sid = None
    if isinstance(scenario_id, str) and scenario_id in SCENARIOS:
        sid = scenario_id
    else:
        number = None
        if isinstance(scenario_id, int) and not isinstance(scenario_id, bool):
            number = scenario_id
        elif isinstance(scenario_id, str):
            match = _NUMBERED_LABEL.match(scenario_id)
            if match:
                number = int(match.group(1))
        for candidate, params in SCENARIOS.items():
            if number is not None and params["number"] == number:
                sid = candidate
                break

    if sid is None:
        raise InvalidScenario(
            f"unknown scenario {scenario_id!r}; choose from {implemented_scenarios()}"
        )
    if not SCENARIOS[sid]["implemented"]:
        raise InvalidScenario(f"scenario {sid!r} has no rules implemented")
    return sid


def build_registry(scenario_id, rule_set):
    """
    Create the starting resource registry for a scenario.

    Args:
        scenario_id (str): Canonical scenario id
        rule_set (RuleSet): Supplies acceptor yields

    Returns:
        ResourceRegistry: Fresh registry
    """
    params = SCENARIOS[scenario_id]
    return ResourceRegistry.from_config(
        available=params.get("available", {}),
        atp_per_electron=rule_set.atp_per_electron,
    )


def build_population(rule_set):
    return Population(atp=rule_set.starting_atp, count=rule_set.starting_count)


def describe_scenario(scenario_id):
    """Menu label for a scenario, e.g. "1: Unlimited Oxygen"."""
    params = SCENARIOS[scenario_id]
    return f"{params['number']}: {params['label']}"
