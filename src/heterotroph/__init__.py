"""
Heterotroph module for the microbial energy economy game.

This module contains the turn-based engine: the resource registry, the
population ledger, electron transfer, maintenance, evolution and the
win/loss evaluation.
"""

from .config import UNLIMITED
from .errors import (
    HeterotrophError,
    InvalidRuleSet,
    InvalidScenario,
    RuleViolation,
    UnknownCapability,
    UnknownResource,
)
from .game import Game, advance_turn, evaluate_outcome, evolve, start_game, transfer_electron
from .outcome import Outcome
from .population import Capability, Population
from .resources import Resource, ResourceKind, ResourceRegistry
from .rules import RuleSet, get_rule_set

__all__ = [
    "UNLIMITED",
    "Capability",
    "Game",
    "HeterotrophError",
    "InvalidRuleSet",
    "InvalidScenario",
    "Outcome",
    "Population",
    "Resource",
    "ResourceKind",
    "ResourceRegistry",
    "RuleSet",
    "RuleViolation",
    "UnknownCapability",
    "UnknownResource",
    "advance_turn",
    "evaluate_outcome",
    "evolve",
    "get_rule_set",
    "start_game",
    "transfer_electron",
]
