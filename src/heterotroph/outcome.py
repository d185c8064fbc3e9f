"""
Win/loss evaluation.
"""

from enum import Enum


class Outcome(str, Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    LOSS = "loss"

    @property
    def is_terminal(self):
        return self is not Outcome.IN_PROGRESS


def evaluate(registry, population):
    """
    Derive the game outcome from the current state.

    All organic matter consumed is a win, even on the turn the last
    organism dies.

    Args:
        registry (ResourceRegistry): Board resources
        population (Population): Heterotroph ledger

    Returns:
        Outcome: WIN, LOSS or IN_PROGRESS
    """
    if registry.donor_total() == 0:
        return Outcome.WIN
    if not population.alive:
        return Outcome.LOSS
    return Outcome.IN_PROGRESS
