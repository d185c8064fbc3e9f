"""
Named rule sets.

The two rule sets disagree on how electrons move, whether organisms pay
per-turn upkeep, and what an evolution costs. A game picks one when it starts
and keeps it for its whole life.
"""

from .config import DEFAULT_RULE_SET, RULE_SETS
from .errors import InvalidRuleSet

PER_ELECTRON = "per_electron"
BATCHED = "batched"


class RuleSet:
    """
    Bundle of policy choices for one game.

    Attributes:
        name (str): Rule set name
        transfer_policy (str): "per_electron" or "batched"
        maintenance (bool): Charge 1 ATP per organism on every turn advance
        evolution_cost (int): ATP price of every evolution
        starting_atp (int): ATP in the pool at game start
        starting_count (int): Organisms at game start
        atp_per_electron (dict): Acceptor name -> ATP yield
    """

    def __init__(self, name, transfer_policy, maintenance, evolution_cost,
                 starting_atp, starting_count, atp_per_electron):
        if transfer_policy not in (PER_ELECTRON, BATCHED):
            raise InvalidRuleSet(f"unknown transfer policy {transfer_policy!r}")
        if evolution_cost <= 0:
            raise InvalidRuleSet(f"evolution_cost must be positive, got {evolution_cost}")
        self.name = name
        self.transfer_policy = transfer_policy
        self.maintenance = bool(maintenance)
        self.evolution_cost = evolution_cost
        self.starting_atp = starting_atp
        self.starting_count = starting_count
        self.atp_per_electron = dict(atp_per_electron)

    @classmethod
    def from_config(cls, name):
        try:
            params = RULE_SETS[name]
        except KeyError:
            raise InvalidRuleSet(
                f"unknown rule set {name!r}; choose from {sorted(RULE_SETS)}"
            ) from None
        return cls(name=name, **params)

    def __eq__(self, other):
        return isinstance(other, RuleSet) and self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return f"RuleSet(name={self.name!r}, evolution_cost={self.evolution_cost})"


def get_rule_set(rule_set=None):
    """
    Resolve a rule set.

    Args:
        rule_set (RuleSet, str or None): Instance, name, or None for the default

    Returns:
        RuleSet: Resolved rule set

    Raises:
        InvalidRuleSet: If the name is unknown
    """
    if isinstance(rule_set, RuleSet):
        return rule_set
    return RuleSet.from_config(rule_set or DEFAULT_RULE_SET)
