"""
Game facade that owns one session's state and exposes the player commands.
"""

import logging

from .errors import RuleViolation
from .evolution import EvolutionEngine
from .maintenance import MaintenanceEngine
from .outcome import Outcome, evaluate
from .rules import get_rule_set
from .scenarios import build_population, build_registry, resolve_scenario
from .transfer import make_transfer_engine

logger = logging.getLogger(__name__)


class Game:
    """
    A single game of the microbial energy economy.

    Every command mutates the game in place. Moves the rules forbid (empty
    stock, locked resources, too little ATP, wrong turn, a dead community)
    are silent no-ops. Structurally invalid input such as an unknown
    resource or capability raises.

    Attributes:
        scenario (str): Canonical scenario id
        rule_set (RuleSet): Rule set bound at start
        registry (ResourceRegistry): Donors and acceptors
        population (Population): Heterotroph ledger
        turn (int): Current turn, starting at 1
        history (dict): Per-command snapshots
    """

    def __init__(self, scenario, rule_set=None):
        """
        Start a fresh game.

        Args:
            scenario (str or int): Scenario id, number or menu label
            rule_set (RuleSet or str): Rule set, defaults to the configured one

        Raises:
            InvalidScenario: If the scenario is unknown or unimplemented
            InvalidRuleSet: If the rule set is unknown
        """
        self.scenario = resolve_scenario(scenario)
        self.rule_set = get_rule_set(rule_set)
        self.registry = build_registry(self.scenario, self.rule_set)
        self.population = build_population(self.rule_set)
        self.turn = 1

        self.transfer_engine = make_transfer_engine(self.rule_set)
        self.evolution_engine = EvolutionEngine(cost=self.rule_set.evolution_cost)
        self.maintenance_engine = MaintenanceEngine() if self.rule_set.maintenance else None

        self.history = {
            'command': [],
            'turn': [],
            'atp': [],
            'count': [],
            'donors_total': [],
        }
        self._record('start')
        logger.info("Started %s game with %s rules", self.scenario, self.rule_set.name)

    # ----------------------------------------------------------------- commands

    def transfer_electron(self, donor, acceptor):
        """
        Move electrons from a donor to an acceptor.

        Args:
            donor (str): Donor name
            acceptor (str): Acceptor name

        Returns:
            dict: Transfer statistics; all zeros when the move was a no-op
        """
        try:
            stats = self.transfer_engine.transfer(
                self.registry, self.population, donor, acceptor, self.turn
            )
        except RuleViolation as exc:
            logger.debug("Transfer %s -> %s ignored: %s", donor, acceptor, exc)
            stats = {'electrons': 0, 'atp_generated': 0, 'atp_credited': 0, 'deaths': 0}
        self._record(f"transfer:{donor}->{acceptor}")
        self._log_outcome()
        return stats

    def advance_turn(self):
        """
        Move to the next turn, charging maintenance where the rules ask for it.

        Returns:
            dict: Turn number and maintenance statistics
        """
        upkeep = {'atp_required': 0, 'atp_spent': 0, 'deaths': 0}
        if self.maintenance_engine is not None:
            try:
                upkeep = self.maintenance_engine.apply(self.population)
            except RuleViolation as exc:
                logger.debug("Maintenance skipped: %s", exc)
        self.turn += 1
        self._record('advance')
        self._log_outcome()
        return {'turn': self.turn, **upkeep}

    def evolve(self, capability):
        """
        Spend ATP on an evolution path.

        Args:
            capability (Capability or str): Evolution path

        Returns:
            bool: True if the evolution took effect

        Raises:
            UnknownCapability: If the tag is not an evolution path
        """
        try:
            self.evolution_engine.evolve(self.registry, self.population, capability)
            evolved = True
        except RuleViolation as exc:
            logger.debug("Evolution %s ignored: %s", capability, exc)
            evolved = False
        self._record(f"evolve:{getattr(capability, 'value', capability)}")
        return evolved

    def take_turn(self, donor, acceptor):
        """
        Play a full turn: one transfer followed by a turn advance.

        Returns:
            dict: Transfer and maintenance statistics plus the outcome
        """
        stats = self.transfer_electron(donor, acceptor)
        upkeep = self.advance_turn()
        return {
            'turn': upkeep['turn'],
            'electrons': stats['electrons'],
            'atp_generated': stats['atp_generated'],
            'deaths': stats['deaths'] + upkeep['deaths'],
            'atp_spent': upkeep['atp_spent'],
            'outcome': self.outcome(),
        }

    # -------------------------------------------------------------- evaluation

    def outcome(self):
        return evaluate(self.registry, self.population)

    def is_over(self):
        return self.outcome().is_terminal

    # ------------------------------------------------------------- projections

    def donor_table(self):
        """Donor name -> available quantity, in board order."""
        return {r.name: r.available for r in self.registry.donors()}

    def acceptor_table(self):
        """Acceptor name -> available quantity, in board order."""
        return {r.name: r.available for r in self.registry.acceptors()}

    def population_status(self):
        """
        Snapshot of the heterotroph community for display.

        Returns:
            dict: atp, count, alive, capabilities, evolution_stage
        """
        return {
            'atp': self.population.atp,
            'count': self.population.count,
            'alive': self.population.alive,
            'capabilities': self.population.capability_names(),
            'evolution_stage': self.population.evolution_stage,
        }

    def _record(self, command):
        self.history['command'].append(command)
        self.history['turn'].append(self.turn)
        self.history['atp'].append(self.population.atp)
        self.history['count'].append(self.population.count)
        self.history['donors_total'].append(self.registry.donor_total())

    def _log_outcome(self):
        outcome = self.outcome()
        if outcome is Outcome.WIN:
            logger.info("All organic matter consumed on turn %d", self.turn)
        elif outcome is Outcome.LOSS:
            logger.info("All heterotrophs died on turn %d", self.turn)

    def __repr__(self):
        return (f"Game(scenario={self.scenario!r}, rule_set={self.rule_set.name!r}, "
                f"turn={self.turn}, population={self.population!r})")


def start_game(scenario_id, rule_set=None):
    """Create a fresh game for a scenario."""
    return Game(scenario_id, rule_set=rule_set)


def transfer_electron(game, donor, acceptor):
    game.transfer_electron(donor, acceptor)
    return game


def advance_turn(game):
    game.advance_turn()
    return game


def evolve(game, capability):
    game.evolve(capability)
    return game


def evaluate_outcome(game):
    return game.outcome()
