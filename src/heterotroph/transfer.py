"""
Transfer engines that move electrons from donors to acceptors and generate ATP.
"""

from abc import ABC, abstractmethod

from .errors import CapabilityLocked, OffTurn, OutOfStock, PopulationExtinct
from .rules import BATCHED, PER_ELECTRON


class TransferEngine(ABC):
    """
    Abstract base class for electron transfer policies.

    ``transfer`` checks every rule before touching state, so a raised
    ``RuleViolation`` always leaves the registry and population unchanged.
    """

    def __init__(self, rule_set):
        self.rule_set = rule_set

    def transfer(self, registry, population, donor, acceptor, turn):
        """
        Move electrons from a donor to an acceptor.

        Args:
            registry (ResourceRegistry): Board resources
            population (Population): Heterotroph ledger
            donor (str): Donor name
            acceptor (str): Acceptor name
            turn (int): Current turn number

        Returns:
            dict: electrons moved, ATP generated, ATP credited, deaths

        Raises:
            PopulationExtinct: If nobody is left to respire
            CapabilityLocked: If either resource is still locked
            OffTurn: If a periodic acceptor is used on an even turn
            OutOfStock: If no electron can move
            ValueError: If donor and acceptor roles are swapped
        """
        source = registry.get(donor)
        sink = registry.get(acceptor)
        if not source.is_donor:
            raise ValueError(f"{donor} is not an electron donor")
        if sink.is_donor:
            raise ValueError(f"{acceptor} is not an electron acceptor")
        if not population.alive:
            raise PopulationExtinct("the heterotroph community is dead")

        for resource in (source, sink):
            if not resource.usable:
                raise CapabilityLocked(f"{resource.name} is locked")
        if sink.periodic and turn % 2 == 0:
            raise OffTurn(f"{sink.name} can only be used on odd turns (turn {turn})")

        return self._move(registry, population, source, sink)

    @abstractmethod
    def _move(self, registry, population, source, sink):
        """Perform the policy-specific transfer once the shared rules passed."""
        pass


class PerElectronTransfer(TransferEngine):
    """
    One electron per action; organisms that get no ATP die on the spot.
    """

    def _move(self, registry, population, source, sink):
        if source.available <= 0:
            raise OutOfStock(f"{source.name} is exhausted")
        if sink.available <= 0:
            raise OutOfStock(f"{sink.name} is exhausted")

        registry.consume(source.name, 1)
        registry.consume(sink.name, 1)
        generated = sink.atp_per_electron

        # Split the new ATP evenly; members left with a zero share starve
        share, remainder = divmod(generated, population.count)
        deaths = 0
        if share == 0:
            deaths = population.apply_attrition(population.count - remainder)

        credited = 0
        if population.alive:
            population.credit(generated)
            credited = generated

        return {
            'electrons': 1,
            'atp_generated': generated,
            'atp_credited': credited,
            'deaths': deaths,
        }


class BatchedTransfer(TransferEngine):
    """
    Every organism moves one electron, limited by donor and acceptor stock.
    """

    def _move(self, registry, population, source, sink):
        transfers = min(population.count, source.available, sink.available)
        if transfers <= 0:
            raise OutOfStock(f"no electrons can move from {source.name} to {sink.name}")
        transfers = int(transfers)

        registry.consume(source.name, transfers)
        registry.consume(sink.name, transfers)
        generated = transfers * sink.atp_per_electron
        population.credit(generated)

        return {
            'electrons': transfers,
            'atp_generated': generated,
            'atp_credited': generated,
            'deaths': 0,
        }


def make_transfer_engine(rule_set):
    """
    Build the transfer engine that matches a rule set.

    Args:
        rule_set (RuleSet): Active rule set

    Returns:
        TransferEngine: Policy implementation
    """
    engines = {
        PER_ELECTRON: PerElectronTransfer,
        BATCHED: BatchedTransfer,
    }
    return engines[rule_set.transfer_policy](rule_set)
