"""
EvolutionEngine for spending ATP on new capabilities.
"""

from .config import ANAEROBIC_ACCEPTORS, EVOLUTION_PARAMS, FERMENTATION_CHAIN
from .errors import AlreadyEvolved, InsufficientATP, PopulationExtinct
from .population import Capability


class EvolutionEngine:
    """
    Applies evolution paths to a population and the board it lives on.

    Growth can be bought any number of times and doubles the community.
    Exo-enzymes, anaerobiosis and fermentation are bought once and reshape
    the resource registry when they unlock.
    """

    def __init__(self, cost, cellulose_to_glucose=None, anaerobic_replenishment=None,
                 growth_factor=None):
        """
        Initialize evolution engine.

        Args:
            cost (int): ATP price of every evolution
            cellulose_to_glucose (int): Glucose produced per cellulose unit
            anaerobic_replenishment (int): Stock granted to anaerobic acceptors
            growth_factor (int): Population multiplier for growth
        """
        self.cost = cost
        self.cellulose_to_glucose = (cellulose_to_glucose if cellulose_to_glucose is not None
                                     else EVOLUTION_PARAMS["cellulose_to_glucose"])
        self.anaerobic_replenishment = (anaerobic_replenishment if anaerobic_replenishment is not None
                                        else EVOLUTION_PARAMS["anaerobic_replenishment"])
        self.growth_factor = (growth_factor if growth_factor is not None
                              else EVOLUTION_PARAMS["growth_factor"])
        self.generation = 0
        self._effects = {
            Capability.GROWTH: self._grow,
            Capability.EXO_ENZYMES: self._secrete_exo_enzymes,
            Capability.ANAEROBIOSIS: self._enable_anaerobiosis,
            Capability.FERMENTATION: self._enable_fermentation,
        }

    def evolve(self, registry, population, capability):
        """
        Buy a capability.

        Args:
            registry (ResourceRegistry): Board resources
            population (Population): Heterotroph ledger
            capability (Capability or str): Evolution path

        Returns:
            Capability: The capability that was applied

        Raises:
            UnknownCapability: If the tag is not an evolution path
            PopulationExtinct: If the community is dead
            InsufficientATP: If the pool is below the cost
            AlreadyEvolved: If a one-time capability is already unlocked
        """
        capability = Capability.parse(capability)
        if not population.alive:
            raise PopulationExtinct("the heterotroph community is dead")
        if population.atp < self.cost:
            raise InsufficientATP(f"{capability.value} costs {self.cost} ATP, have {population.atp}")
        if not capability.repeatable and population.has_capability(capability):
            raise AlreadyEvolved(f"{capability.value} is already unlocked")

        population.debit(self.cost)
        if not capability.repeatable:
            population.unlock(capability)
        self._effects[capability](registry, population)
        self.generation += 1
        return capability

    def _grow(self, registry, population):
        population.multiply(self.growth_factor)

    def _secrete_exo_enzymes(self, registry, population):
        # Break all standing cellulose down into glucose
        registry.set_usable("cellulose", True)
        cellulose = registry.get("cellulose").available
        registry.add("glucose", self.cellulose_to_glucose * cellulose)
        registry.set_available("cellulose", 0)

    def _enable_anaerobiosis(self, registry, population):
        registry.unlock_acceptors(ANAEROBIC_ACCEPTORS, self.anaerobic_replenishment)

    def _enable_fermentation(self, registry, population):
        # glucose -> lactic acid -> acetate -> hydrogen, read once at unlock time
        upstream = registry.get("glucose").available
        for name in FERMENTATION_CHAIN:
            registry.set_available(name, upstream)
            upstream = registry.get(name).available

    def __repr__(self):
        return f"EvolutionEngine(generation={self.generation}, cost={self.cost})"
