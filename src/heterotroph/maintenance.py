"""
Maintenance respiration: the per-turn ATP upkeep of the community.
"""

from .errors import PopulationExtinct


class MaintenanceEngine:
    """
    Charges one ATP per organism on every turn advance.

    Organisms that cannot be paid for die; this is the only way the
    community dies under the batched rule set.
    """

    def __init__(self, atp_per_organism=1):
        self.atp_per_organism = atp_per_organism

    def apply(self, population):
        """
        Charge upkeep for one turn.

        Args:
            population (Population): Heterotroph ledger

        Returns:
            dict: ATP required, ATP spent, organisms that died

        Raises:
            PopulationExtinct: If the community is already dead
        """
        if not population.alive:
            raise PopulationExtinct("the heterotroph community is dead")

        required = population.count * self.atp_per_organism
        if population.atp < required:
            shortfall = required - population.atp
            deaths = population.apply_attrition(-(-shortfall // self.atp_per_organism))
            spent = population.drain()
        else:
            population.debit(required)
            spent = required
            deaths = 0

        return {
            'atp_required': required,
            'atp_spent': spent,
            'deaths': deaths,
        }

    def __repr__(self):
        return f"MaintenanceEngine(atp_per_organism={self.atp_per_organism})"
