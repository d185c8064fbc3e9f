"""
Population ledger for the heterotroph community.
"""

from enum import Enum

from .errors import InsufficientATP, UnknownCapability


class Capability(str, Enum):
    """Evolution paths. Growth is repeatable, the rest unlock once."""

    GROWTH = "growth"
    EXO_ENZYMES = "exo_enzymes"
    ANAEROBIOSIS = "anaerobiosis"
    FERMENTATION = "fermentation"

    @property
    def repeatable(self):
        return self is Capability.GROWTH

    @classmethod
    def parse(cls, tag):
        """
        Normalize a tag to a Capability.

        Args:
            tag (Capability or str): Capability or its string value

        Returns:
            Capability: Matching member

        Raises:
            UnknownCapability: If the tag is not an evolution path
        """
        try:
            return cls(tag)
        except ValueError:
            raise UnknownCapability(f"unknown capability {tag!r}") from None


ONE_TIME_CAPABILITIES = tuple(c for c in Capability if not c.repeatable)


class Population:
    """
    Shared ATP pool and head count of the heterotroph community.

    Attributes:
        atp (int): Energy pool shared by every organism
        count (int): Number of living organisms
        capabilities (set): One-time capability tags unlocked so far
    """

    def __init__(self, atp=0, count=1, capabilities=()):
        """
        Initialize the ledger.

        Args:
            atp (int): Starting ATP, must be >= 0
            count (int): Starting organisms, must be >= 0
            capabilities (iterable): Capability tags already unlocked

        Raises:
            ValueError: If atp or count is negative
        """
        if atp < 0:
            raise ValueError(f"atp must be >= 0, got {atp}")
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self.atp = atp
        self.count = count
        self.capabilities = {Capability.parse(tag) for tag in capabilities}

    @property
    def alive(self):
        """True while at least one organism remains."""
        return self.count > 0

    @property
    def evolution_stage(self):
        return len(self.capabilities)

    def credit(self, amount):
        if amount < 0:
            raise ValueError(f"cannot credit {amount} ATP")
        self.atp += amount

    def debit(self, amount):
        """
        Spend ATP from the pool.

        Args:
            amount (int): ATP to spend

        Raises:
            InsufficientATP: If the pool holds less than amount
        """
        if amount > self.atp:
            raise InsufficientATP(f"need {amount} ATP, have {self.atp}")
        self.atp -= amount

    def drain(self):
        """
        Empty the ATP pool.

        Returns:
            int: ATP that was in the pool
        """
        spent, self.atp = self.atp, 0
        return spent

    def apply_attrition(self, deaths):
        """
        Remove organisms from the community, never below zero.

        Args:
            deaths (int): Organisms that die

        Returns:
            int: Organisms actually removed
        """
        removed = min(max(deaths, 0), self.count)
        self.count -= removed
        return removed

    def multiply(self, factor):
        self.count *= factor

    def has_capability(self, tag):
        return Capability.parse(tag) in self.capabilities

    def unlock(self, tag):
        capability = Capability.parse(tag)
        if capability.repeatable:
            raise ValueError(f"{capability.value} is repeatable and is never recorded as unlocked")
        self.capabilities.add(capability)

    def capability_names(self):
        """Unlocked capability values in a stable order."""
        return [c.value for c in ONE_TIME_CAPABILITIES if c in self.capabilities]

    def __repr__(self):
        return (f"Population(atp={self.atp}, count={self.count}, "
                f"alive={self.alive}, capabilities={self.capability_names()})")
