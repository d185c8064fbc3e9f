"""
Resource and ResourceRegistry classes for electron donors and acceptors.
"""

from enum import Enum

from .config import RESOURCES, UNLIMITED
from .errors import CapabilityLocked, OutOfStock, UnknownResource


class ResourceKind(str, Enum):
    DONOR = "donor"
    ACCEPTOR = "acceptor"


class Resource:
    """
    A single electron donor or acceptor on the board.

    Attributes:
        name (str): Resource name, e.g. "glucose"
        kind (ResourceKind): Donor or acceptor
        available (int or float): Units in stock; ``UNLIMITED`` for a bottomless pool
        atp_per_electron (int): ATP yield per electron accepted (acceptors only)
        usable (bool): Whether the resource may take part in a transfer
        periodic (bool): Usable only on odd turns
    """

    def __init__(self, name, kind, available=0, atp_per_electron=0,
                 usable=True, periodic=False):
        """
        Initialize a resource.

        Args:
            name (str): Resource name
            kind (ResourceKind or str): "donor" or "acceptor"
            available (int or float): Starting stock, must be >= 0
            atp_per_electron (int): Yield per electron, must be >= 0
            usable (bool): Starting usability
            periodic (bool): Restrict use to odd turns

        Raises:
            ValueError: If kind is unknown or a quantity is negative
        """
        self.name = name
        self.kind = ResourceKind(kind)
        if available < 0:
            raise ValueError(f"{name}: available must be >= 0, got {available}")
        if atp_per_electron < 0:
            raise ValueError(f"{name}: atp_per_electron must be >= 0, got {atp_per_electron}")
        self.available = available
        self.atp_per_electron = atp_per_electron if self.kind is ResourceKind.ACCEPTOR else 0
        self.usable = bool(usable)
        self.periodic = bool(periodic)

    @property
    def is_donor(self):
        return self.kind is ResourceKind.DONOR

    @property
    def is_unlimited(self):
        return self.available == UNLIMITED

    def withdraw(self, amount):
        """
        Remove units from stock.

        Args:
            amount (int): Units to remove

        Raises:
            CapabilityLocked: If the resource is not usable yet
            OutOfStock: If amount exceeds the available stock
        """
        if not self.usable:
            raise CapabilityLocked(f"{self.name} is locked")
        if amount > self.available:
            raise OutOfStock(f"{self.name}: requested {amount}, available {self.available}")
        self.available -= amount

    def deposit(self, amount):
        """Add units to stock."""
        if amount < 0:
            raise ValueError(f"{self.name}: cannot deposit {amount}")
        self.available += amount

    def set_available(self, amount):
        if amount < 0:
            raise ValueError(f"{self.name}: available must be >= 0, got {amount}")
        self.available = amount

    def unlock(self):
        self.usable = True

    def __repr__(self):
        return (f"Resource(name={self.name!r}, kind={self.kind.value}, "
                f"available={self.available}, usable={self.usable})")


class ResourceRegistry:
    """
    Name-indexed table of every donor and acceptor in a game.

    Iteration follows insertion order, which the display tables rely on.
    """

    def __init__(self, resources=()):
        self._resources = {}
        for resource in resources:
            self._resources[resource.name] = resource

    @classmethod
    def from_config(cls, available, atp_per_electron, definitions=None):
        """
        Build a registry from the resource definition table.

        Args:
            available (dict): Starting stock per resource name (missing means 0)
            atp_per_electron (dict): Acceptor yields for the active rule set
            definitions (dict): Resource definitions, defaults to ``RESOURCES``

        Returns:
            ResourceRegistry: Fresh registry
        """
        definitions = RESOURCES if definitions is None else definitions
        resources = []
        for name, spec in definitions.items():
            resources.append(Resource(
                name=name,
                kind=spec["kind"],
                available=available.get(name, 0),
                atp_per_electron=atp_per_electron.get(name, 0),
                usable=spec.get("usable", True),
                periodic=spec.get("periodic", False),
            ))
        return cls(resources)

    def get(self, name):
        """
        Look up a resource by name.

        Raises:
            UnknownResource: If no such resource exists
        """
        try:
            return self._resources[name]
        except KeyError:
            raise UnknownResource(name) from None

    def consume(self, name, amount):
        """
        Withdraw units from a resource.

        Args:
            name (str): Resource name
            amount (int): Units to withdraw

        Raises:
            UnknownResource: If the name is not registered
            CapabilityLocked: If the resource is not usable
            OutOfStock: If amount exceeds availability
        """
        self.get(name).withdraw(amount)

    def add(self, name, amount):
        self.get(name).deposit(amount)

    def set_available(self, name, amount):
        self.get(name).set_available(amount)

    def set_usable(self, name, usable):
        """
        Change usability of a resource.

        Usability only ever opens up; re-locking a usable resource is refused.

        Raises:
            ValueError: On an attempt to re-lock a usable resource
        """
        resource = self.get(name)
        if usable:
            resource.unlock()
        elif resource.usable:
            raise ValueError(f"{name} is already usable and cannot be locked again")

    def unlock_acceptors(self, names, amount):
        """
        Make acceptors usable and reset their stock.

        Args:
            names (iterable): Acceptor names
            amount (int): Stock each acceptor is set to
        """
        for name in names:
            resource = self.get(name)
            if resource.is_donor:
                raise ValueError(f"{name} is a donor, not an acceptor")
            resource.unlock()
            resource.set_available(amount)

    def donors(self):
        return [r for r in self._resources.values() if r.kind is ResourceKind.DONOR]

    def acceptors(self):
        return [r for r in self._resources.values() if r.kind is ResourceKind.ACCEPTOR]

    def donor_total(self):
        """
        Total stock across all donors.

        Returns:
            int or float: Sum of donor availability
        """
        return sum(r.available for r in self.donors())

    def __contains__(self, name):
        return name in self._resources

    def __iter__(self):
        return iter(self._resources.values())

    def __len__(self):
        return len(self._resources)

    def __repr__(self):
        return f"ResourceRegistry(donors={len(self.donors())}, acceptors={len(self.acceptors())})"
