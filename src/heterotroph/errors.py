"""
Exceptions raised by the game engine.

In-game rule breaches derive from ``RuleViolation``. The ``Game`` facade turns
them into silent no-ops, so a driver can fire any action without checking the
rules first. Everything else signals a defect in the caller and propagates.
"""


class HeterotrophError(Exception):
    """Base class for all engine errors."""


class RuleViolation(HeterotrophError):
    """An action that the game rules do not allow right now."""


class OutOfStock(RuleViolation):
    """Requested consumption exceeds what a resource has available."""


class InsufficientATP(RuleViolation):
    """The ATP pool cannot cover a cost."""


class CapabilityLocked(RuleViolation):
    """The resource has not been unlocked by an evolution yet."""


class OffTurn(RuleViolation):
    """A periodic acceptor was used on an even turn."""


class PopulationExtinct(RuleViolation):
    """The heterotroph community is dead; nothing can change any more."""


class AlreadyEvolved(RuleViolation):
    """A one-time capability was requested a second time."""


class InvalidScenario(HeterotrophError, ValueError):
    """Unknown or unimplemented scenario identifier."""


class InvalidRuleSet(HeterotrophError, ValueError):
    """Unknown rule set name."""


class UnknownCapability(HeterotrophError, ValueError):
    """Capability tag outside the closed set of evolution paths."""


class UnknownResource(HeterotrophError, KeyError):
    """No resource registered under the given name."""
