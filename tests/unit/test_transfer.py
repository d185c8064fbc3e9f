"""
Unit tests for the per-electron and batched transfer engines.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

import pytest
from heterotroph.config import ANAEROBIC_ACCEPTORS, UNLIMITED
from heterotroph.errors import CapabilityLocked, OffTurn, OutOfStock, PopulationExtinct
from heterotroph.population import Population
from heterotroph.resources import Resource, ResourceRegistry
from heterotroph.rules import get_rule_set
from heterotroph.scenarios import build_registry
from heterotroph.transfer import BatchedTransfer, PerElectronTransfer, make_transfer_engine


def build(scenario, rule_set, atp=0, count=1):
    rules = get_rule_set(rule_set)
    return make_transfer_engine(rules), build_registry(scenario, rules), Population(atp=atp, count=count)


def test_factory_matches_rule_set():
    assert isinstance(make_transfer_engine(get_rule_set("per_electron")), PerElectronTransfer)
    assert isinstance(make_transfer_engine(get_rule_set("batched")), BatchedTransfer)


# ----------------------------------------------------------- per electron

def test_per_electron_single_transfer():
    """Test exactly one electron moves and its ATP is credited."""
    engine, registry, pop = build("oxygen_limiting", "per_electron", atp=6)

    stats = engine.transfer(registry, pop, "glucose", "oxygen", turn=1)

    assert stats == {'electrons': 1, 'atp_generated': 3, 'atp_credited': 3, 'deaths': 0}
    assert registry.get("glucose").available == 2
    assert registry.get("oxygen").available == 2
    assert pop.atp == 9


def test_per_electron_exhausts_oxygen():
    engine, registry, pop = build("oxygen_limiting", "per_electron")

    for turn in range(1, 4):
        engine.transfer(registry, pop, "glucose", "oxygen", turn=turn)

    assert registry.get("oxygen").available == 0
    registry.set_available("acetate", 2)
    with pytest.raises(OutOfStock):
        engine.transfer(registry, pop, "acetate", "oxygen", turn=4)
    assert registry.get("acetate").available == 2
    assert pop.atp == 9


def test_per_electron_shortfall_kills():
    """Members that receive no ATP die during the transfer."""
    engine, registry, pop = build("oxygen_limiting", "per_electron", atp=0, count=4)
    registry.unlock_acceptors(ANAEROBIC_ACCEPTORS, 5)

    # nitrate yields 2 ATP for 4 organisms: 2 starve
    stats = engine.transfer(registry, pop, "glucose", "nitrate", turn=1)

    assert stats['deaths'] == 2
    assert pop.count == 2
    assert pop.atp == 2


def test_per_electron_single_atp_for_many():
    engine, registry, pop = build("oxygen_limiting", "per_electron", atp=1, count=4)
    registry.unlock_acceptors(ANAEROBIC_ACCEPTORS, 5)

    engine.transfer(registry, pop, "glucose", "sulfur", turn=1)

    assert pop.count == 1
    assert pop.atp == 2


def test_per_electron_extinction_discards_atp():
    """If everyone dies, the generated ATP is never credited."""
    registry = ResourceRegistry([
        Resource("glucose", "donor", available=3),
        Resource("void", "acceptor", available=3, atp_per_electron=0),
    ])
    pop = Population(atp=4, count=2)
    engine = PerElectronTransfer(get_rule_set("per_electron"))

    stats = engine.transfer(registry, pop, "glucose", "void", turn=1)

    assert pop.count == 0
    assert not pop.alive
    assert pop.atp == 4
    assert stats['atp_credited'] == 0


def test_enough_atp_keeps_everyone():
    engine, registry, pop = build("unlimited_oxygen", "per_electron", atp=0, count=3)

    engine.transfer(registry, pop, "glucose", "oxygen", turn=1)

    assert pop.count == 3
    assert pop.atp == 3
    assert registry.get("oxygen").available == UNLIMITED


def test_periodic_acceptor_only_on_odd_turns():
    registry = ResourceRegistry([
        Resource("hydrogen", "donor", available=3),
        Resource("CO2", "acceptor", available=2, atp_per_electron=1, periodic=True),
    ])
    pop = Population(atp=0, count=1)
    engine = PerElectronTransfer(get_rule_set("per_electron"))

    with pytest.raises(OffTurn):
        engine.transfer(registry, pop, "hydrogen", "CO2", turn=2)
    assert registry.get("CO2").available == 2

    engine.transfer(registry, pop, "hydrogen", "CO2", turn=3)
    assert registry.get("CO2").available == 1
    assert pop.atp == 1


def test_locked_donor():
    engine, registry, pop = build("unlimited_oxygen", "per_electron", atp=6)

    with pytest.raises(CapabilityLocked):
        engine.transfer(registry, pop, "cellulose", "oxygen", turn=1)
    assert registry.get("cellulose").available == 3
    assert pop.atp == 6


def test_locked_acceptor():
    engine, registry, pop = build("oxygen_limiting", "per_electron")

    with pytest.raises(CapabilityLocked):
        engine.transfer(registry, pop, "glucose", "nitrate", turn=1)
    assert registry.get("nitrate").available == 5


def test_dead_population_cannot_transfer():
    engine, registry, pop = build("unlimited_oxygen", "per_electron", atp=3, count=0)

    with pytest.raises(PopulationExtinct):
        engine.transfer(registry, pop, "glucose", "oxygen", turn=1)
    assert pop.atp == 3


def test_swapped_roles():
    engine, registry, pop = build("unlimited_oxygen", "per_electron")

    with pytest.raises(ValueError):
        engine.transfer(registry, pop, "oxygen", "glucose", turn=1)
    with pytest.raises(ValueError):
        engine.transfer(registry, pop, "glucose", "acetate", turn=1)


# ---------------------------------------------------------------- batched

def test_batched_limited_by_donor():
    """Test transfers = min(count, donor, acceptor)."""
    engine, registry, pop = build("unlimited_oxygen", "batched", atp=0, count=4)

    stats = engine.transfer(registry, pop, "glucose", "oxygen", turn=1)

    assert stats['electrons'] == 3
    assert stats['atp_generated'] == 9
    assert pop.atp == 9
    assert pop.count == 4
    assert registry.get("glucose").available == 0
    assert registry.get("oxygen").available == UNLIMITED


def test_batched_limited_by_population():
    engine, registry, pop = build("oxygen_limiting", "batched", atp=0, count=2)

    stats = engine.transfer(registry, pop, "glucose", "oxygen", turn=1)

    assert stats['electrons'] == 2
    assert pop.atp == 6
    assert registry.get("glucose").available == 1
    assert registry.get("oxygen").available == 1


def test_batched_limited_by_acceptor():
    engine, registry, pop = build("oxygen_limiting", "batched", atp=0, count=8)
    registry.add("glucose", 10)

    engine.transfer(registry, pop, "glucose", "oxygen", turn=1)

    assert registry.get("oxygen").available == 0
    assert registry.get("glucose").available == 10
    assert pop.atp == 9


def test_batched_zero_transfers():
    engine, registry, pop = build("unlimited_oxygen", "batched")

    with pytest.raises(OutOfStock):
        engine.transfer(registry, pop, "acetate", "oxygen", turn=1)
    assert pop.atp == 0


def test_batched_never_kills():
    engine, registry, pop = build("oxygen_limiting", "batched", atp=0, count=4)
    registry.unlock_acceptors(ANAEROBIC_ACCEPTORS, 5)

    stats = engine.transfer(registry, pop, "glucose", "sulfur", turn=1)

    assert stats['deaths'] == 0
    assert pop.count == 4
    assert pop.atp == 3


def test_batched_periodic_acceptor_only_on_odd_turns():
    registry = ResourceRegistry([
        Resource("hydrogen", "donor", available=3),
        Resource("CO2", "acceptor", available=2, atp_per_electron=1, periodic=True),
    ])
    pop = Population(atp=0, count=2)
    engine = BatchedTransfer(get_rule_set("batched"))

    with pytest.raises(OffTurn):
        engine.transfer(registry, pop, "hydrogen", "CO2", turn=2)
    assert registry.get("hydrogen").available == 3
    assert registry.get("CO2").available == 2
    assert pop.atp == 0

    stats = engine.transfer(registry, pop, "hydrogen", "CO2", turn=3)
    assert stats['electrons'] == 2
    assert registry.get("CO2").available == 0
    assert pop.atp == 2


def test_batched_locked_acceptor():
    engine, registry, pop = build("oxygen_limiting", "batched", atp=1, count=2)

    for acceptor in ANAEROBIC_ACCEPTORS:
        with pytest.raises(CapabilityLocked):
            engine.transfer(registry, pop, "glucose", acceptor, turn=1)
        assert registry.get(acceptor).available == 5
    assert registry.get("glucose").available == 3
    assert pop.atp == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
