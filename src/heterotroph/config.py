"""
Configuration parameters for the microbial energy economy game.
Contains resource definitions, rule sets, scenarios and reward shaping.
"""

import math

# Sentinel for an effectively bottomless resource pool
UNLIMITED = math.inf

# -----------------------
# Resource Definitions
# -----------------------
# Ordered as they appear in the donor and acceptor tables.
# "usable" is the starting state; locked resources need an evolution to open up.
RESOURCES = {
    # Electron donors
    "cellulose":   {"kind": "donor", "usable": False},   # needs exo-enzymes
    "glucose":     {"kind": "donor", "usable": True},
    "acetate":     {"kind": "donor", "usable": True},
    "lactic_acid": {"kind": "donor", "usable": True},    # fermentation intermediate
    "hydrogen":    {"kind": "donor", "usable": True},

    # Electron acceptors
    "oxygen":      {"kind": "acceptor", "usable": True},
    "nitrate":     {"kind": "acceptor", "usable": False},  # needs anaerobiosis
    "iron":        {"kind": "acceptor", "usable": False},
    "sulfur":      {"kind": "acceptor", "usable": False},
    "CO2":         {"kind": "acceptor", "usable": True, "periodic": True},  # odd turns only
}

ANAEROBIC_ACCEPTORS = ("nitrate", "iron", "sulfur")
FERMENTATION_CHAIN = ("lactic_acid", "acetate", "hydrogen")

# -----------------------
# Rule Sets
# -----------------------
# Two incompatible rule sets. A game is bound to exactly one of them.
RULE_SETS = {
    "per_electron": {
        "transfer_policy": "per_electron",   # one electron per action, death folded in
        "maintenance": False,                # no separate upkeep step
        "evolution_cost": 6,
        "starting_atp": 6,
        "starting_count": 1,
        "atp_per_electron": {
            "oxygen": 3,
            "nitrate": 2,
            "iron": 1,
            "sulfur": 1,
            "CO2": 1,
        },
    },
    "batched": {
        "transfer_policy": "batched",        # min(count, donor, acceptor) electrons
        "maintenance": True,                 # 1 ATP per organism per turn
        "evolution_cost": 3,
        "starting_atp": 0,
        "starting_count": 1,
        "atp_per_electron": {
            "oxygen": 3,
            "nitrate": 3,
            "iron": 2,
            "sulfur": 1,
            "CO2": 1,
        },
    },
}

DEFAULT_RULE_SET = "batched"

# -----------------------
# Evolution Parameters
# -----------------------
EVOLUTION_PARAMS = {
    "cellulose_to_glucose": 3,       # glucose units per cellulose unit
    "anaerobic_replenishment": 5,    # stock granted to each anaerobic acceptor
    "growth_factor": 2,              # population multiplier per growth event
}

# -----------------------
# Scenario Definitions
# -----------------------
# "available" lists starting stock; resources not listed start at 0.
SCENARIOS = {
    "unlimited_oxygen": {
        "number": 1,
        "label": "Unlimited Oxygen",
        "implemented": True,
        "available": {
            "oxygen": UNLIMITED,
            "cellulose": 3,
            "glucose": 3,
        },
    },
    "oxygen_limiting": {
        "number": 2,
        "label": "Oxygen Limiting",
        "implemented": True,
        "available": {
            "oxygen": 3,
            "nitrate": 5,
            "iron": 5,
            "sulfur": 5,
            "glucose": 3,
        },
    },
    # Selectable in the menu, but no rules exist for these yet
    "oxygen_pulse": {
        "number": 3,
        "label": "Oxygen Pulse",
        "implemented": False,
    },
    "photoautotroph": {
        "number": 4,
        "label": "Photoautotroph",
        "implemented": False,
    },
}

# -----------------------
# Environment / RL Parameters
# -----------------------
OBS_RESOURCE_CAP = 999.0    # unlimited stock is reported as this in observations

REWARD_PARAMS = {
    "atp_gain": 1.0,         # per ATP generated
    "donor_consumed": 0.5,   # per donor unit removed from the board
    "step_cost": -0.1,       # every action
    "noop_penalty": -1.0,    # action that changed nothing
    "win_bonus": 50.0,
    "loss_penalty": -50.0,
}

DEFAULT_MAX_STEPS = 100
