"""
Environment module for agent interaction with the microbial energy economy.

This module provides a Gymnasium-compatible environment for training RL agents.
"""

from .energy_env import MicrobialEnergyEnv, build_action_table

__all__ = ["MicrobialEnergyEnv", "build_action_table"]
