"""
Agent module for reinforcement learning.

This module contains RL agents that learn to play the microbial energy economy.
"""

from .rl_agent import RLAgent
from .q_learning_agent import QLearningAgent

__all__ = ["RLAgent", "QLearningAgent"]
