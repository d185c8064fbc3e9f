"""
Unit tests for the RLAgent episode loop.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

import pytest
import numpy as np
from agent.q_learning_agent import QLearningAgent
from environment.energy_env import MicrobialEnergyEnv, build_action_table
from utils.metrics import MetricsTracker


def test_default_action_space_covers_every_command():
    agent = QLearningAgent(state_space_size=8)

    assert agent.action_space_size == len(build_action_table()) == 29
    assert agent.q_table.shape == (8, 29)


def test_from_env_matches_action_space():
    env = MicrobialEnergyEnv()
    agent = QLearningAgent.from_env(env, state_space_size=16, epsilon=0.5)

    assert agent.action_space_size == env.action_space.n
    assert agent.q_table.shape == (16, env.action_space.n)
    assert agent.epsilon == 0.5


def test_greedy_episode_without_learning():
    """Action 0 uses locked cellulose, so the lone heterotroph starves."""
    env = MicrobialEnergyEnv(rule_set="batched", max_steps=10)
    agent = QLearningAgent.from_env(env, state_space_size=64, epsilon=0.0)

    summary = agent.play_episode(env, learn=False, seed=0)

    assert summary['outcome'] == 'loss'
    assert summary['length'] == 1
    assert summary['final_population'] == 0
    assert summary['total_reward'] == pytest.approx(-51.1)
    assert not np.any(agent.q_table)
    assert agent.episode == 0


def test_learning_episode_updates_agent():
    env = MicrobialEnergyEnv(max_steps=5)
    agent = QLearningAgent.from_env(env, state_space_size=64, epsilon=1.0,
                                    epsilon_decay=0.5, seed=0)

    summary = agent.play_episode(env, seed=0)

    assert 1 <= summary['length'] <= 5
    assert summary['outcome'] in ('win', 'loss', 'in_progress')
    assert np.any(agent.q_table)
    assert agent.episode == 1
    assert agent.epsilon == 0.5


def test_summary_feeds_metrics():
    env = MicrobialEnergyEnv(max_steps=5)
    agent = QLearningAgent.from_env(env, state_space_size=64, seed=1)
    metrics = MetricsTracker()

    for episode in range(3):
        metrics.record_episode(**agent.play_episode(env, seed=episode))

    assert metrics.get_statistics()['total_episodes'] == 3
    assert len(metrics.outcomes) == 3


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
