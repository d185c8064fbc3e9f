"""
Gymnasium environment for the microbial energy economy game.
"""

import numpy as np
import gymnasium as gym
from gymnasium import spaces
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from heterotroph.config import (
    DEFAULT_MAX_STEPS,
    OBS_RESOURCE_CAP,
    RESOURCES,
    REWARD_PARAMS,
)
from heterotroph.game import Game
from heterotroph.outcome import Outcome
from heterotroph.population import ONE_TIME_CAPABILITIES, Capability


def build_action_table():
    """
    List every game command an agent can issue, in action-index order.

    Returns:
        list: ('transfer', donor, acceptor) tuples followed by ('evolve', capability)
    """
    donors = [name for name, spec in RESOURCES.items() if spec["kind"] == "donor"]
    acceptors = [name for name, spec in RESOURCES.items() if spec["kind"] == "acceptor"]
    return (
        [('transfer', donor, acceptor) for donor in donors for acceptor in acceptors]
        + [('evolve', capability) for capability in Capability]
    )


class MicrobialEnergyEnv(gym.Env):
    """
    Custom Gymnasium environment for playing the microbial energy economy.

    The agent observes the board and the heterotroph community and chooses
    either an electron transfer (followed by a turn advance) or an evolution.

    Observation Space:
        - available stock of every donor, then every acceptor
          (unlimited stock is reported as OBS_RESOURCE_CAP)
        - atp, count, turn parity
        - one flag per one-time capability

    Action Space:
        - Discrete: every (donor, acceptor) pair, then every capability

    Reward:
        - Positive reward for ATP generated and organic matter consumed
        - Penalty for actions that change nothing
        - Bonus on a win, penalty on a loss
    """

    metadata = {'render_modes': ['human', 'ansi']}

    def __init__(self, scenario="unlimited_oxygen", rule_set=None,
                 max_steps=DEFAULT_MAX_STEPS, reward_params=None, render_mode=None):
        """
        Initialize environment.

        Args:
            scenario (str or int): Scenario played in every episode
            rule_set (str): Rule set name, defaults to the configured one
            max_steps (int): Maximum actions per episode
            reward_params (dict): Overrides for REWARD_PARAMS
            render_mode (str): Rendering mode
        """
        super().__init__()

        self.scenario = scenario
        self.rule_set = rule_set
        self.max_steps = max_steps
        self.render_mode = render_mode
        self.reward_params = {**REWARD_PARAMS, **(reward_params or {})}

        self.donors = [name for name, spec in RESOURCES.items() if spec["kind"] == "donor"]
        self.acceptors = [name for name, spec in RESOURCES.items() if spec["kind"] == "acceptor"]
        self.capabilities = list(Capability)
        self.actions = build_action_table()

        self.action_space = spaces.Discrete(len(self.actions))

        obs_size = len(self.donors) + len(self.acceptors) + 3 + len(ONE_TIME_CAPABILITIES)
        high = np.full(obs_size, np.inf, dtype=np.float32)
        high[-len(ONE_TIME_CAPABILITIES):] = 1.0
        self.observation_space = spaces.Box(
            low=np.zeros(obs_size, dtype=np.float32),
            high=high,
            dtype=np.float32
        )

        # Initialize components
        self.game = None
        self.current_step = 0
        self.episode_reward = 0.0

        # Tracking
        self.history = self._empty_history()

    @staticmethod
    def _empty_history():
        return {
            'atp': [],
            'count': [],
            'donors_total': [],
            'actions': [],
            'rewards': []
        }

    def reset(self, seed=None, options=None):
        """
        Reset environment to initial state.

        Args:
            seed (int): Random seed
            options (dict): May carry "scenario" and "rule_set" overrides

        Returns:
            tuple: (observation, info)
        """
        super().reset(seed=seed)

        options = options or {}
        self.scenario = options.get('scenario', self.scenario)
        self.rule_set = options.get('rule_set', self.rule_set)

        self.game = Game(self.scenario, rule_set=self.rule_set)
        self.current_step = 0
        self.episode_reward = 0.0
        self.history = self._empty_history()

        return self._get_observation(), self._get_info()

    def step(self, action):
        """
        Execute one action in the environment.

        Args:
            action (int): Action index

        Returns:
            tuple: (observation, reward, terminated, truncated, info)
        """
        command = self.decode_action(action)
        atp_before = self.game.population.atp
        donors_before = self.game.registry.donor_total()

        if command[0] == 'transfer':
            stats = self.game.take_turn(command[1], command[2])
            atp_gained = stats['atp_generated']
            changed = stats['electrons'] > 0
        else:
            changed = self.game.evolve(command[1])
            atp_gained = 0

        outcome = self.game.outcome()
        donors_consumed = donors_before - self.game.registry.donor_total()
        reward = self._calculate_reward(atp_gained, donors_consumed, changed, outcome)
        self.episode_reward += reward

        self.current_step += 1

        terminated = outcome.is_terminal
        truncated = self.current_step >= self.max_steps and not terminated

        self.history['atp'].append(self.game.population.atp)
        self.history['count'].append(self.game.population.count)
        self.history['donors_total'].append(self.game.registry.donor_total())
        self.history['actions'].append(int(action))
        self.history['rewards'].append(reward)

        info = self._get_info()
        info['atp_delta'] = self.game.population.atp - atp_before

        return self._get_observation(), reward, terminated, truncated, info

    def decode_action(self, action):
        """
        Convert an action index into a game command.

        Args:
            action (int): Action index

        Returns:
            tuple: ('transfer', donor, acceptor) or ('evolve', capability)
        """
        return self.actions[int(action)]

    def _get_observation(self):
        """
        Get current observation.

        Returns:
            np.ndarray: Observation vector
        """
        registry = self.game.registry
        population = self.game.population
        stock = [min(registry.get(name).available, OBS_RESOURCE_CAP)
                 for name in self.donors + self.acceptors]
        flags = [float(population.has_capability(c)) for c in ONE_TIME_CAPABILITIES]
        return np.array(
            stock + [population.atp, population.count, self.game.turn % 2] + flags,
            dtype=np.float32
        )

    def _get_info(self):
        """
        Get additional information.

        Returns:
            dict: Info dictionary
        """
        return {
            'outcome': self.game.outcome().value,
            'turn': self.game.turn,
            'atp': self.game.population.atp,
            'population_size': self.game.population.count,
            'step': self.current_step,
            'episode_reward': self.episode_reward
        }

    def _calculate_reward(self, atp_gained, donors_consumed, changed, outcome):
        """
        Calculate reward for one action.

        Args:
            atp_gained (int): ATP generated by the action
            donors_consumed (int): Donor units that left the board
            changed (bool): Whether the action had any effect
            outcome (Outcome): Outcome after the action

        Returns:
            float: Reward value
        """
        params = self.reward_params
        reward = params['step_cost']
        reward += params['atp_gain'] * atp_gained
        reward += params['donor_consumed'] * max(donors_consumed, 0)
        if not changed:
            reward += params['noop_penalty']
        if outcome is Outcome.WIN:
            reward += params['win_bonus']
        elif outcome is Outcome.LOSS:
            reward += params['loss_penalty']
        return float(reward)

    def render(self):
        """
        Render the environment as text.

        Returns:
            str or None: Text for 'ansi' mode
        """
        status = self.game.population_status()
        lines = [
            f"Turn: {self.game.turn}",
            f"ATP: {status['atp']} | Heterotrophs: {status['count']} "
            f"({'Alive' if status['alive'] else 'Dead'})",
            f"Paths Evolved: {', '.join(status['capabilities']) or 'None'}",
            f"Donors: {self.game.donor_table()}",
            f"Acceptors: {self.game.acceptor_table()}",
        ]
        text = "\n".join(lines)
        if self.render_mode == 'human':
            print(text)
            print("-" * 50)
            return None
        if self.render_mode == 'ansi':
            return text
        return None

    def close(self):
        """Clean up resources."""
        pass
