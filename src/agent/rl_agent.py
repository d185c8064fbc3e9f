"""
Base RL Agent class for playing the microbial energy economy.
"""

from abc import ABC, abstractmethod

from environment.energy_env import build_action_table


class RLAgent(ABC):
    """
    Abstract base class for agents that issue game commands.

    Subclasses choose an action index and learn from the reward of each
    command. ``play_episode`` drives one whole game through a
    ``MicrobialEnergyEnv`` and reports it in the shape
    ``MetricsTracker.record_episode`` takes.
    """

    def __init__(self, action_space_size=None, learning_rate=0.001):
        """
        Initialize RL agent.

        Args:
            action_space_size (int): Number of game commands, defaults to
                every transfer pair plus every evolution path
            learning_rate (float): Learning rate for updates
        """
        if action_space_size is None:
            action_space_size = len(build_action_table())
        self.action_space_size = action_space_size
        self.learning_rate = learning_rate
        self.episode = 0
        self.total_reward = 0.0

    @classmethod
    def from_env(cls, env, **kwargs):
        """
        Build an agent sized to an environment's action space.

        Args:
            env (MicrobialEnergyEnv): Environment the agent will play
            **kwargs: Remaining constructor arguments

        Returns:
            RLAgent: New agent
        """
        return cls(action_space_size=env.action_space.n, **kwargs)

    @abstractmethod
    def select_action(self, state):
        """
        Select action based on current state.

        Args:
            state: Current environment observation

        Returns:
            int: Action index
        """
        pass

    @abstractmethod
    def update(self, state, action, reward, next_state, done):
        """
        Update agent based on experience.

        Args:
            state: Current state
            action: Action taken
            reward: Reward received
            next_state: Next state
            done: Whether the game ended
        """
        pass

    @abstractmethod
    def save(self, filepath):
        """Save agent parameters."""
        pass

    @abstractmethod
    def load(self, filepath):
        """Load agent parameters."""
        pass

    def play_episode(self, env, learn=True, seed=None):
        """
        Play one game until it is won, lost or truncated.

        Args:
            env (MicrobialEnergyEnv): Environment to play in
            learn (bool): Update after every command and close the episode
            seed (int): Seed passed to ``env.reset``

        Returns:
            dict: total_reward, length, outcome, final_population, final_atp
        """
        state, info = env.reset(seed=seed)
        terminated = truncated = False
        total_reward = 0.0
        length = 0

        while not (terminated or truncated):
            action = self.select_action(state)
            next_state, reward, terminated, truncated, info = env.step(action)
            if learn:
                # Truncation is not a game end, so it still bootstraps
                self.update(state, action, reward, next_state, terminated)
            state = next_state
            total_reward += reward
            length += 1

        if learn:
            self.finish_episode()

        return {
            'total_reward': total_reward,
            'length': length,
            'outcome': info['outcome'],
            'final_population': info['population_size'],
            'final_atp': info['atp'],
        }

    def finish_episode(self):
        """Hook run after a learning episode."""
        self.reset_episode()

    def reset_episode(self):
        """Reset episode-specific statistics."""
        self.episode += 1
        self.total_reward = 0.0
