"""
Q-Learning agent for the discrete game command space.
"""

import numpy as np
import pickle
from .rl_agent import RLAgent


class QLearningAgent(RLAgent):
    """
    Q-Learning agent with epsilon-greedy exploration.

    Uses tabular Q-learning over hashed board observations.
    """

    def __init__(self, state_space_size=4096, action_space_size=None,
                 learning_rate=0.1, gamma=0.95, epsilon=1.0, epsilon_decay=0.995,
                 epsilon_min=0.01, bucket_cap=12, seed=None):
        """
        Initialize Q-Learning agent.

        Args:
            state_space_size (int): Number of Q-table rows observations hash into
            action_space_size (int): Number of discrete actions, defaults to every game command
            learning_rate (float): Learning rate (alpha)
            gamma (float): Discount factor
            epsilon (float): Initial exploration rate
            epsilon_decay (float): Epsilon decay rate per episode
            epsilon_min (float): Minimum epsilon value
            bucket_cap (int): Observation values above this share one bucket
            seed (int): Seed for the exploration generator
        """
        super().__init__(action_space_size, learning_rate)
        self.state_space_size = state_space_size
        self.gamma = gamma
        self.epsilon = epsilon
        self.epsilon_decay = epsilon_decay
        self.epsilon_min = epsilon_min
        self.bucket_cap = bucket_cap
        self.rng = np.random.default_rng(seed)

        # Initialize Q-table
        self.q_table = np.zeros((state_space_size, self.action_space_size))

    def discretize_state(self, observation):
        """
        Map an observation vector to a Q-table row.

        Args:
            observation (array-like): Environment observation

        Returns:
            int: Discrete state index
        """
        buckets = np.minimum(np.asarray(observation, dtype=np.float64), self.bucket_cap)
        key = tuple(int(v) for v in buckets)
        return hash(key) % self.state_space_size

    def select_action(self, state):
        """
        Select action using epsilon-greedy policy.

        Args:
            state: Current environment observation

        Returns:
            int: Action index
        """
        state_idx = self.discretize_state(state)

        # Epsilon-greedy exploration
        if self.rng.random() < self.epsilon:
            return int(self.rng.integers(self.action_space_size))
        return int(np.argmax(self.q_table[state_idx]))

    def update(self, state, action, reward, next_state, done):
        """
        Update Q-table using Q-learning update rule.

        Args:
            state: Current state
            action: Action taken
            reward: Reward received
            next_state: Next state
            done: Whether episode is done
        """
        state_idx = self.discretize_state(state)
        next_state_idx = self.discretize_state(next_state)

        current_q = self.q_table[state_idx, action]

        if done:
            target_q = reward
        else:
            max_next_q = np.max(self.q_table[next_state_idx])
            target_q = reward + self.gamma * max_next_q

        self.q_table[state_idx, action] += self.learning_rate * (target_q - current_q)

        self.total_reward += reward

    def decay_epsilon(self):
        """Decay exploration rate."""
        self.epsilon = max(self.epsilon_min, self.epsilon * self.epsilon_decay)

    def finish_episode(self):
        """Decay exploration, then start the next episode."""
        self.decay_epsilon()
        super().finish_episode()

    def save(self, filepath):
        """
        Save Q-table and parameters.

        Args:
            filepath (str): Path to save file
        """
        data = {
            'q_table': self.q_table,
            'epsilon': self.epsilon,
            'episode': self.episode,
            'state_space_size': self.state_space_size,
            'action_space_size': self.action_space_size,
            'bucket_cap': self.bucket_cap
        }
        with open(filepath, 'wb') as f:
            pickle.dump(data, f)

    def load(self, filepath):
        """
        Load Q-table and parameters.

        Args:
            filepath (str): Path to load file
        """
        with open(filepath, 'rb') as f:
            data = pickle.load(f)

        self.q_table = data['q_table']
        self.epsilon = data['epsilon']
        self.episode = data['episode']
        self.state_space_size = data['state_space_size']
        self.action_space_size = data['action_space_size']
        self.bucket_cap = data['bucket_cap']
