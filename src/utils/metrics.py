"""
Metrics tracking for game episodes and agent training.
"""

import numpy as np


class MetricsTracker:
    """
    Track and compute metrics over completed games.
    """

    def __init__(self):
        """Initialize metrics tracker."""
        self.reset()

    def reset(self):
        """Reset all metrics."""
        self.episode_rewards = []
        self.episode_lengths = []
        self.outcomes = []
        self.final_populations = []
        self.final_atp = []

    def record_episode(self, total_reward, length, outcome, final_population, final_atp):
        """
        Record metrics for a completed episode.

        Args:
            total_reward (float): Total episode reward
            length (int): Actions taken in the episode
            outcome (str): "win", "loss" or "in_progress" when truncated
            final_population (int): Heterotrophs alive at the end
            final_atp (int): ATP left in the pool at the end
        """
        self.episode_rewards.append(total_reward)
        self.episode_lengths.append(length)
        self.outcomes.append(getattr(outcome, 'value', outcome))
        self.final_populations.append(final_population)
        self.final_atp.append(final_atp)

    def get_statistics(self, window=100):
        """
        Get statistical summary of recent performance.

        Args:
            window (int): Window size for recent statistics

        Returns:
            dict: Statistics dictionary
        """
        recent_rewards = self.episode_rewards[-window:]
        recent_lengths = self.episode_lengths[-window:]
        recent_population = self.final_populations[-window:]
        recent_atp = self.final_atp[-window:]

        stats = {
            'mean_reward': np.mean(recent_rewards) if recent_rewards else 0.0,
            'std_reward': np.std(recent_rewards) if recent_rewards else 0.0,
            'mean_length': np.mean(recent_lengths) if recent_lengths else 0.0,
            'mean_population': np.mean(recent_population) if recent_population else 0.0,
            'mean_atp': np.mean(recent_atp) if recent_atp else 0.0,
            'win_rate': self.calculate_win_rate(window),
            'total_episodes': len(self.episode_rewards)
        }

        return stats

    def print_statistics(self, window=100):
        """
        Print formatted statistics.

        Args:
            window (int): Window size for recent statistics
        """
        stats = self.get_statistics(window)
        print(f"\n{'='*60}")
        print(f"Statistics (last {window} episodes):")
        print(f"{'='*60}")
        print(f"Total Episodes:      {stats['total_episodes']}")
        print(f"Mean Reward:         {stats['mean_reward']:.2f} ± {stats['std_reward']:.2f}")
        print(f"Mean Length:         {stats['mean_length']:.2f}")
        print(f"Mean Population:     {stats['mean_population']:.2f}")
        print(f"Mean Final ATP:      {stats['mean_atp']:.2f}")
        print(f"Win Rate:            {stats['win_rate']:.2%}")
        print(f"{'='*60}\n")

    def get_best_episode(self):
        """
        Get information about the best performing episode.

        Returns:
            dict: Best episode information
        """
        if not self.episode_rewards:
            return None

        best_idx = int(np.argmax(self.episode_rewards))

        return {
            'episode': best_idx,
            'reward': self.episode_rewards[best_idx],
            'length': self.episode_lengths[best_idx],
            'outcome': self.outcomes[best_idx],
            'population': self.final_populations[best_idx],
            'atp': self.final_atp[best_idx]
        }

    def calculate_win_rate(self, window=100):
        """
        Fraction of recent episodes that ended in a win.

        Args:
            window (int): Window size

        Returns:
            float: Win rate (0.0 to 1.0)
        """
        recent = self.outcomes[-window:]
        if not recent:
            return 0.0
        return sum(1 for outcome in recent if outcome == 'win') / len(recent)
