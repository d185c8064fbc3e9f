"""
Visualization utilities for game histories and RL training.
"""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
import os


class Visualizer:
    """
    Plots written to image files; nothing is shown on screen.
    """

    def __init__(self, output_dir='results'):
        """
        Initialize visualizer.

        Args:
            output_dir (str): Directory to save plots
        """
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

    def plot_energy_budget(self, history, save_path=None):
        """
        Plot ATP pool and heterotroph count after each command.

        Args:
            history (dict): Game history with 'atp' and 'count' keys
            save_path (str): Path to save figure

        Returns:
            str: Path of the saved figure
        """
        fig, ax_atp = plt.subplots(figsize=(10, 6))
        ax_atp.plot(history['atp'], linewidth=2, color='orange', label='ATP')
        ax_atp.set_xlabel('Command', fontsize=12)
        ax_atp.set_ylabel('ATP', fontsize=12)
        ax_atp.grid(True, alpha=0.3)

        ax_count = ax_atp.twinx()
        ax_count.step(range(len(history['count'])), history['count'],
                      where='post', linewidth=2, color='blue', label='Heterotrophs')
        ax_count.set_ylabel('Heterotrophs', fontsize=12)

        ax_atp.set_title('Energy Budget', fontsize=14, fontweight='bold')
        fig.legend(loc='upper right')

        if save_path is None:
            save_path = os.path.join(self.output_dir, 'energy_budget.png')
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
        plt.close(fig)
        return save_path

    def plot_donor_depletion(self, history, save_path=None):
        """
        Plot total donor stock remaining after each command.

        Args:
            history (dict): Game history with 'donors_total' key
            save_path (str): Path to save figure

        Returns:
            str: Path of the saved figure
        """
        plt.figure(figsize=(10, 6))
        plt.plot(history['donors_total'], linewidth=2, color='green')
        plt.xlabel('Command', fontsize=12)
        plt.ylabel('Organic Matter Remaining', fontsize=12)
        plt.title('Electron Donor Depletion', fontsize=14, fontweight='bold')
        plt.grid(True, alpha=0.3)
        plt.ylim(bottom=0)

        if save_path is None:
            save_path = os.path.join(self.output_dir, 'donor_depletion.png')
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        plt.close()
        return save_path

    def plot_training_rewards(self, rewards, window=100, save_path=None):
        """
        Plot training rewards with moving average.

        Args:
            rewards (list): Episode rewards
            window (int): Window size for moving average
            save_path (str): Path to save figure

        Returns:
            str: Path of the saved figure
        """
        plt.figure(figsize=(10, 6))
        plt.plot(rewards, alpha=0.3, label='Raw Rewards')

        # Calculate moving average
        if len(rewards) >= window:
            moving_avg = np.convolve(rewards, np.ones(window)/window, mode='valid')
            plt.plot(range(window-1, len(rewards)), moving_avg,
                    linewidth=2, label=f'{window}-Episode Average')

        plt.xlabel('Episode', fontsize=12)
        plt.ylabel('Total Reward', fontsize=12)
        plt.title('Training Progress', fontsize=14, fontweight='bold')
        plt.legend()
        plt.grid(True, alpha=0.3)

        if save_path is None:
            save_path = os.path.join(self.output_dir, 'training_rewards.png')
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        plt.close()
        return save_path
