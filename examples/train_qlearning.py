"""
Simple Q-Learning training example with tabular representation.

The agent learns which transfers and evolutions win a scenario.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from environment.energy_env import MicrobialEnergyEnv
from agent.q_learning_agent import QLearningAgent
from utils.logger import Logger
from utils.visualizer import Visualizer
from utils.metrics import MetricsTracker


def main():
    """Train Q-Learning agent."""
    print("Starting Q-Learning training...")

    env = MicrobialEnergyEnv(
        scenario="oxygen_limiting",
        rule_set="batched",
        max_steps=60
    )

    agent = QLearningAgent.from_env(
        env,
        state_space_size=4096,
        learning_rate=0.1,
        gamma=0.95,
        epsilon=1.0,
        epsilon_decay=0.995,
        epsilon_min=0.05,
        seed=0
    )

    logger = Logger(log_dir='logs', experiment_name='qlearning_training')
    visualizer = Visualizer(output_dir='results/qlearning_training')
    metrics = MetricsTracker()

    num_episodes = 1000

    print(f"\nTraining for {num_episodes} episodes...")

    for episode in range(num_episodes):
        summary = agent.play_episode(env, seed=episode)
        metrics.record_episode(**summary)

        if (episode + 1) % 100 == 0:
            stats = metrics.get_statistics(window=100)
            logger.log_metrics(episode + 1, {
                'mean_reward': float(stats['mean_reward']),
                'win_rate': stats['win_rate'],
                'epsilon': agent.epsilon
            })

    print("\n" + "="*60)
    print("Training Complete!")
    print("="*60)
    metrics.print_statistics(window=100)

    os.makedirs('models', exist_ok=True)
    agent.save('models/qlearning_final.pkl')
    logger.save_metrics()

    visualizer.plot_training_rewards(metrics.episode_rewards, window=50)

    # Replay greedily
    print("\nTesting trained agent...")
    agent.epsilon = 0.0
    summary = agent.play_episode(env, learn=False)

    visualizer.plot_energy_budget(env.game.history)
    print("Test episode complete:")
    print(f"  Outcome: {summary['outcome']}")
    print(f"  Turns played: {env.game.turn}")
    print(f"  Total reward: {summary['total_reward']:.2f}")

    logger.close()


if __name__ == "__main__":
    main()
