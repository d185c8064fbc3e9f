"""
Basic scripted playthrough of the microbial energy economy.

Demonstrates the command flow a front end would drive: start a scenario,
transfer electrons, evolve, and check the outcome after every turn.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from heterotroph import Outcome, start_game
from utils.logger import Logger
from utils.visualizer import Visualizer


def main():
    """Play the unlimited oxygen scenario with the batched rules."""
    logger = Logger(log_dir='logs', experiment_name='basic_game')
    visualizer = Visualizer(output_dir='results/basic_game')

    game = start_game("1: Unlimited Oxygen", rule_set="batched")
    logger.log_config({'scenario': game.scenario, 'rule_set': game.rule_set.name})

    # Bank some ATP on glucose, then break the cellulose down
    for _ in range(2):
        game.take_turn("glucose", "oxygen")
    game.evolve("exo_enzymes")

    while game.outcome() is Outcome.IN_PROGRESS:
        result = game.take_turn("glucose", "oxygen")
        logger.log_metrics(game.turn, {
            'atp': game.population.atp,
            'count': game.population.count,
            'electrons': result['electrons'],
            'donors_left': game.registry.donor_total(),
        })
        # Spare ATP goes into growth so more electrons move per turn
        if game.population.atp >= game.rule_set.evolution_cost + game.population.count * 2:
            game.evolve("growth")

    status = game.population_status()
    print(f"\n{'='*60}")
    print("Final State:")
    print(f"{'='*60}")
    print(f"Outcome:        {game.outcome().value}")
    print(f"Turn:           {game.turn}")
    print(f"ATP:            {status['atp']}")
    print(f"Heterotrophs:   {status['count']}")
    print(f"Paths Evolved:  {', '.join(status['capabilities']) or 'None'}")

    logger.save_metrics()
    visualizer.plot_energy_budget(game.history)
    visualizer.plot_donor_depletion(game.history)
    print("Plots saved to results/basic_game/")
    logger.close()


if __name__ == "__main__":
    main()
