"""
Unit tests for the logger, metrics tracker and visualizer.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

import json
import logging
import pytest
from heterotroph.game import Game
from utils.logger import Logger
from utils.metrics import MetricsTracker
from utils.visualizer import Visualizer


def test_metrics_statistics():
    metrics = MetricsTracker()
    metrics.record_episode(10.0, 5, "win", 2, 4)
    metrics.record_episode(-50.0, 3, "loss", 0, 0)
    metrics.record_episode(20.0, 7, "win", 4, 6)

    stats = metrics.get_statistics(window=10)

    assert stats['total_episodes'] == 3
    assert stats['mean_length'] == pytest.approx(5.0)
    assert stats['win_rate'] == pytest.approx(2 / 3)
    assert metrics.get_best_episode()['episode'] == 2


def test_metrics_window():
    metrics = MetricsTracker()
    metrics.record_episode(0.0, 1, "loss", 0, 0)
    metrics.record_episode(0.0, 1, "win", 1, 0)

    assert metrics.calculate_win_rate(window=1) == 1.0
    assert metrics.calculate_win_rate(window=2) == 0.5


def test_empty_metrics():
    metrics = MetricsTracker()

    assert metrics.get_best_episode() is None
    assert metrics.get_statistics()['mean_reward'] == 0.0
    assert metrics.calculate_win_rate() == 0.0


def test_logger_persists_metrics(tmp_path):
    logger = Logger(log_dir=str(tmp_path), experiment_name="unit_logger")
    try:
        logger.log_metrics(1, {'atp': 3, 'reward': 3.4})
        logger.log_metrics(2, {'atp': 5, 'reward': 1.9})
        metrics_file = logger.save_metrics()
        config_file = logger.log_config({'scenario': 'unlimited_oxygen'})
    finally:
        logger.close()

    with open(metrics_file) as f:
        saved = json.load(f)
    assert saved[0] == {'step': 1, 'atp': 3, 'reward': 3.4}
    assert len(saved) == 2
    assert os.path.exists(config_file)
    assert os.path.exists(logger.log_file)


def test_logger_same_name_follows_log_dir(tmp_path):
    first = Logger(log_dir=str(tmp_path / "a"), experiment_name="same")
    second = Logger(log_dir=str(tmp_path / "b"), experiment_name="same")
    try:
        second.info("hello from b")
        file_handlers = [h for h in second.logger.handlers if isinstance(h, logging.FileHandler)]
    finally:
        second.close()

    assert len(file_handlers) == 1
    with open(second.log_file) as f:
        assert "hello from b" in f.read()
    with open(first.log_file) as f:
        assert "hello from b" not in f.read()


def test_logger_reuses_handlers_for_same_file(tmp_path):
    Logger(log_dir=str(tmp_path), experiment_name="twice")
    again = Logger(log_dir=str(tmp_path), experiment_name="twice")
    try:
        file_handlers = [h for h in again.logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert len(again.logger.handlers) == 2
    finally:
        again.close()


def test_visualizer_writes_plots(tmp_path):
    game = Game("unlimited_oxygen")
    game.take_turn("glucose", "oxygen")
    game.evolve("exo_enzymes")
    visualizer = Visualizer(output_dir=str(tmp_path))

    paths = [
        visualizer.plot_energy_budget(game.history),
        visualizer.plot_donor_depletion(game.history),
        visualizer.plot_training_rewards([1.0, 2.0, 3.0, 4.0], window=2),
    ]

    for path in paths:
        assert os.path.exists(path)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
