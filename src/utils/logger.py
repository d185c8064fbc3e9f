"""
Logger utility for tracking games and training progress.
"""

import logging
import os
from datetime import datetime
import json

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Logger:
    """
    Logger for experiment tracking and console output.
    """

    def __init__(self, log_dir='logs', experiment_name=None, level=logging.INFO):
        """
        Initialize logger.

        Args:
            log_dir (str): Directory for log files
            experiment_name (str): Name of experiment
            level (int): Logging level for the file and console handlers
        """
        self.log_dir = log_dir
        os.makedirs(log_dir, exist_ok=True)

        if experiment_name is None:
            experiment_name = f"exp_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.experiment_name = experiment_name

        # Setup file logger
        self.log_file = os.path.join(log_dir, f"{experiment_name}.log")

        self.logger = logging.getLogger(experiment_name)
        self.logger.setLevel(level)
        self._attach_handlers()
        self.metrics = []

    def _attach_handlers(self):
        """
        Point the named logger at this experiment's log file.

        Named loggers are process-wide, so a file handler left by an earlier
        experiment with the same name is closed and replaced.
        """
        log_path = os.path.abspath(self.log_file)
        has_file = False
        has_console = False
        for handler in list(self.logger.handlers):
            if isinstance(handler, logging.FileHandler):
                if handler.baseFilename == log_path:
                    has_file = True
                    continue
                self.logger.removeHandler(handler)
                handler.close()
            elif isinstance(handler, logging.StreamHandler):
                has_console = True

        formatter = logging.Formatter(LOG_FORMAT)
        handlers = []
        if not has_file:
            handlers.append(logging.FileHandler(self.log_file))
        if not has_console:
            handlers.append(logging.StreamHandler())
        for handler in handlers:
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def info(self, message):
        """Log info message."""
        self.logger.info(message)

    def warning(self, message):
        """Log warning message."""
        self.logger.warning(message)

    def error(self, message):
        """Log error message."""
        self.logger.error(message)

    def log_metrics(self, step, metrics_dict):
        """
        Log metrics for a step.

        Args:
            step (int): Step number
            metrics_dict (dict): Dictionary of metrics
        """
        metrics_entry = {'step': step, **metrics_dict}
        self.metrics.append(metrics_entry)

        metrics_str = ', '.join([f"{k}: {v:.4f}" if isinstance(v, float) else f"{k}: {v}"
                                for k, v in metrics_dict.items()])
        self.info(f"Step {step} - {metrics_str}")

    def save_metrics(self):
        """
        Save metrics to JSON file.

        Returns:
            str: Path of the metrics file
        """
        metrics_file = os.path.join(self.log_dir, f"{self.experiment_name}_metrics.json")
        with open(metrics_file, 'w') as f:
            json.dump(self.metrics, f, indent=2, default=str)
        self.info(f"Metrics saved to {metrics_file}")
        return metrics_file

    def log_config(self, config_dict):
        """
        Log experiment configuration.

        Args:
            config_dict (dict): Configuration parameters

        Returns:
            str: Path of the config file
        """
        config_file = os.path.join(self.log_dir, f"{self.experiment_name}_config.json")
        with open(config_file, 'w') as f:
            json.dump(config_dict, f, indent=2, default=str)
        self.info(f"Configuration saved to {config_file}")
        return config_file

    def close(self):
        """Detach and close this experiment's handlers."""
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()
