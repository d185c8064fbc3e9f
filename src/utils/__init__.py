"""
Utility modules for visualization, logging, and metrics.
"""

from .logger import Logger
from .visualizer import Visualizer
from .metrics import MetricsTracker

__all__ = ["Logger", "Visualizer", "MetricsTracker"]
