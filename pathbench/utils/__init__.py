"""Utilities module for the pathbench project."""

from .logger import BenchLogger
from .config_loader import load_benchmark_config

__all__ = [
    "BenchLogger",
    "load_benchmark_config",
]
