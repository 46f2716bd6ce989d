"""
Common Package

Shared logger and helpers for the describer project.
"""

from .logger import Logger

logger = Logger()

__all__ = ["Logger", "logger"]
