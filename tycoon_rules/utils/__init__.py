"""Utilities."""

from .logger import RulesDisplay, setup_logging

__all__ = [
    "RulesDisplay",
    "setup_logging",
]
