"""Rule logic."""

from .analyzer import MeldAnalysis, MeldAnalyzer, MeldError
from .engine import RulesEngine
from .parser import CardParser
from .validator import PlayError, PlayValidator, ValidationResult

__all__ = [
    "CardParser",
    "MeldAnalysis",
    "MeldAnalyzer",
    "MeldError",
    "PlayError",
    "PlayValidator",
    "RulesEngine",
    "ValidationResult",
]
