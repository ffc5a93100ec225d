"""Play validation engine for Tycoon/President style card games."""

from .config import Config, load_config
from .game import PlayError, RulesEngine, ValidationResult
from .models import ParsedCard, Rank, Suit

__all__ = [
    "Config",
    "ParsedCard",
    "PlayError",
    "Rank",
    "RulesEngine",
    "Suit",
    "ValidationResult",
    "load_config",
]
