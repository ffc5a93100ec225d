"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel


class RulesConfig(BaseModel):
    """Rules configuration."""

    revolution: bool = False  # Initial revolution state
    spade3_joker: bool = True  # 3 of Spades beats a single Joker

    # Parser leniency
    one_means_ten: bool = True
    first_char_fallback: bool = True


class DisplayConfig(BaseModel):
    """Display configuration."""

    joker_label: str = "JOKER"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class Config(BaseModel):
    """Root configuration."""

    rules: RulesConfig = RulesConfig()
    display: DisplayConfig = DisplayConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object. An empty file gives the defaults.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
