# Area: Shared
"""
mental_poker.config — Table configuration
=========================================

Configuration for rooms created by a host.

Values come from, in increasing priority:
    1. Defaults on TableConfig
    2. A JSON config file
    3. Environment variables (a local .env file is loaded first)
"""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional
import json
import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger("mental_poker.config")

DEFAULT_CARD_COUNT = 52
DEFAULT_STARTING_STAKE = 1000

# Environment variable -> config key
ENV_MAPPINGS = {
    "POKER_CARD_COUNT": "card_count",
    "POKER_STARTING_STAKE": "starting_stake",
    "POKER_MIN_PLAYERS": "min_players",
    "POKER_MAX_PLAYERS": "max_players",
    "POKER_HOLE_CARDS": "hole_cards",
    "POKER_DB_PATH": "db_path",
    "POKER_LOG_FILE": "log_file",
    "POKER_LOG_LEVEL": "log_level",
}

INT_KEYS = {"card_count", "starting_stake", "min_players", "max_players", "hole_cards"}

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class TableConfig:
    """
    Settings shared by every room of a host.

    Attributes:
        card_count: Cards in a fresh deck
        starting_stake: Placeholder chips given to each entering player
        min_players: Players required before start
        max_players: Seat limit per room
        hole_cards: Cards revealed to each player before betting
        db_path: SQLite file used by the game repository
        log_file: JSON log file written by setup_logging
        log_level: Logging level name
    """

    card_count: int = DEFAULT_CARD_COUNT
    starting_stake: int = DEFAULT_STARTING_STAKE
    min_players: int = 2
    max_players: int = 10
    hole_cards: int = 2
    db_path: str = "tables.db"
    log_file: str = "mental_poker.log"
    log_level: str = "INFO"

    def __post_init__(self):
        validate_config(asdict(self))

    def deck_limits(self) -> Dict[str, int]:
        """Keyword arguments for Deck.new()."""
        return {
            "hole_cards": self.hole_cards,
            "min_players": self.min_players,
            "max_players": self.max_players,
        }

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate a configuration dict.

    Args:
        config: Configuration dict

    Raises:
        ValueError: If a key is unknown or a value is out of range
    """
    known = {f.name for f in fields(TableConfig)}
    unknown = [k for k in config if k not in known]
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")

    for key in INT_KEYS & config.keys():
        if not isinstance(config[key], int) or isinstance(config[key], bool):
            raise ValueError(f"Config key '{key}' must be an integer")

    if config.get("card_count", DEFAULT_CARD_COUNT) <= 0:
        raise ValueError("card_count must be positive")
    if config.get("starting_stake", DEFAULT_STARTING_STAKE) < 0:
        raise ValueError("starting_stake must not be negative")
    if config.get("hole_cards", 2) < 0:
        raise ValueError("hole_cards must not be negative")
    min_players = config.get("min_players", 2)
    max_players = config.get("max_players", 10)
    if min_players < 1 or max_players < min_players:
        raise ValueError(
            f"Invalid player limits: min_players={min_players}, max_players={max_players}"
        )
    level = config.get("log_level", "INFO")
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid log_level: {level}")


def load_config(config_path: Optional[str] = None) -> TableConfig:
    """Load config from file and environment."""
    load_dotenv()
    config: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config = json.load(f)
        else:
            logger.warning(f"Config file not found: {config_path}")

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            value: Any = os.environ[env_key]
            if config_key in INT_KEYS:
                try:
                    value = int(value)
                except ValueError:
                    raise ValueError(f"{env_key} must be an integer, got {value!r}")
            elif config_key == "log_level":
                value = value.upper()
            config[config_key] = value

    validate_config(config)
    return TableConfig(**config)
