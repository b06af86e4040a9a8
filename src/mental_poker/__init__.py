"""
mental_poker — Round orchestrator for mental-poker tables
=========================================================

Quick Start:
    from mental_poker import Game

    game = Game.new("table1", 1)
    game.enter()
    game.enter()
    game.start()
    cards = game.get_partial_shuffle()
    game.submit_shuffled(shuffled(cards))

Hosting many rooms:
    from mental_poker import TableHost, GameRepository, load_config

    config = load_config("config.json")
    host = TableHost(config, GameRepository(config.db_path, create_schema=True))
    room_id = host.create_room("table1")

Serialization:
    from mental_poker import encode_game, decode_game
    data = encode_game(game)
    assert decode_game(data) == game
"""

from .game import Game
from .status import GameStatus, GameStatusKind
from .errors import (
    PokerTableError,
    DeckError,
    DeckErrorCode,
    ErrorRecord,
    GameError,
    DeckProtocolError,
    RoomIdNotFound,
    OngoingRound,
    NoActiveRound,
)
from .config import TableConfig, load_config, validate_config
from .codec import (
    encode_game,
    decode_game,
    encode_status,
    decode_status,
    encode_error,
    decode_error,
)
from .protocols import DeckProtocol, BettingProtocol
from .types import CryptoHash, RoomId, hash_bytes
from ._deck import Deck, DeckPhase, DeckStatus
from ._betting import BettingStage, BettingStatus, BettingTable
from ._host import ActionRouter, GameRepository, TableHost
from ._shared import setup_logging

__all__ = [
    # Orchestrator
    "Game",
    "GameStatus",
    "GameStatusKind",
    # Errors
    "PokerTableError",
    "DeckError",
    "DeckErrorCode",
    "ErrorRecord",
    "GameError",
    "DeckProtocolError",
    "RoomIdNotFound",
    "OngoingRound",
    "NoActiveRound",
    # Configuration
    "TableConfig",
    "load_config",
    "validate_config",
    # Serialization
    "encode_game",
    "decode_game",
    "encode_status",
    "decode_status",
    "encode_error",
    "decode_error",
    # Collaborators
    "DeckProtocol",
    "BettingProtocol",
    "Deck",
    "DeckPhase",
    "DeckStatus",
    "BettingStage",
    "BettingStatus",
    "BettingTable",
    # Host
    "TableHost",
    "GameRepository",
    "ActionRouter",
    "setup_logging",
    # Types
    "CryptoHash",
    "RoomId",
    "hash_bytes",
]
__version__ = "0.1.0"
