# Area: Shared
"""
mental_poker.codec — Binary encoding of games, statuses and errors
==================================================================

Stable, lossless round trip for everything a host persists or sends to
clients:

    decode_game(encode_game(game)) == game
    decode_status(encode_status(status)) == status
    decode_error(encode_error(error)) == error

The byte format is UTF-8 JSON written by pydantic TypeAdapters built
over the dataclasses. Malformed input raises pydantic.ValidationError.
"""

from typing import Any, Dict, Type

from pydantic import TypeAdapter

from .errors import ErrorRecord, GameError
from .game import Game
from .status import GameStatus

_GAME_ADAPTER = TypeAdapter(Game)
_STATUS_ADAPTER = TypeAdapter(GameStatus)
_ERROR_ADAPTER = TypeAdapter(ErrorRecord)

_adapters: Dict[Type, TypeAdapter] = {
    Game: _GAME_ADAPTER,
    GameStatus: _STATUS_ADAPTER,
    ErrorRecord: _ERROR_ADAPTER,
}


def encode_game(game: Game) -> bytes:
    return _GAME_ADAPTER.dump_json(game)


def decode_game(data: bytes) -> Game:
    return _GAME_ADAPTER.validate_json(data)


def encode_status(status: GameStatus) -> bytes:
    return _STATUS_ADAPTER.dump_json(status)


def decode_status(data: bytes) -> GameStatus:
    return _STATUS_ADAPTER.validate_json(data)


def encode_error(error: GameError) -> bytes:
    return _ERROR_ADAPTER.dump_json(error.to_record())


def decode_error(data: bytes) -> GameError:
    return GameError.from_record(_ERROR_ADAPTER.validate_json(data))


def to_jsonable(value: Any) -> Any:
    """
    Convert a dataclass snapshot (Deck, BettingTable, GameStatus, ...) into
    plain JSON-compatible Python values.
    """
    if value is None:
        return None
    if isinstance(value, GameError):
        value = value.to_record()
    value_type = type(value)
    adapter = _adapters.get(value_type)
    if adapter is None:
        adapter = _adapters[value_type] = TypeAdapter(value_type)
    return adapter.dump_python(value, mode="json")
