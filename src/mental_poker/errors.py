"""
mental_poker.errors — Exception hierarchy
=========================================

Two families live here:

- ``DeckError`` is raised by the deck protocol. It carries a
  ``DeckErrorCode`` naming exactly what the protocol refused.
- ``GameError`` is raised by the orchestrator and the host. Each
  subclass has a stable ``kind`` tag so it can be serialized and sent to
  clients. ``DeckProtocolError`` wraps a ``DeckError`` without losing its
  code.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Type
import json


class PokerTableError(Exception):
    """Base exception for all mental_poker errors."""
    pass


class DeckErrorCode(Enum):
    """Reasons the deck protocol rejects a call."""
    ROUND_IN_PROGRESS = "ROUND_IN_PROGRESS"
    TABLE_FULL = "TABLE_FULL"
    NOT_ENOUGH_PLAYERS = "NOT_ENOUGH_PLAYERS"
    NOT_SHUFFLING = "NOT_SHUFFLING"
    INVALID_CARD_COUNT = "INVALID_CARD_COUNT"
    DUPLICATED_CARDS = "DUPLICATED_CARDS"
    INVALID_HASH = "INVALID_HASH"
    NOT_REVEALING = "NOT_REVEALING"
    REVEAL_INCOMPLETE = "REVEAL_INCOMPLETE"
    CLOSED = "CLOSED"


class DeckError(PokerTableError):
    """Raised by the deck protocol when it refuses a call."""

    def __init__(self, code: DeckErrorCode, detail: str = ""):
        self.code = code
        self.detail = detail
        message = code.value if not detail else f"{code.value}: {detail}"
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DeckError):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)


@dataclass(frozen=True)
class ErrorRecord:
    """Serializable form of a GameError."""
    kind: str
    deck_error: Optional[DeckErrorCode] = None
    room_id: Optional[int] = None


class GameError(PokerTableError):
    """Base class for orchestrator errors. Subclasses set ``kind``."""

    kind = "GameError"

    def to_record(self) -> ErrorRecord:
        return ErrorRecord(kind=self.kind)

    @staticmethod
    def from_record(record: ErrorRecord) -> "GameError":
        """Rebuild the error instance described by ``record``."""
        cls = _ERROR_KINDS.get(record.kind)
        if cls is None:
            raise ValueError(f"Unknown error kind: {record.kind}")
        if cls is DeckProtocolError:
            if record.deck_error is None:
                raise ValueError("DeckError record without deck_error code")
            return DeckProtocolError(DeckError(record.deck_error))
        if cls is RoomIdNotFound:
            if record.room_id is None:
                raise ValueError("RoomIdNotFound record without room_id")
            return RoomIdNotFound(record.room_id)
        return cls()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameError):
            return NotImplemented
        return self.to_record() == other.to_record()

    def __hash__(self) -> int:
        return hash(self.to_record())

    def format_error_log(
        self, room_id: Optional[int] = None, action: Optional[str] = None
    ) -> str:
        record = self.to_record()
        return _format_error_block(
            error_type=record.kind,
            message=str(self),
            room_id=room_id if room_id is not None else record.room_id,
            action=action,
            details=_record_details(record),
        )


class DeckProtocolError(GameError):
    """The deck protocol rejected a forwarded call."""

    kind = "DeckError"

    def __init__(self, deck_error: DeckError):
        self.deck_error = deck_error
        super().__init__(f"Deck protocol error: {deck_error}")

    @property
    def code(self) -> DeckErrorCode:
        return self.deck_error.code

    def to_record(self) -> ErrorRecord:
        return ErrorRecord(kind=self.kind, deck_error=self.deck_error.code)


class RoomIdNotFound(GameError):
    """No game is registered under the requested room id."""

    kind = "RoomIdNotFound"

    def __init__(self, room_id: int):
        self.room_id = room_id
        super().__init__(f"Room {room_id} not found")

    def to_record(self) -> ErrorRecord:
        return ErrorRecord(kind=self.kind, room_id=self.room_id)


class OngoingRound(GameError):
    """
    start/close called while a round is running or the game is closed, or
    finish_round called before the betting round has settled.
    """

    kind = "OngoingRound"

    def __init__(self):
        super().__init__("A round is in progress")


class NoActiveRound(GameError):
    """Betting call made while the betting protocol does not hold control."""

    kind = "NoActiveRound"

    def __init__(self):
        super().__init__("No betting round in progress")


_ERROR_KINDS: Dict[str, Type[GameError]] = {
    DeckProtocolError.kind: DeckProtocolError,
    RoomIdNotFound.kind: RoomIdNotFound,
    OngoingRound.kind: OngoingRound,
    NoActiveRound.kind: NoActiveRound,
}


def _record_details(record: ErrorRecord) -> Dict[str, object]:
    details: Dict[str, object] = {}
    if record.deck_error is not None:
        details["deck_error"] = record.deck_error.value
    if record.room_id is not None:
        details["room_id"] = record.room_id
    return details


def _format_error_block(
    error_type: str,
    message: str,
    room_id: Optional[int],
    action: Optional[str],
    details: Dict[str, object],
) -> str:
    """Format a structured error block for the log."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " GAME ERROR — ACTION REJECTED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Message:      {message}",
    ]

    if room_id is not None:
        lines.append(f" Room:         {room_id}")
    if action is not None:
        lines.append(f" Action:       {action}")

    if details:
        lines.append("")
        lines.append(" ── DETAILS " + "─" * 52)
        lines.append(_indent_json(details))

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, object], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    formatted = json.dumps(data, indent=indent, default=str, sort_keys=True)
    return "\n".join(" " + line for line in formatted.split("\n"))
