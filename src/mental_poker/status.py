# Area: Game
"""
mental_poker.status — Aggregate game phase
==========================================

GameStatus says which sub-protocol currently holds control of a room.

    INITIATING      Start not called yet. Players may enter.
    IDLE            Previous round finished. Enter or start the next one.
    DECK_ACTION     Shuffle/reveal protocol holds control (carries DeckStatus).
    BETTING_ACTION  Betting protocol holds control (carries BettingStatus).
    CLOSED          Terminal.

Transitions are decided by Game, never by the status itself.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ._betting.table import BettingStatus
from ._deck.status import DeckStatus


class GameStatusKind(Enum):
    INITIATING = "Initiating"
    IDLE = "Idle"
    DECK_ACTION = "DeckAction"
    BETTING_ACTION = "BettingAction"
    CLOSED = "Closed"


@dataclass(frozen=True)
class GameStatus:
    """One variant of the game phase, with the sub-protocol status it carries."""

    kind: GameStatusKind
    deck: Optional[DeckStatus] = None
    betting: Optional[BettingStatus] = None

    def __post_init__(self):
        if (self.kind == GameStatusKind.DECK_ACTION) != (self.deck is not None):
            raise ValueError(f"{self.kind.value} status with deck={self.deck}")
        if (self.kind == GameStatusKind.BETTING_ACTION) != (self.betting is not None):
            raise ValueError(f"{self.kind.value} status with betting={self.betting}")

    @classmethod
    def initiating(cls) -> "GameStatus":
        return cls(GameStatusKind.INITIATING)

    @classmethod
    def idle(cls) -> "GameStatus":
        return cls(GameStatusKind.IDLE)

    @classmethod
    def deck_action(cls, deck_status: DeckStatus) -> "GameStatus":
        return cls(GameStatusKind.DECK_ACTION, deck=deck_status)

    @classmethod
    def betting_action(cls, betting_status: BettingStatus) -> "GameStatus":
        return cls(GameStatusKind.BETTING_ACTION, betting=betting_status)

    @classmethod
    def closed(cls) -> "GameStatus":
        return cls(GameStatusKind.CLOSED)

    def is_active(self) -> bool:
        return self.kind != GameStatusKind.CLOSED

    def is_initiating(self) -> bool:
        """True while the deck protocol sits in its initial sub-status."""
        return self == GameStatus.deck_action(DeckStatus.initiating())

    def accepts_round_change(self) -> bool:
        """start/close are only legal between rounds."""
        return self.kind in (GameStatusKind.INITIATING, GameStatusKind.IDLE)

    def __str__(self) -> str:
        if self.deck is not None:
            return f"{self.kind.value}({self.deck.phase.value})"
        if self.betting is not None:
            return f"{self.kind.value}({self.betting.stage.value})"
        return self.kind.value
