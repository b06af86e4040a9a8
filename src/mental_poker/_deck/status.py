# Area: Deck
"""
mental_poker._deck.status — Deck protocol status
=================================================

Phases of the shuffle/reveal protocol and the status value the deck
reports to the orchestrator.

Phase transitions:
INITIATING -> SHUFFLING(0)            (on start)
SHUFFLING(t) -> SHUFFLING(t+1)        (on submit_shuffled, t+1 < players)
SHUFFLING(last) -> REVEALING(0, 0)    (hole cards to reveal)
SHUFFLING(last) -> RUNNING            (nothing to reveal)
REVEALING(c, t) -> REVEALING(c, t+1)  (on submit_reveal_part)
REVEALING(c, last) -> FINISHING_REVEAL(c)
FINISHING_REVEAL(c) -> REVEALING(c+1, 0) or RUNNING   (on finish_reveal)
Any state -> CLOSED (on close)
Any state except CLOSED -> INITIATING (on reset)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DeckPhase(Enum):
    """Phase of the deck protocol."""
    INITIATING = "INITIATING"              # Players may enter
    SHUFFLING = "SHUFFLING"                # Player `turn` must shuffle
    REVEALING = "REVEALING"                # Player `turn` must send a reveal part for `card`
    FINISHING_REVEAL = "FINISHING_REVEAL"  # All parts for `card` received
    RUNNING = "RUNNING"                    # Shuffled and playable
    CLOSED = "CLOSED"


@dataclass(frozen=True)
class DeckStatus:
    """Status reported by the deck protocol."""

    phase: DeckPhase
    turn: Optional[int] = None
    card: Optional[int] = None

    @classmethod
    def initiating(cls) -> "DeckStatus":
        return cls(DeckPhase.INITIATING)

    @classmethod
    def shuffling(cls, turn: int) -> "DeckStatus":
        return cls(DeckPhase.SHUFFLING, turn=turn)

    @classmethod
    def revealing(cls, card: int, turn: int) -> "DeckStatus":
        return cls(DeckPhase.REVEALING, turn=turn, card=card)

    @classmethod
    def finishing_reveal(cls, card: int) -> "DeckStatus":
        return cls(DeckPhase.FINISHING_REVEAL, card=card)

    @classmethod
    def running(cls) -> "DeckStatus":
        return cls(DeckPhase.RUNNING)

    @classmethod
    def closed(cls) -> "DeckStatus":
        return cls(DeckPhase.CLOSED)

    def is_ready(self) -> bool:
        """True when the deck is shuffled and playable."""
        return self.phase == DeckPhase.RUNNING
