# Area: Betting
"""
mental_poker._betting.table — Reference betting table
=====================================================

Tracks seated players and walks the betting decision points of a
round. Stakes are placeholder chips; pots, blinds and turn rules are
not modelled here.

Stage order:
WAITING -> PREFLOP -> FLOP -> TURN -> RIVER -> SHOWDOWN

Within each betting stage every seated player gets one decision point.
SHOWDOWN is terminal until reset_round().
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import logging

logger = logging.getLogger("mental_poker.betting")


class BettingStage(Enum):
    """Stage of the betting round."""
    WAITING = "WAITING"
    PREFLOP = "PREFLOP"
    FLOP = "FLOP"
    TURN = "TURN"
    RIVER = "RIVER"
    SHOWDOWN = "SHOWDOWN"


STAGE_ORDER = [
    BettingStage.WAITING,
    BettingStage.PREFLOP,
    BettingStage.FLOP,
    BettingStage.TURN,
    BettingStage.RIVER,
    BettingStage.SHOWDOWN,
]


@dataclass(frozen=True)
class BettingStatus:
    """Status reported by the betting table."""

    stage: BettingStage
    turn: Optional[int] = None

    @property
    def is_settled(self) -> bool:
        return self.stage == BettingStage.SHOWDOWN


@dataclass
class BettingPlayer:
    """One seat at the betting table."""
    stake: int


@dataclass
class BettingTable:
    """
    Betting state for one room.

    Attributes:
        players: Seats in entry order
        stage: Current stage of the round
        turn: Seat whose decision is pending, None outside betting stages
        round_number: Rounds played on this table
    """

    players: List[BettingPlayer] = field(default_factory=list)
    stage: BettingStage = BettingStage.WAITING
    turn: Optional[int] = None
    round_number: int = 0

    @classmethod
    def new(cls) -> "BettingTable":
        return cls()

    def new_player(self, starting_stake: int) -> int:
        """Seat a player with ``starting_stake`` chips. Returns the seat index."""
        if starting_stake < 0:
            raise ValueError(f"starting_stake must not be negative, got {starting_stake}")
        self.players.append(BettingPlayer(stake=starting_stake))
        return len(self.players) - 1

    def status(self) -> BettingStatus:
        return BettingStatus(stage=self.stage, turn=self.turn)

    def advance(self) -> None:
        """Move to the next decision point."""
        if self.stage == BettingStage.SHOWDOWN:
            return
        if self.stage != BettingStage.WAITING and self.turn is not None:
            if self.turn + 1 < len(self.players):
                self.turn += 1
                return
        self._next_stage()

    def reset_round(self) -> None:
        """Go back to WAITING for the next round."""
        self.stage = BettingStage.WAITING
        self.turn = None
        self.round_number += 1
        logger.info(f"Betting table reset for round {self.round_number}")

    def _next_stage(self) -> None:
        next_stage = STAGE_ORDER[STAGE_ORDER.index(self.stage) + 1]
        if next_stage == BettingStage.SHOWDOWN or not self.players:
            next_stage = BettingStage.SHOWDOWN
            self.turn = None
        else:
            self.turn = 0
        logger.debug(f"Betting: {self.stage.value} → {next_stage.value}")
        self.stage = next_stage
