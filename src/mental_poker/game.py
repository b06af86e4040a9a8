# Area: Game
"""
mental_poker.game — Round orchestrator
======================================

Game owns one deck protocol and one betting table for a room and
decides which operations are legal in the current phase.

Every operation either applies completely or raises a GameError having
changed nothing. Deck failures are wrapped in DeckProtocolError with the
original DeckError kept. After each successful call forwarded to the
deck, the game status is derived again from the deck's live status:

    deck not ready  ->  DeckAction(deck status)
    deck ready      ->  betting.advance(); BettingAction(betting status)

Once the betting table holds control, advance_betting() walks its
decision points and finish_round() is accepted only after it settles.

The orchestrator holds no locks. Callers must serialize operations on
one Game (see TableHost).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import copy
import logging

from ._betting.table import BettingTable
from ._deck.deck import Deck
from .config import TableConfig
from .errors import DeckError, DeckProtocolError, NoActiveRound, OngoingRound
from .status import GameStatus, GameStatusKind
from .types import CryptoHash, RoomId

logger = logging.getLogger("mental_poker.game")


@dataclass
class Game:
    """
    One room's game.

    Attributes:
        name: Display label
        id: Room identifier
        status: Current phase. Changed only by Game operations.
        deck: Shuffle/reveal protocol owned by this game
        betting: Betting table owned by this game
        starting_stake: Chips given to each entering player
    """

    name: str
    id: RoomId
    status: GameStatus = field(default_factory=GameStatus.initiating)
    deck: Deck = field(default_factory=Deck)
    betting: BettingTable = field(default_factory=BettingTable)
    # TODO: replace placeholder chips with token deposits and enforce min/max stakes.
    starting_stake: int = 1000

    def __post_init__(self):
        # enter() seats the deck first; a bad stake must fail before that
        if self.starting_stake < 0:
            raise ValueError(f"starting_stake must not be negative, got {self.starting_stake}")

    @classmethod
    def new(cls, name: str, id: RoomId, config: Optional[TableConfig] = None) -> "Game":
        config = config or TableConfig()
        return cls(
            name=name,
            id=id,
            status=GameStatus.initiating(),
            deck=Deck.new(config.card_count, **config.deck_limits()),
            betting=BettingTable.new(),
            starting_stake=config.starting_stake,
        )

    # ── Round lifecycle ──────────────────────────────────────

    def enter(self) -> int:
        """Seat a new player. Returns the seat index."""
        seat = self._call_deck(self.deck.enter)
        self.betting.new_player(self.starting_stake)
        logger.info(f"[{self.id}] Player entered at seat {seat}")
        return seat

    def start(self) -> None:
        if not self.status.accepts_round_change():
            raise OngoingRound()
        self._call_deck(self.deck.start)
        self._set_status(GameStatus.deck_action(self.deck.status()))

    def close(self) -> None:
        if not self.status.accepts_round_change():
            raise OngoingRound()
        self.deck.close()
        self._set_status(GameStatus.closed())

    def finish_round(self) -> None:
        """Hand control back from a settled betting table and reset the deck."""
        if self.status.kind != GameStatusKind.BETTING_ACTION:
            raise NoActiveRound()
        if not self.betting.status().is_settled:
            raise OngoingRound()
        self._call_deck(self.deck.reset)
        self.betting.reset_round()
        self._set_status(GameStatus.idle())

    # ── Betting protocol ─────────────────────────────────────

    def advance_betting(self) -> None:
        """Resolve the pending betting decision point."""
        if self.status.kind != GameStatusKind.BETTING_ACTION:
            raise NoActiveRound()
        self.betting.advance()
        self._set_status(GameStatus.betting_action(self.betting.status()))

    # ── Snapshots ────────────────────────────────────────────

    def deck_state(self) -> Deck:
        return copy.deepcopy(self.deck)

    def betting_state(self) -> BettingTable:
        return copy.deepcopy(self.betting)

    def state(self) -> GameStatus:
        return self.status

    # ── Deck protocol ────────────────────────────────────────

    def get_partial_shuffle(self) -> List[CryptoHash]:
        return self._call_deck(self.deck.get_partial_shuffle)

    def submit_shuffled(self, new_cards: List[CryptoHash]) -> None:
        self._call_deck(self.deck.submit_shuffled, new_cards)
        self._check_next_status()

    def finish_reveal(self) -> None:
        self._call_deck(self.deck.finish_reveal)
        self._check_next_status()

    def submit_reveal_part(self, card: CryptoHash) -> None:
        self._call_deck(self.deck.submit_reveal_part, card)
        self._check_next_status()

    # ── Helpers ──────────────────────────────────────────────

    def _check_next_status(self) -> None:
        deck_status = self.deck.status()

        if not deck_status.is_ready():
            self._set_status(GameStatus.deck_action(deck_status))
            return

        self.betting.advance()
        self._set_status(GameStatus.betting_action(self.betting.status()))

    def _call_deck(self, operation, *args):
        try:
            return operation(*args)
        except DeckError as e:
            raise DeckProtocolError(e) from e

    def _set_status(self, status: GameStatus) -> None:
        if status != self.status:
            logger.info(f"[{self.id}] Status: {self.status} → {status}")
        self.status = status
