# Area: Deck
"""
mental_poker._deck.deck — Reference shuffle/reveal protocol
===========================================================

Sequences the mental-poker deck protocol for one room: players enter,
each player in turn submits a re-shuffled list of card commitments,
then every hole card is revealed by collecting one reveal part per
player. Once all hole cards are revealed the deck reports RUNNING.

Only the sequencing is enforced here. Proof checking of shuffles and
reveal parts belongs to the commitment scheme and is not performed.
Every call validates before it mutates, so a refused call leaves the
deck untouched.
"""

from dataclasses import dataclass, field
from typing import List
import logging

from .status import DeckPhase, DeckStatus
from ..errors import DeckError, DeckErrorCode
from ..types import CryptoHash, card_commitment, is_crypto_hash

logger = logging.getLogger("mental_poker.deck")


@dataclass
class RevealedCard:
    """Reveal parts collected for one card."""
    card: int
    parts: List[CryptoHash] = field(default_factory=list)


def fresh_cards(card_count: int) -> List[CryptoHash]:
    return [card_commitment(i) for i in range(card_count)]


@dataclass
class Deck:
    """
    Shuffle/reveal protocol state for one room.

    Attributes:
        card_count: Number of cards in the deck
        hole_cards: Cards revealed per player before play starts
        min_players: Players required to start shuffling
        max_players: Seat limit
        players: Number of players that entered
        current: Status of the protocol
        cards: Current (possibly partially shuffled) commitments
        pending_parts: Reveal parts received for the card being revealed
        revealed: Cards whose reveal finished this round
    """

    card_count: int = 52
    hole_cards: int = 2
    min_players: int = 2
    max_players: int = 10
    players: int = 0
    current: DeckStatus = field(default_factory=DeckStatus.initiating)
    cards: List[CryptoHash] = field(default_factory=list)
    pending_parts: List[CryptoHash] = field(default_factory=list)
    revealed: List[RevealedCard] = field(default_factory=list)

    def __post_init__(self):
        if self.card_count <= 0:
            raise ValueError(f"card_count must be positive, got {self.card_count}")
        if not self.cards and self.current.phase != DeckPhase.CLOSED:
            self.cards = fresh_cards(self.card_count)

    @classmethod
    def new(cls, card_count: int, **limits) -> "Deck":
        return cls(card_count=card_count, **limits)

    # ── Queries ──────────────────────────────────────────────

    def status(self) -> DeckStatus:
        return self.current

    def get_partial_shuffle(self) -> List[CryptoHash]:
        """Cards the player on turn must shuffle next."""
        self._ensure_open()
        if self.current.phase != DeckPhase.SHUFFLING:
            raise DeckError(DeckErrorCode.NOT_SHUFFLING)
        return list(self.cards)

    # ── Lifecycle ────────────────────────────────────────────

    def enter(self) -> int:
        """Seat a new player. Returns the seat index."""
        self._ensure_open()
        if self.current.phase != DeckPhase.INITIATING:
            raise DeckError(DeckErrorCode.ROUND_IN_PROGRESS)
        if self.players >= self.max_players:
            raise DeckError(DeckErrorCode.TABLE_FULL, f"max {self.max_players} players")
        if (self.players + 1) * self.hole_cards > self.card_count:
            raise DeckError(DeckErrorCode.TABLE_FULL, "not enough cards for another player")
        self.players += 1
        return self.players - 1

    def start(self) -> None:
        self._ensure_open()
        if self.current.phase != DeckPhase.INITIATING:
            raise DeckError(DeckErrorCode.ROUND_IN_PROGRESS)
        if self.players < self.min_players:
            raise DeckError(
                DeckErrorCode.NOT_ENOUGH_PLAYERS,
                f"{self.players} of {self.min_players} required",
            )
        self._advance(DeckStatus.shuffling(0))

    def close(self) -> None:
        self.cards = []
        self.pending_parts = []
        self.revealed = []
        self._advance(DeckStatus.closed())

    def reset(self) -> None:
        """Prepare a fresh deck for the next round, keeping the players."""
        self._ensure_open()
        self.cards = fresh_cards(self.card_count)
        self.pending_parts = []
        self.revealed = []
        self._advance(DeckStatus.initiating())

    # ── Shuffle ──────────────────────────────────────────────

    def submit_shuffled(self, new_cards: List[CryptoHash]) -> None:
        self._ensure_open()
        if self.current.phase != DeckPhase.SHUFFLING:
            raise DeckError(DeckErrorCode.NOT_SHUFFLING)
        new_cards = list(new_cards)
        if len(new_cards) != self.card_count:
            raise DeckError(
                DeckErrorCode.INVALID_CARD_COUNT,
                f"expected {self.card_count}, got {len(new_cards)}",
            )
        if not all(is_crypto_hash(card) for card in new_cards):
            raise DeckError(DeckErrorCode.INVALID_HASH)
        if len(set(new_cards)) != len(new_cards):
            raise DeckError(DeckErrorCode.DUPLICATED_CARDS)

        self.cards = new_cards
        next_turn = self.current.turn + 1
        if next_turn < self.players:
            self._advance(DeckStatus.shuffling(next_turn))
        elif self._cards_to_reveal() > 0:
            self._advance(DeckStatus.revealing(0, 0))
        else:
            self._advance(DeckStatus.running())

    # ── Reveal ───────────────────────────────────────────────

    def submit_reveal_part(self, part: CryptoHash) -> None:
        self._ensure_open()
        if self.current.phase != DeckPhase.REVEALING:
            raise DeckError(DeckErrorCode.NOT_REVEALING)
        if not is_crypto_hash(part):
            raise DeckError(DeckErrorCode.INVALID_HASH)

        self.pending_parts.append(part)
        next_turn = self.current.turn + 1
        if next_turn < self.players:
            self._advance(DeckStatus.revealing(self.current.card, next_turn))
        else:
            self._advance(DeckStatus.finishing_reveal(self.current.card))

    def finish_reveal(self) -> None:
        self._ensure_open()
        if self.current.phase == DeckPhase.REVEALING:
            raise DeckError(
                DeckErrorCode.REVEAL_INCOMPLETE,
                f"{len(self.pending_parts)} of {self.players} parts",
            )
        if self.current.phase != DeckPhase.FINISHING_REVEAL:
            raise DeckError(DeckErrorCode.NOT_REVEALING)

        card = self.current.card
        self.revealed.append(RevealedCard(card=card, parts=self.pending_parts))
        self.pending_parts = []
        if card + 1 < self._cards_to_reveal():
            self._advance(DeckStatus.revealing(card + 1, 0))
        else:
            self._advance(DeckStatus.running())

    # ── Helpers ──────────────────────────────────────────────

    def _cards_to_reveal(self) -> int:
        return self.players * self.hole_cards

    def _ensure_open(self) -> None:
        if self.current.phase == DeckPhase.CLOSED:
            raise DeckError(DeckErrorCode.CLOSED)

    def _advance(self, status: DeckStatus) -> None:
        logger.debug(f"Deck: {self.current} → {status}")
        self.current = status
