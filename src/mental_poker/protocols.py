# Area: Game
"""
mental_poker.protocols — Collaborator contracts
===============================================

Interfaces the orchestrator consumes from the deck and betting
protocols. The reference implementations in ``_deck`` and ``_betting``
satisfy them.
"""

from typing import List, Protocol, runtime_checkable

from ._betting.table import BettingStatus
from ._deck.status import DeckStatus
from .types import CryptoHash


@runtime_checkable
class DeckProtocol(Protocol):
    """Shuffle/reveal protocol. Refusals raise DeckError."""

    def enter(self) -> int:
        ...

    def start(self) -> None:
        ...

    def close(self) -> None:
        ...

    def reset(self) -> None:
        ...

    def status(self) -> DeckStatus:
        ...

    def get_partial_shuffle(self) -> List[CryptoHash]:
        ...

    def submit_shuffled(self, new_cards: List[CryptoHash]) -> None:
        ...

    def finish_reveal(self) -> None:
        ...

    def submit_reveal_part(self, part: CryptoHash) -> None:
        ...


@runtime_checkable
class BettingProtocol(Protocol):
    """Betting round progression."""

    def new_player(self, starting_stake: int) -> int:
        ...

    def advance(self) -> None:
        """Advance to the next decision point."""
        ...

    def status(self) -> BettingStatus:
        ...

    def reset_round(self) -> None:
        ...
