# Area: Deck
"""
Deck - Reference mental-poker shuffle/reveal protocol.

This package handles:
- Player entry before a round
- Turn-based partial shuffles of card commitments
- Collection of reveal parts for hole cards
"""

from .status import DeckPhase, DeckStatus
from .deck import Deck, RevealedCard

__all__ = [
    "DeckPhase",
    "DeckStatus",
    "Deck",
    "RevealedCard",
]
