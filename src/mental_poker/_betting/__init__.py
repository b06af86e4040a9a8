# Area: Betting
"""
Betting - Reference betting table.

This package handles:
- Seating players with a starting stake
- Walking betting decision points through a round
"""

from .table import BettingStage, BettingStatus, BettingPlayer, BettingTable

__all__ = [
    "BettingStage",
    "BettingStatus",
    "BettingPlayer",
    "BettingTable",
]
