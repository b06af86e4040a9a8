# Area: Host
"""
Host - Room registry, persistence and client dispatch.

This package handles:
- One Game per room id with a lock per room
- SQLite persistence of games
- Routing client action messages to rooms
"""

from .database import init_database
from .repo_games import GameRepository
from .table_host import TableHost
from .action_router import ActionRouter, HostAction

__all__ = [
    "init_database",
    "GameRepository",
    "TableHost",
    "ActionRouter",
    "HostAction",
]
