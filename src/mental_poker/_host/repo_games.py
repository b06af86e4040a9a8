# Area: Host
"""
mental_poker._host.repo_games — Games Repository
================================================

Repository for the games table. Each row stores one room's Game as
the binary payload produced by mental_poker.codec, next to the room
name and status kind for querying.
"""

from typing import List, Optional
import logging

from .database import BaseRepository
from ..codec import decode_game, encode_game
from ..game import Game
from ..types import RoomId

logger = logging.getLogger("mental_poker.host.repo_games")


class GameRepository(BaseRepository):
    """
    Repository for the games table.

    Usage:
        repo = GameRepository("tables.db", create_schema=True)
        repo.save_game(game)
        game = repo.get_game(room_id)
    """

    def save_game(self, game: Game) -> None:
        """
        Insert or replace the stored copy of ``game``.

        Args:
            game: Game to persist, keyed by its room id
        """
        query = """
            INSERT INTO games (room_id, name, status, payload)
            VALUES (?, ?, ?, ?)
            ON CONFLICT(room_id) DO UPDATE SET
                name = excluded.name,
                status = excluded.status,
                payload = excluded.payload,
                updated_at = CURRENT_TIMESTAMP
        """
        self._execute(
            query,
            (game.id, game.name, game.status.kind.value, encode_game(game)),
        )
        logger.debug(f"[{game.id}] Saved game ({game.status})")

    def get_game(self, room_id: RoomId) -> Optional[Game]:
        """
        Load a game by room id.

        Returns:
            The decoded Game, or None if no row exists
        """
        row = self._fetch_one("SELECT payload FROM games WHERE room_id = ?", (room_id,))
        if row is None:
            return None
        return decode_game(row["payload"])

    def delete_game(self, room_id: RoomId) -> bool:
        """Delete a stored game. Returns True if a row was removed."""
        return self._execute("DELETE FROM games WHERE room_id = ?", (room_id,)) > 0

    def list_room_ids(self) -> List[RoomId]:
        rows = self._fetch_all("SELECT room_id FROM games ORDER BY room_id")
        return [row["room_id"] for row in rows]

    def get_all_games(self) -> List[Game]:
        rows = self._fetch_all("SELECT payload FROM games ORDER BY room_id")
        return [decode_game(row["payload"]) for row in rows]

    def get_games_by_status(self, status_kind: str) -> List[Game]:
        """Games whose status kind matches (e.g. "Closed")."""
        rows = self._fetch_all(
            "SELECT payload FROM games WHERE status = ? ORDER BY room_id",
            (status_kind,),
        )
        return [decode_game(row["payload"]) for row in rows]

    def max_room_id(self) -> Optional[RoomId]:
        return self._scalar("SELECT MAX(room_id) FROM games")
