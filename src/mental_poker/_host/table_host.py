# Area: Host
"""
mental_poker._host.table_host — Room registry and per-room serialization
========================================================================

Keeps one Game per room id and gives each room its own lock, so calls
against one room run one at a time while different rooms proceed
independently. Games are persisted after every successful mutation
when a repository is configured; a failed call persists nothing
because Game operations change nothing on error.
"""

from __future__ import annotations
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, List, Optional, TypeVar
import itertools
import logging
import threading

from .repo_games import GameRepository
from .._betting.table import BettingTable
from .._deck.deck import Deck
from .._shared.logging_config import log_game_error
from ..config import TableConfig
from ..errors import GameError, RoomIdNotFound
from ..game import Game
from ..status import GameStatus
from ..types import CryptoHash, RoomId

logger = logging.getLogger("mental_poker.host")

T = TypeVar("T")


class TableHost:
    """
    Owns every room of a server.

    Usage:
        host = TableHost(config=load_config())
        room_id = host.create_room("table1")
        host.enter(room_id)
    """

    def __init__(
        self,
        config: Optional[TableConfig] = None,
        repository: Optional[GameRepository] = None,
    ):
        self.config = config or TableConfig()
        self.repository = repository
        self._games: Dict[RoomId, Game] = {}
        self._locks: Dict[RoomId, threading.Lock] = {}
        self._registry_lock = threading.Lock()
        self._next_ids = itertools.count(1)

    @classmethod
    def restore(
        cls, repository: GameRepository, config: Optional[TableConfig] = None
    ) -> "TableHost":
        """Rebuild a host from every game stored in ``repository``."""
        host = cls(config=config, repository=repository)
        for game in repository.get_all_games():
            host._register(game)
        last_id = repository.max_room_id() or 0
        host._next_ids = itertools.count(last_id + 1)
        logger.info(f"Restored {len(host._games)} rooms")
        return host

    # ── Registry ─────────────────────────────────────────────

    def create_room(self, name: str) -> RoomId:
        with self._registry_lock:
            room_id = next(self._next_ids)
        game = Game.new(name, room_id, self.config)
        self._register(game)
        self._persist(game)
        logger.info(f"[{room_id}] Room created: {name}")
        return room_id

    def rooms(self) -> List[RoomId]:
        with self._registry_lock:
            return sorted(self._games)

    def active_rooms(self) -> List[RoomId]:
        """Rooms whose game is not closed."""
        return [
            room_id for room_id in self.rooms()
            if self._read(room_id, lambda game: game.state().is_active())
        ]

    # ── Game operations ──────────────────────────────────────

    def enter(self, room_id: RoomId) -> int:
        return self._mutate(room_id, "enter", lambda game: game.enter())

    def start(self, room_id: RoomId) -> None:
        self._mutate(room_id, "start", lambda game: game.start())

    def close(self, room_id: RoomId) -> None:
        self._mutate(room_id, "close", lambda game: game.close())

    def finish_round(self, room_id: RoomId) -> None:
        self._mutate(room_id, "finish_round", lambda game: game.finish_round())

    def advance_betting(self, room_id: RoomId) -> None:
        self._mutate(room_id, "advance_betting", lambda game: game.advance_betting())

    def get_partial_shuffle(self, room_id: RoomId) -> List[CryptoHash]:
        return self._read(room_id, lambda game: game.get_partial_shuffle(), "get_partial_shuffle")

    def submit_shuffled(self, room_id: RoomId, new_cards: List[CryptoHash]) -> None:
        self._mutate(room_id, "submit_shuffled", lambda game: game.submit_shuffled(new_cards))

    def finish_reveal(self, room_id: RoomId) -> None:
        self._mutate(room_id, "finish_reveal", lambda game: game.finish_reveal())

    def submit_reveal_part(self, room_id: RoomId, card: CryptoHash) -> None:
        self._mutate(room_id, "submit_reveal_part", lambda game: game.submit_reveal_part(card))

    def state(self, room_id: RoomId) -> GameStatus:
        return self._read(room_id, lambda game: game.state())

    def deck_state(self, room_id: RoomId) -> Deck:
        return self._read(room_id, lambda game: game.deck_state())

    def betting_state(self, room_id: RoomId) -> BettingTable:
        return self._read(room_id, lambda game: game.betting_state())

    def room_name(self, room_id: RoomId) -> str:
        return self._read(room_id, lambda game: game.name)

    # ── Helpers ──────────────────────────────────────────────

    def _register(self, game: Game) -> None:
        with self._registry_lock:
            self._games[game.id] = game
            self._locks[game.id] = threading.Lock()

    @contextmanager
    def _room(self, room_id: RoomId) -> Iterator[Game]:
        with self._registry_lock:
            game = self._games.get(room_id)
            lock = self._locks.get(room_id)
        if game is None or lock is None:
            raise RoomIdNotFound(room_id)
        with lock:
            yield game

    def _read(
        self, room_id: RoomId, query: Callable[[Game], T], action: Optional[str] = None
    ) -> T:
        with self._room(room_id) as game:
            try:
                return query(game)
            except GameError as e:
                log_game_error(e, room_id=room_id, action=action)
                raise

    def _mutate(self, room_id: RoomId, action: str, operation: Callable[[Game], T]) -> T:
        with self._room(room_id) as game:
            try:
                result = operation(game)
            except GameError as e:
                log_game_error(e, room_id=room_id, action=action)
                raise
            self._persist(game)
            return result

    def _persist(self, game: Game) -> None:
        if self.repository is not None:
            self.repository.save_game(game)
