# Area: Host
"""
mental_poker._host.action_router — Client Action Router
=======================================================

Routes client action messages to the table host and wraps the outcome
in a response dict that can be sent back as JSON.

Message format:
    {"action": "submit_shuffled", "room_id": 3, "cards": [...]}

Response format:
    {"ok": True, "result": <JSON value>}
    {"ok": False, "error": {"kind": "DeckError", "deck_error": "NOT_SHUFFLING", "room_id": None}}
"""

import logging
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

from .table_host import TableHost
from ..codec import to_jsonable
from ..errors import GameError

logger = logging.getLogger("mental_poker.host.router")


class ActionHandler(Protocol):
    """Protocol for action handlers."""

    def handle(self, message: Dict[str, Any]) -> Any:
        """Handle an action message and return its result."""
        ...


class HostAction:
    """
    Calls one TableHost method with arguments taken from the message.

    Args:
        method: Bound TableHost method
        params: Message keys passed positionally, in order
    """

    def __init__(self, method: Callable[..., Any], params: Tuple[str, ...]):
        self.method = method
        self.params = params

    def handle(self, message: Dict[str, Any]) -> Any:
        missing = [p for p in self.params if p not in message]
        if missing:
            raise ValueError(f"Missing message keys: {missing}")
        return self.method(*(message[p] for p in self.params))


class ActionRouter:
    """
    Routes client actions to handlers.

    Maintains a registry of handlers for each action name and
    dispatches incoming messages to the appropriate handler.

    Usage:
        router = ActionRouter(host)
        response = router.route({"action": "start", "room_id": 1})
    """

    def __init__(self, host: Optional[TableHost] = None):
        self._handlers: Dict[str, ActionHandler] = {}
        if host is not None:
            self.register_host(host)

    def register_host(self, host: TableHost) -> None:
        """Register handlers for every TableHost operation."""
        room = ("room_id",)
        reg = self.register_handler
        reg("create_room", HostAction(host.create_room, ("name",)))
        reg("enter", HostAction(host.enter, room))
        reg("start", HostAction(host.start, room))
        reg("close", HostAction(host.close, room))
        reg("finish_round", HostAction(host.finish_round, room))
        reg("advance_betting", HostAction(host.advance_betting, room))
        reg("get_partial_shuffle", HostAction(host.get_partial_shuffle, room))
        reg("submit_shuffled", HostAction(host.submit_shuffled, room + ("cards",)))
        reg("finish_reveal", HostAction(host.finish_reveal, room))
        reg("submit_reveal_part", HostAction(host.submit_reveal_part, room + ("card",)))
        reg("state", HostAction(host.state, room))
        reg("deck_state", HostAction(host.deck_state, room))
        reg("betting_state", HostAction(host.betting_state, room))

    def register_handler(self, action: str, handler: ActionHandler) -> None:
        self._handlers[action] = handler
        logger.debug(f"Registered handler for {action}")

    def get_handler(self, action: str) -> Optional[ActionHandler]:
        return self._handlers.get(action)

    def route(self, message: Dict[str, Any]) -> Dict[str, Any]:
        """
        Route a message to its handler.

        Args:
            message: The message to route (must have an 'action' key)

        Returns:
            Response dict with the JSON result or the serialized GameError

        Raises:
            ValueError: If the action is unknown or arguments are missing
        """
        action = message.get("action", "")
        handler = self._handlers.get(action)

        if handler is None:
            raise ValueError(f"No handler for action: {action!r}")

        logger.debug(f"Routing {action} to handler")
        try:
            result = handler.handle(message)
        except GameError as e:
            return {"ok": False, "error": to_jsonable(e)}
        return {"ok": True, "result": to_jsonable(result)}
