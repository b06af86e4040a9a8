# Area: Host Tests
"""Tests for ActionRouter dispatch and response format."""

from unittest.mock import Mock

import pytest

from mental_poker._host.action_router import ActionRouter, HostAction
from mental_poker._host.table_host import TableHost
from mental_poker.config import TableConfig
from mental_poker.types import hash_bytes


@pytest.fixture
def router():
    return ActionRouter(TableHost(config=TableConfig(hole_cards=0)))


class TestRouting:
    """Tests for ActionRouter.route()."""

    def test_create_room_and_state(self, router):
        created = router.route({"action": "create_room", "name": "table1"})
        assert created == {"ok": True, "result": 1}

        state = router.route({"action": "state", "room_id": 1})
        assert state == {
            "ok": True,
            "result": {"kind": "Initiating", "deck": None, "betting": None},
        }

    def test_deck_error_response(self, router):
        router.route({"action": "create_room", "name": "table1"})

        response = router.route({"action": "start", "room_id": 1})

        assert response == {
            "ok": False,
            "error": {"kind": "DeckError", "deck_error": "NOT_ENOUGH_PLAYERS", "room_id": None},
        }

    def test_unknown_room_response(self, router):
        response = router.route({"action": "enter", "room_id": 42})
        assert response == {
            "ok": False,
            "error": {"kind": "RoomIdNotFound", "deck_error": None, "room_id": 42},
        }

    def test_round_through_router(self, router):
        router.route({"action": "create_room", "name": "table1"})
        assert router.route({"action": "enter", "room_id": 1})["result"] == 0
        assert router.route({"action": "enter", "room_id": 1})["result"] == 1
        assert router.route({"action": "start", "room_id": 1}) == {"ok": True, "result": None}

        for _ in range(2):
            cards = router.route({"action": "get_partial_shuffle", "room_id": 1})["result"]
            response = router.route({
                "action": "submit_shuffled", "room_id": 1, "cards": list(reversed(cards)),
            })
            assert response["ok"] is True

        state = router.route({"action": "state", "room_id": 1})["result"]
        assert state["kind"] == "BettingAction"
        assert state["betting"] == {"stage": "PREFLOP", "turn": 0}

        betting = router.route({"action": "betting_state", "room_id": 1})["result"]
        assert [p["stake"] for p in betting["players"]] == [1000, 1000]

    def test_betting_must_settle_before_round_finishes(self, router):
        router.route({"action": "create_room", "name": "table1"})
        router.route({"action": "enter", "room_id": 1})
        router.route({"action": "enter", "room_id": 1})
        router.route({"action": "start", "room_id": 1})
        for _ in range(2):
            cards = router.route({"action": "get_partial_shuffle", "room_id": 1})["result"]
            router.route({
                "action": "submit_shuffled", "room_id": 1, "cards": list(reversed(cards)),
            })

        early = router.route({"action": "finish_round", "room_id": 1})
        assert early == {
            "ok": False,
            "error": {"kind": "OngoingRound", "deck_error": None, "room_id": None},
        }

        for _ in range(8):
            assert router.route({"action": "advance_betting", "room_id": 1})["ok"] is True
        state = router.route({"action": "state", "room_id": 1})["result"]
        assert state["betting"] == {"stage": "SHOWDOWN", "turn": None}

        assert router.route({"action": "finish_round", "room_id": 1}) == {"ok": True, "result": None}
        assert router.route({"action": "state", "room_id": 1})["result"]["kind"] == "Idle"

    def test_advance_betting_without_round(self, router):
        router.route({"action": "create_room", "name": "table1"})
        response = router.route({"action": "advance_betting", "room_id": 1})
        assert response["error"]["kind"] == "NoActiveRound"

    def test_reveal_part_outside_reveal(self, router):
        router.route({"action": "create_room", "name": "table1"})
        response = router.route({
            "action": "submit_reveal_part", "room_id": 1, "card": hash_bytes(b"x"),
        })
        assert response["error"]["deck_error"] == "NOT_REVEALING"

    def test_deck_state_is_json(self, router):
        router.route({"action": "create_room", "name": "table1"})
        deck = router.route({"action": "deck_state", "room_id": 1})["result"]
        assert deck["card_count"] == 52
        assert deck["current"] == {"phase": "INITIATING", "turn": None, "card": None}

    def test_unknown_action(self, router):
        with pytest.raises(ValueError, match="No handler"):
            router.route({"action": "fold", "room_id": 1})

    def test_missing_arguments(self, router):
        with pytest.raises(ValueError, match="Missing message keys"):
            router.route({"action": "submit_shuffled", "room_id": 1})


class TestRegistration:
    """Tests for handler registration."""

    def test_custom_handler(self):
        router = ActionRouter()
        handler = Mock()
        handler.handle.return_value = {"pong": True}

        router.register_handler("ping", handler)
        response = router.route({"action": "ping"})

        handler.handle.assert_called_once_with({"action": "ping"})
        assert response == {"ok": True, "result": {"pong": True}}

    def test_host_actions_registered(self, router):
        for action in ("create_room", "enter", "start", "close", "finish_round", "advance_betting",
                       "get_partial_shuffle", "submit_shuffled", "finish_reveal",
                       "submit_reveal_part", "state", "deck_state", "betting_state"):
            assert isinstance(router.get_handler(action), HostAction)
