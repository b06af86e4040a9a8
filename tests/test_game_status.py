# Area: Game Tests
"""Tests for GameStatus membership tests and payload checks."""

import pytest

from mental_poker.status import GameStatus, GameStatusKind
from mental_poker._deck.status import DeckStatus
from mental_poker._betting.table import BettingStage, BettingStatus


class TestIsActive:
    """Tests for GameStatus.is_active()."""

    @pytest.mark.parametrize("status", [
        GameStatus.initiating(),
        GameStatus.idle(),
        GameStatus.deck_action(DeckStatus.shuffling(0)),
        GameStatus.betting_action(BettingStatus(BettingStage.PREFLOP, 0)),
    ])
    def test_every_variant_but_closed_is_active(self, status):
        assert status.is_active() is True

    def test_closed_is_not_active(self):
        assert GameStatus.closed().is_active() is False


class TestIsInitiating:
    """Tests for GameStatus.is_initiating()."""

    def test_deck_initial_substatus_is_initiating(self):
        assert GameStatus.deck_action(DeckStatus.initiating()).is_initiating() is True

    def test_plain_initiating_is_not_deck_initiating(self):
        assert GameStatus.initiating().is_initiating() is False

    def test_shuffling_is_not_initiating(self):
        assert GameStatus.deck_action(DeckStatus.shuffling(0)).is_initiating() is False


class TestPayload:
    """The carried sub-status must match the variant."""

    def test_deck_action_requires_deck_status(self):
        with pytest.raises(ValueError):
            GameStatus(GameStatusKind.DECK_ACTION)

    def test_idle_rejects_deck_status(self):
        with pytest.raises(ValueError):
            GameStatus(GameStatusKind.IDLE, deck=DeckStatus.running())

    def test_betting_action_rejects_missing_betting_status(self):
        with pytest.raises(ValueError):
            GameStatus(GameStatusKind.BETTING_ACTION, deck=DeckStatus.running())

    def test_equality_includes_substatus(self):
        assert GameStatus.deck_action(DeckStatus.shuffling(0)) != \
            GameStatus.deck_action(DeckStatus.shuffling(1))
        assert GameStatus.deck_action(DeckStatus.shuffling(1)) == \
            GameStatus.deck_action(DeckStatus.shuffling(1))


class TestRoundChange:
    """Tests for GameStatus.accepts_round_change()."""

    def test_initiating_and_idle_accept(self):
        assert GameStatus.initiating().accepts_round_change() is True
        assert GameStatus.idle().accepts_round_change() is True

    def test_running_phases_and_closed_refuse(self):
        assert GameStatus.deck_action(DeckStatus.initiating()).accepts_round_change() is False
        assert GameStatus.betting_action(
            BettingStatus(BettingStage.FLOP, 1)
        ).accepts_round_change() is False
        assert GameStatus.closed().accepts_round_change() is False

    def test_str_names_substatus(self):
        assert str(GameStatus.deck_action(DeckStatus.shuffling(0))) == "DeckAction(SHUFFLING)"
        assert str(GameStatus.closed()) == "Closed"
