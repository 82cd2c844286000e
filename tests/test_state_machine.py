# Area: Core Tests
"""Tests for the game state machine transition table."""

import pytest
from dataclasses import replace

from breakout_rules._core.state_machine import GameStateMachine, TRANSITIONS
from breakout_rules._core.enums import ClearPolicy, EventKind
from breakout_rules._core.events import (
    AllBlocksCleared,
    BallLost,
    BlockHit,
    Launch,
    ResetGame,
)
from breakout_rules.config import GameConfig


@pytest.fixture
def machine():
    return GameStateMachine()


class TestInitialState:
    """Tests for the canonical starting state."""

    def test_default_counters(self, machine):
        state = machine.initial_state()
        assert state.ball_active is False
        assert state.lives == 3
        assert state.score == 0
        assert state.bonus_multiplier == 1
        assert state.current_streak == 0
        assert state.last_streak_mark == 0

    def test_default_layout_has_sixty_unique_keys(self, machine):
        state = machine.initial_state()
        keys = [block.key for block in state.blocks]
        assert len(keys) == 60
        assert sorted(keys) == list(range(60))

    def test_initial_lives_from_config(self):
        machine = GameStateMachine(GameConfig(initial_lives=5))
        assert machine.initial_state().lives == 5

    def test_initial_state_is_stable(self, machine):
        assert machine.initial_state() == machine.initial_state()

    def test_every_event_kind_has_a_handler(self):
        assert set(TRANSITIONS) == set(EventKind)


class TestLaunch:
    """Tests for LAUNCH."""

    def test_launch_activates_ball(self, machine):
        state = machine.apply(machine.initial_state(), Launch())
        assert state.ball_active is True

    def test_launch_does_not_touch_counters(self, machine):
        start = machine.initial_state()
        state = machine.apply(start, Launch())
        assert replace(state, ball_active=False) == start

    def test_launch_twice_stays_active(self, machine):
        state = machine.apply(machine.initial_state(), Launch())
        assert machine.apply(state, Launch()).ball_active is True


class TestBallLost:
    """Tests for the two-phase BALL_LOST handling."""

    def test_first_signal_only_deactivates_ball(self, machine):
        state = machine.apply(machine.initial_state(), Launch())
        state = machine.apply(state, BallLost())
        assert state.ball_active is False
        assert state.lives == 3

    def test_second_signal_costs_a_life_and_drops_combo(self, machine):
        start = replace(
            machine.initial_state(),
            ball_active=True,
            bonus_multiplier=3,
            current_streak=9,
            last_streak_mark=8,
            score=1200,
        )
        state = machine.apply(start, BallLost())
        state = machine.apply(state, BallLost())
        assert state.lives == 2
        assert state.bonus_multiplier == 1
        assert state.current_streak == 0
        assert state.last_streak_mark == 0
        assert state.score == 1200
        assert state.ball_active is False

    def test_first_signal_keeps_combo(self, machine):
        start = replace(
            machine.initial_state(),
            ball_active=True, bonus_multiplier=2, current_streak=5, last_streak_mark=4,
        )
        state = machine.apply(start, BallLost())
        assert state.bonus_multiplier == 2
        assert state.current_streak == 5

    def test_blocks_survive_a_loss(self, machine):
        start = machine.apply(machine.initial_state(), BlockHit(key=0))
        state = machine.apply(start, BallLost())
        assert state.blocks == start.blocks

    def test_last_life_drops_to_zero(self, machine):
        start = replace(machine.initial_state(), ball_active=True, lives=1)
        state = machine.apply(start, BallLost())
        state = machine.apply(state, BallLost())
        assert state.lives == 0

    def test_loss_below_zero_resets_instead(self, machine):
        start = replace(machine.initial_state(), lives=0, score=500)
        state = machine.apply(start, BallLost())
        assert state == machine.initial_state()


class TestBlockHit:
    """Tests for BLOCK_HIT."""

    def test_hit_removes_exactly_that_block(self, machine):
        start = machine.initial_state()
        state = machine.apply(start, BlockHit(key=17))
        assert len(state.blocks) == len(start.blocks) - 1
        assert not state.has_block(17)
        assert state.block_keys == start.block_keys - {17}

    def test_other_blocks_unchanged(self, machine):
        start = machine.initial_state()
        state = machine.apply(start, BlockHit(key=17))
        expected = tuple(b for b in start.blocks if b.key != 17)
        assert state.blocks == expected

    def test_hit_scores_with_current_multiplier(self, machine):
        start = replace(machine.initial_state(), bonus_multiplier=3, score=100)
        state = machine.apply(start, BlockHit(key=0))
        assert state.score == 100 + 50 * 3

    def test_hit_increments_streak(self, machine):
        state = machine.apply(machine.initial_state(), BlockHit(key=0))
        assert state.current_streak == 1

    def test_unknown_key_is_noop(self, machine):
        start = machine.initial_state()
        assert machine.apply(start, BlockHit(key=999)) is start

    def test_bool_key_is_noop(self, machine):
        start = machine.initial_state()
        assert machine.apply(start, BlockHit(key=True)) is start
        assert start.has_block(1)

    def test_float_key_is_noop(self, machine):
        start = machine.initial_state()
        assert machine.apply(start, BlockHit(key=1.0)) is start

    def test_missing_key_is_noop(self, machine):
        start = machine.initial_state()
        assert machine.apply(start, BlockHit(key=None)) is start

    def test_duplicate_hit_does_not_double_score(self, machine):
        state = machine.apply(machine.initial_state(), BlockHit(key=4))
        again = machine.apply(state, BlockHit(key=4))
        assert again is state
        assert again.score == 50

    def test_custom_block_score(self):
        machine = GameStateMachine(GameConfig(default_block_score=10))
        state = machine.apply(machine.initial_state(), BlockHit(key=0))
        assert state.score == 10

    def test_six_hit_sequence(self, machine):
        """Score uses the multiplier before the hit's bonus evaluation."""
        state = machine.apply(machine.initial_state(), Launch())
        pairs = []
        for key in range(6):
            state = machine.apply(state, BlockHit(key=key))
            pairs.append((state.score, state.bonus_multiplier))
        assert pairs == [
            (50, 1), (100, 1), (150, 1), (200, 2), (300, 2), (400, 2),
        ]

    def test_streak_carries_through_ball_reactivation(self, machine):
        state = machine.apply(machine.initial_state(), Launch())
        state = machine.apply(state, BlockHit(key=0))
        state = machine.apply(state, BallLost())
        state = machine.apply(state, Launch())
        state = machine.apply(state, BlockHit(key=1))
        assert state.current_streak == 2


class TestAllBlocksCleared:
    """Tests for ALL_BLOCKS_CLEARED."""

    def test_full_reset_when_empty(self, machine):
        start = replace(
            machine.initial_state(),
            blocks=(), score=3000, lives=1, bonus_multiplier=4, ball_active=True,
        )
        assert machine.apply(start, AllBlocksCleared()) == machine.initial_state()

    def test_noop_while_blocks_remain(self, machine):
        start = machine.apply(machine.initial_state(), BlockHit(key=0))
        assert machine.apply(start, AllBlocksCleared()) is start

    def test_clearing_every_block_then_reset(self, machine):
        state = machine.apply(machine.initial_state(), Launch())
        for key in range(60):
            state = machine.apply(state, BlockHit(key=key))
        assert state.blocks == ()
        assert machine.apply(state, AllBlocksCleared()) == machine.initial_state()

    def test_endless_policy_keeps_the_run(self):
        machine = GameStateMachine(GameConfig(clear_policy=ClearPolicy.ENDLESS))
        start = replace(
            machine.initial_state(),
            blocks=(), score=3000, lives=2, bonus_multiplier=4,
            current_streak=20, last_streak_mark=18, ball_active=True,
        )
        state = machine.apply(start, AllBlocksCleared())
        assert state.blocks == machine.initial_state().blocks
        assert state.ball_active is False
        assert (state.score, state.lives, state.bonus_multiplier) == (3000, 2, 4)
        assert (state.current_streak, state.last_streak_mark) == (20, 18)


class TestResetAndUnknownEvents:
    """Tests for RESET_GAME and permissive handling of unknown events."""

    def test_reset_game_restores_initial_state(self, machine):
        state = machine.apply(machine.initial_state(), BlockHit(key=3))
        assert machine.apply(state, ResetGame()) == machine.initial_state()

    @pytest.mark.parametrize("event", [None, "BLOCK_HIT", object(), {"type": "LAUNCH"}])
    def test_unknown_event_returns_state_unchanged(self, machine, event):
        start = machine.initial_state()
        assert machine.apply(start, event) is start

    def test_can_apply(self, machine):
        assert machine.can_apply(Launch()) is True
        assert machine.can_apply("LAUNCH") is False

    def test_apply_does_not_mutate_input(self, machine):
        start = machine.initial_state()
        before = replace(start)
        machine.apply(start, BlockHit(key=0))
        machine.apply(start, Launch())
        assert start == before
