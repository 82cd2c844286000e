# Area: Core
"""Scoring and streak-bonus rules."""

from dataclasses import replace

from .state import GameState

DEFAULT_STREAK_FLOOR = 4


def round_half_up(numerator: int, denominator: int) -> int:
    """Round ``numerator / denominator`` to the nearest int, halves away from zero.

    Operands are non-negative, so the result is exact integer arithmetic
    rather than a float round-trip.
    """
    return (2 * numerator + denominator) // (2 * denominator)


def hit_score(block_score: int, bonus_multiplier: int) -> int:
    """Points awarded for one block at the given multiplier."""
    return block_score * bonus_multiplier


def streak_threshold(
    last_streak_mark: int,
    bonus_multiplier: int,
    floor: int = DEFAULT_STREAK_FLOOR,
) -> int:
    """Streak length needed for the next multiplier increase.

    The bar rises with both the streak recorded at the last increase
    and the multiplier that increase produced.
    """
    return round_half_up(last_streak_mark + floor, 2) * bonus_multiplier


def qualifies_for_bonus(
    current_streak: int,
    last_streak_mark: int,
    bonus_multiplier: int,
    floor: int = DEFAULT_STREAK_FLOOR,
) -> bool:
    if current_streak < floor:
        return False
    return streak_threshold(last_streak_mark, bonus_multiplier, floor) <= current_streak


def register_hit(
    state: GameState,
    block_score: int,
    floor: int = DEFAULT_STREAK_FLOOR,
) -> GameState:
    """Apply the score and streak effects of one successful block hit.

    The hit is scored with the multiplier in force *before* the bonus
    rule is evaluated for it.
    """
    streak = state.current_streak + 1
    score = state.score + hit_score(block_score, state.bonus_multiplier)
    multiplier = state.bonus_multiplier
    mark = state.last_streak_mark

    if qualifies_for_bonus(streak, mark, multiplier, floor):
        multiplier += 1
        mark = streak

    return replace(
        state,
        score=score,
        current_streak=streak,
        bonus_multiplier=multiplier,
        last_streak_mark=mark,
    )


def reset_streak(state: GameState) -> GameState:
    """Drop the combo after a ball loss."""
    return replace(
        state, bonus_multiplier=1, current_streak=0, last_streak_mark=0
    )
