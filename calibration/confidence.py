"""
Confidence Scorer - Per-answer update of the 0-100 confidence score.

Correct answers earn less the slower they are; wrong answers cost more
the slower they are (slow and wrong reads as genuine struggle, fast and
wrong as a careless slip). The tier shifts both: correctness at Hard is
worth more, failure at Easy is the strongest negative signal.
"""

from .thresholds import (
    CORRECT_FAST_AWARD,
    CORRECT_NORMAL_AWARD,
    CORRECT_SLOW_AWARD,
    EASY_TIER_DISCOUNT,
    EASY_TIER_EXTRA_PENALTY,
    FAST_ANSWER,
    HARD_TIER_BONUS,
    NORMAL_MAX,
    STRUGGLE_TIMER,
    WRONG_FAST_PENALTY,
    WRONG_NORMAL_PENALTY,
    WRONG_SLOW_PENALTY,
)
from .skill_profile import clamp_confidence
from .tiers import Tier


def confidence_change(is_correct: bool, time_to_answer: float, tier: Tier) -> int:
    """Unclamped confidence delta for one answer."""
    if is_correct:
        if time_to_answer < FAST_ANSWER:
            change = CORRECT_FAST_AWARD
        elif time_to_answer < NORMAL_MAX:
            change = CORRECT_NORMAL_AWARD
        else:
            change = CORRECT_SLOW_AWARD

        if tier == Tier.HARD:
            change += HARD_TIER_BONUS
        elif tier == Tier.EASY:
            change -= EASY_TIER_DISCOUNT
    else:
        if time_to_answer < FAST_ANSWER:
            change = -WRONG_FAST_PENALTY
        elif time_to_answer > STRUGGLE_TIMER:
            change = -WRONG_SLOW_PENALTY
        else:
            change = -WRONG_NORMAL_PENALTY

        if tier == Tier.EASY:
            change -= EASY_TIER_EXTRA_PENALTY

    return change


def update_confidence(current: int, is_correct: bool, time_to_answer: float, tier: Tier) -> int:
    """New confidence after one answer, clamped to [0, 100]."""
    return clamp_confidence(current + confidence_change(is_correct, time_to_answer, tier))
