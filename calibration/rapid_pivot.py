"""
Rapid-Pivot - Tier transitions from a short window of recent answers.

The rule is a hysteresis controller: going up needs strong, fast,
consistent evidence (3/3 correct, mean under 30s), while mild or slow
evidence is enough to come back down. A too-hard tier frustrates a
learner more than a too-easy one bores them.

decide_tier_transition() layers the two confidence-driven overrides
on top of the window rule, in fixed priority:

    1. Auto-promote     confidence >= 90 and not at Hard
    2. Safety net       3+ consecutive wrong and not at Easy
    3. Rapid-Pivot      only with 3+ attempts and a full window
"""

from dataclasses import dataclass, replace
from typing import Sequence, Tuple

from .skill_profile import RecentAnswer, SubtopicSkillProfile
from .thresholds import (
    AUTO_PROMOTE,
    FAST_TRACK_CORRECT,
    FAST_TRACK_TIME,
    FOUNDATION_BUILD_CORRECT,
    MIN_ATTEMPTS_FOR_PIVOT,
    NORMAL_MAX,
    PIVOT_WINDOW,
    SAFE_BASELINE_CORRECT,
    SAFETY_NET_CONSECUTIVE,
    STRUGGLE_TIMER,
)
from .tiers import Tier, TierChange, compare_tiers


@dataclass(frozen=True)
class TierDecision:
    """Outcome of the tier-transition step."""
    profile: SubtopicSkillProfile
    tier_change: TierChange
    rule: str  # "auto_promote", "safety_net", "fast_track", "foundation_build", "safe_baseline" or "none"


def calculate_rapid_pivot(recent: Sequence[RecentAnswer], current_tier: Tier) -> Tuple[Tier, str]:
    """
    Apply the window rule to the last three answers.

    Returns (new_tier, rule_name). Fewer than three answers never moves
    the tier.
    """
    if len(recent) < PIVOT_WINDOW:
        return current_tier, "none"

    window = list(recent)[-PIVOT_WINDOW:]
    correct = sum(1 for a in window if a.is_correct)
    mean_time = sum(a.time_to_answer for a in window) / PIVOT_WINDOW

    # Fast-Track
    if correct == FAST_TRACK_CORRECT and mean_time < FAST_TRACK_TIME:
        return current_tier.promote(), "fast_track"

    # Foundation-Build
    if correct <= FOUNDATION_BUILD_CORRECT or mean_time > STRUGGLE_TIMER:
        return current_tier.demote(), "foundation_build"

    # Safe-Baseline: hold, except borderline competence at the top tier
    if correct == SAFE_BASELINE_CORRECT:
        if current_tier == Tier.HARD and mean_time > NORMAL_MAX:
            return Tier.MEDIUM, "safe_baseline"
        return current_tier, "safe_baseline"

    # 3/3 correct but not fast enough
    return current_tier, "none"


def decide_tier_transition(profile: SubtopicSkillProfile) -> TierDecision:
    """
    Choose the next tier for a profile whose counters and confidence
    already include the latest answer. First matching rule wins.
    """
    before = profile.current_tier

    if profile.confidence_score >= AUTO_PROMOTE and before != Tier.HARD:
        after = before.promote()
        return TierDecision(replace(profile, current_tier=after), TierChange.PROMOTED, "auto_promote")

    if profile.consecutive_wrong >= SAFETY_NET_CONSECUTIVE and before != Tier.EASY:
        updated = replace(profile, current_tier=before.demote(), consecutive_wrong=0)
        return TierDecision(updated, TierChange.DEMOTED, "safety_net")

    if profile.total_attempted >= MIN_ATTEMPTS_FOR_PIVOT:
        after, rule = calculate_rapid_pivot(profile.recent, before)
        change = compare_tiers(before, after)
        if change != TierChange.UNCHANGED:
            return TierDecision(replace(profile, current_tier=after), change, rule)
        return TierDecision(profile, TierChange.UNCHANGED, rule)

    return TierDecision(profile, TierChange.UNCHANGED, "none")
