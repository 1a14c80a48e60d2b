"""Tests for rapid_pivot.py"""

from dataclasses import replace

from calibration.rapid_pivot import calculate_rapid_pivot, decide_tier_transition
from calibration.tiers import Tier, TierChange

from conftest import LINEAR, direct_topic, window


# ==================== Window Rule ====================

def test_three_fast_correct_promotes_one_step():
    recent = window((True, 20), (True, 22), (True, 18))
    assert calculate_rapid_pivot(recent, Tier.EASY) == (Tier.MEDIUM, "fast_track")
    assert calculate_rapid_pivot(recent, Tier.MEDIUM) == (Tier.HARD, "fast_track")
    assert calculate_rapid_pivot(recent, Tier.HARD) == (Tier.HARD, "fast_track")


def test_zero_or_one_correct_demotes_one_step():
    one_right = window((True, 40), (False, 40), (False, 40))
    none_right = window((False, 10), (False, 10), (False, 10))
    assert calculate_rapid_pivot(one_right, Tier.HARD) == (Tier.MEDIUM, "foundation_build")
    assert calculate_rapid_pivot(none_right, Tier.MEDIUM) == (Tier.EASY, "foundation_build")
    assert calculate_rapid_pivot(none_right, Tier.EASY) == (Tier.EASY, "foundation_build")


def test_slow_mean_demotes_even_when_all_correct():
    recent = window((True, 100), (True, 95), (True, 120))
    assert calculate_rapid_pivot(recent, Tier.MEDIUM) == (Tier.EASY, "foundation_build")


def test_two_of_three_holds_tier():
    recent = window((True, 40), (False, 40), (True, 40))
    assert calculate_rapid_pivot(recent, Tier.HARD) == (Tier.HARD, "safe_baseline")
    assert calculate_rapid_pivot(recent, Tier.MEDIUM) == (Tier.MEDIUM, "safe_baseline")
    assert calculate_rapid_pivot(recent, Tier.EASY) == (Tier.EASY, "safe_baseline")


def test_two_of_three_slow_at_hard_goes_to_medium():
    # Mean above 90s is already caught by foundation-build, landing on the same tier
    recent = window((True, 95), (False, 95), (True, 95))
    tier, _ = calculate_rapid_pivot(recent, Tier.HARD)
    assert tier == Tier.MEDIUM


def test_short_window_never_moves():
    recent = window((True, 5), (True, 5))
    assert calculate_rapid_pivot(recent, Tier.MEDIUM) == (Tier.MEDIUM, "none")


def test_all_correct_at_normal_pace_holds():
    recent = window((True, 40), (True, 40), (True, 40))
    assert calculate_rapid_pivot(recent, Tier.MEDIUM) == (Tier.MEDIUM, "none")


# ==================== Priority Order ====================

def test_auto_promote_beats_everything():
    profile = direct_topic(LINEAR, attempts=5, confidence=92,
                           recent=window((False, 10), (False, 10), (False, 10)))
    profile = replace(profile, consecutive_wrong=3)
    decision = decide_tier_transition(profile)
    assert decision.rule == "auto_promote"
    assert decision.tier_change == TierChange.PROMOTED
    assert decision.profile.current_tier == Tier.HARD


def test_safety_net_resets_wrong_streak():
    profile = replace(direct_topic(LINEAR, attempts=4, confidence=20), consecutive_wrong=3)
    decision = decide_tier_transition(profile)
    assert decision.rule == "safety_net"
    assert decision.profile.current_tier == Tier.EASY
    assert decision.profile.consecutive_wrong == 0


def test_safety_net_skipped_at_easy():
    profile = replace(direct_topic(LINEAR, attempts=4, tier=Tier.EASY, confidence=20,
                                   recent=window((False, 40), (False, 40), (False, 40))),
                      consecutive_wrong=3)
    decision = decide_tier_transition(profile)
    assert decision.rule == "foundation_build"
    assert decision.tier_change == TierChange.UNCHANGED
    assert decision.profile.consecutive_wrong == 3


def test_auto_promote_at_hard_falls_through_to_pivot():
    profile = direct_topic(LINEAR, attempts=6, tier=Tier.HARD, confidence=95,
                           recent=window((True, 40), (False, 40), (True, 40)))
    decision = decide_tier_transition(profile)
    assert decision.rule == "safe_baseline"
    assert decision.tier_change == TierChange.UNCHANGED


def test_pivot_needs_three_attempts():
    profile = direct_topic(LINEAR, attempts=2, confidence=60,
                           recent=window((True, 5), (True, 5)))
    decision = decide_tier_transition(profile)
    assert decision.rule == "none"
    assert decision.profile is profile
