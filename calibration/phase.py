"""
Calibration Phase - seed-mission -> calibrating -> complete.

Phases only move forward. The seed mission flag is set by the
onboarding flow, never by answer processing.
"""

import logging
from dataclasses import replace

from .skill_profile import DiagnosticPhase, UserSkillProfile
from .thresholds import CALIBRATION_MIN_QUESTIONS, CALIBRATION_MIN_TOPICS

logger = logging.getLogger(__name__)


def calibration_ready(profile: UserSkillProfile) -> bool:
    """Seed mission done, 30+ questions, 10+ directly assessed topics."""
    return (
        profile.seed_mission_completed
        and profile.total_questions_answered >= CALIBRATION_MIN_QUESTIONS
        and profile.directly_assessed_count() >= CALIBRATION_MIN_TOPICS
    )


def _advance(profile: UserSkillProfile, target: DiagnosticPhase) -> UserSkillProfile:
    if target.rank <= profile.diagnostic_phase.rank:
        return profile

    logger.info("Diagnostic phase %s -> %s", profile.diagnostic_phase.value, target.value)
    return replace(
        profile,
        diagnostic_phase=target,
        calibration_complete=profile.calibration_complete or target == DiagnosticPhase.COMPLETE,
    )


def evaluate_calibration(profile: UserSkillProfile) -> UserSkillProfile:
    """
    Re-check the phase against the current counters.

    Never moves backwards, so running it twice on the same input is a no-op.
    """
    if calibration_ready(profile):
        return _advance(profile, DiagnosticPhase.COMPLETE)
    if profile.seed_mission_completed:
        return _advance(profile, DiagnosticPhase.CALIBRATING)
    return profile


def complete_seed_mission(profile: UserSkillProfile) -> UserSkillProfile:
    """Mark the onboarding mission done and re-evaluate the phase."""
    return evaluate_calibration(replace(profile, seed_mission_completed=True))


def is_placement_complete(profile: UserSkillProfile) -> bool:
    """Placement counts as done once the seed mission is finished."""
    return profile.seed_mission_completed
