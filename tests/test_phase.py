"""Tests for phase.py"""

from dataclasses import replace

from calibration.phase import (
    calibration_ready,
    complete_seed_mission,
    evaluate_calibration,
    is_placement_complete,
)
from calibration.skill_profile import DiagnosticPhase, Inferred, SubtopicSkillProfile, UserSkillProfile

from conftest import direct_topic


def profile_with(direct_topics, answered, seed_done=True, phase=DiagnosticPhase.CALIBRATING):
    topics = [direct_topic(f"topic-{i}", attempts=1) for i in range(direct_topics)]
    return UserSkillProfile(
        diagnostic_phase=phase,
        seed_mission_completed=seed_done,
        total_questions_answered=answered,
    ).with_topics(topics)


def test_fresh_profile_stays_in_seed_mission():
    profile = UserSkillProfile()
    assert evaluate_calibration(profile).diagnostic_phase == DiagnosticPhase.SEED_MISSION
    assert not is_placement_complete(profile)


def test_seed_mission_moves_to_calibrating():
    profile = complete_seed_mission(UserSkillProfile())
    assert profile.seed_mission_completed
    assert profile.diagnostic_phase == DiagnosticPhase.CALIBRATING
    assert not profile.calibration_complete
    assert is_placement_complete(profile)


def test_answers_alone_never_finish_seed_mission():
    profile = profile_with(12, 40, seed_done=False, phase=DiagnosticPhase.SEED_MISSION)
    assert evaluate_calibration(profile).diagnostic_phase == DiagnosticPhase.SEED_MISSION


def test_needs_both_questions_and_topics():
    assert not calibration_ready(profile_with(9, 30))
    assert not calibration_ready(profile_with(10, 29))
    assert calibration_ready(profile_with(10, 30))


def test_inferred_topics_do_not_count():
    inferred = [SubtopicSkillProfile(topic_id=f"inf-{i}", provenance=Inferred("topic-0")) for i in range(5)]
    profile = profile_with(9, 40).with_topics(inferred)
    assert profile.directly_assessed_count() == 9
    assert evaluate_calibration(profile).diagnostic_phase == DiagnosticPhase.CALIBRATING


def test_complete_sets_flag():
    profile = evaluate_calibration(profile_with(10, 30))
    assert profile.diagnostic_phase == DiagnosticPhase.COMPLETE
    assert profile.calibration_complete


def test_complete_is_idempotent_and_irreversible():
    done = evaluate_calibration(profile_with(10, 30))
    assert evaluate_calibration(done) == done

    # Counters that no longer satisfy the gate do not move it back
    regressed = replace(done, total_questions_answered=0)
    assert evaluate_calibration(regressed).diagnostic_phase == DiagnosticPhase.COMPLETE


def test_completing_seed_mission_again_keeps_complete():
    done = evaluate_calibration(profile_with(10, 30))
    assert complete_seed_mission(done).diagnostic_phase == DiagnosticPhase.COMPLETE
