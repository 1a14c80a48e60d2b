"""
Thresholds - Every tunable number the calibration engine uses.

Times are in seconds, confidence is on a 0-100 scale.
"""

# ==================== Timing ====================

FAST_ANSWER = 30.0          # Below this an answer counts as fast
STRUGGLE_TIMER = 90.0       # Above this an answer counts as a struggle
NORMAL_MAX = 90.0

# ==================== Rapid-Pivot ====================

PIVOT_WINDOW = 3                 # Answers considered by the pivot rule
FAST_TRACK_CORRECT = 3           # 3/3 correct to fast-track
FAST_TRACK_TIME = 30.0           # Mean latency must be under this
SAFE_BASELINE_CORRECT = 2        # 2/3 holds the tier
FOUNDATION_BUILD_CORRECT = 1     # 0-1/3 drops a tier
MIN_ATTEMPTS_FOR_PIVOT = 3

# ==================== Confidence ====================

INITIAL_CONFIDENCE = 50
MIN_CONFIDENCE = 0
MAX_CONFIDENCE = 100
AUTO_PROMOTE = 90
SAFETY_NET_CONSECUTIVE = 3

CORRECT_FAST_AWARD = 15
CORRECT_NORMAL_AWARD = 10
CORRECT_SLOW_AWARD = 5
HARD_TIER_BONUS = 5
EASY_TIER_DISCOUNT = 3

WRONG_FAST_PENALTY = 10      # Careless slip
WRONG_NORMAL_PENALTY = 12
WRONG_SLOW_PENALTY = 15      # Genuine struggle
EASY_TIER_EXTRA_PENALTY = 5

# ==================== Inference ====================

MASTERY_CONFIDENCE = 70
MASTERY_MIN_ATTEMPTS = 3
DIRECT_ATTEMPTS_TO_CLEAR_INFERENCE = 3

# (inferred confidence cap, offset below source) per inference branch
INFER_FROM_HARD = (60, 20)
INFER_FROM_STRONG_MEDIUM = (55, 25)
INFER_FALLBACK = (50, 30)
STRONG_MEDIUM_CONFIDENCE = 75

# ==================== Calibration ====================

CALIBRATION_MIN_QUESTIONS = 30
CALIBRATION_MIN_TOPICS = 10

# ==================== Missions ====================

SEED_MISSION_SIZE = 10
PRACTICE_BASE_SCORE = 50
PRACTICE_FEW_ATTEMPTS = 5
PRACTICE_FEW_ATTEMPTS_BOOST = 20
PRACTICE_INFERRED_BOOST = 15
PRACTICE_LOW_ACCURACY_BOOST = 10
PRACTICE_JITTER = 10
