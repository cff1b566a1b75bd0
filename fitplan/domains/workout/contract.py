# fitplan/domains/workout/contract.py
from __future__ import annotations

from typing import Dict, Tuple


# ============================================================
# Enums (single source of truth)
# ============================================================

EXPERIENCE_LEVELS: Tuple[str, ...] = ("beginner", "intermediate", "advanced")
WORKOUT_TYPES: Tuple[str, ...] = ("home", "gym")

REST = "rest"
DAYS_PER_WEEK = 7
MUSCLE_GROUP_SEPARATOR = "_"

# Neighbouring difficulty levels accepted when the exact level is too scarce
RELAXED_LEVELS: Dict[str, Tuple[str, ...]] = {
    "beginner": ("beginner", "intermediate"),
    "intermediate": ("intermediate", "beginner", "advanced"),
    "advanced": ("advanced", "intermediate"),
}

# Multi-joint movements, matched against the lowercased exercise name
COMPOUND_TERMS: Tuple[str, ...] = (
    "squat",
    "deadlift",
    "press",
    "row",
    "bench",
    "pull-up",
    "pullup",
    "chin-up",
    "chinup",
    "dip",
)

COMPOUND_SHARE = 0.6


# ============================================================
# Specialized workout types (split labels that are not muscle groups)
# ============================================================

HIIT_STRENGTH = "hiit_strength"
TABATA = "tabata"
CIRCUIT_TRAINING = "circuit_training"
ENDURANCE = "endurance"
ACTIVE_RECOVERY = "active_recovery"

# Traditional muscle-group tokens each specialized type filters on
SPECIALIZED_MUSCLE_SYNONYMS: Dict[str, Tuple[str, ...]] = {
    HIIT_STRENGTH: ("full body", "legs", "chest", "back", "shoulders", "core"),
    TABATA: ("full body", "legs", "core", "cardio"),
    CIRCUIT_TRAINING: ("full body", "chest", "back", "legs", "arms", "core"),
    ENDURANCE: ("cardio", "legs", "full body", "core"),
    ACTIVE_RECOVERY: ("full body", "core", "mobility", "flexibility"),
}

# Exercise-name keywords used when muscle matching leaves the pool too thin
SPECIALIZED_NAME_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    HIIT_STRENGTH: ("squat", "lunge", "push-up", "burpee", "thruster", "swing", "clean", "jump"),
    TABATA: ("burpee", "jump", "sprint", "mountain climber", "high knee", "jumping jack", "skater"),
    CIRCUIT_TRAINING: ("push-up", "squat", "lunge", "row", "plank", "step-up", "burpee", "dip"),
    ENDURANCE: ("run", "row", "cycl", "bike", "jump rope", "step", "climber", "swim"),
    ACTIVE_RECOVERY: ("stretch", "yoga", "mobility", "walk", "foam", "plank", "bridge", "bird dog"),
}

SPECIALIZED_WORKOUT_TYPES = frozenset(SPECIALIZED_MUSCLE_SYNONYMS)


# ============================================================
# Session timing
# ============================================================

SESSION_MINUTES_BY_LEVEL: Dict[str, Tuple[int, int]] = {
    "beginner": (30, 45),
    "intermediate": (45, 60),
    "advanced": (60, 90),
}
DEFAULT_SESSION_MINUTES = SESSION_MINUTES_BY_LEVEL["advanced"]

DEFAULT_DURATION_WEEKS = 12


# ============================================================
# Prescription ranges: (sets, reps, rest seconds), inclusive
# ============================================================

Prescription = Tuple[Tuple[int, int], Tuple[int, int], Tuple[int, int]]

STRENGTH_COMPOUND: Prescription = ((4, 5), (3, 6), (180, 240))
STRENGTH_ISOLATION: Prescription = ((3, 4), (6, 10), (120, 180))
MUSCLE_GAIN_COMPOUND: Prescription = ((3, 5), (6, 12), (90, 120))
MUSCLE_GAIN_ISOLATION: Prescription = ((3, 4), (8, 15), (60, 90))
WEIGHT_LOSS_ANY: Prescription = ((3, 4), (12, 20), (30, 60))
ENDURANCE_ANY: Prescription = ((2, 4), (15, 25), (30, 45))

SPECIALIZED_PRESCRIPTIONS: Dict[str, Prescription] = {
    HIIT_STRENGTH: ((3, 4), (8, 12), (30, 60)),
    TABATA: ((8, 8), (10, 15), (10, 10)),
    CIRCUIT_TRAINING: ((2, 3), (10, 15), (15, 30)),
    ENDURANCE: ((2, 3), (15, 25), (20, 40)),
    ACTIVE_RECOVERY: ((1, 2), (10, 15), (30, 60)),
}


# ============================================================
# Helpers
# ============================================================

def is_rest(muscle_group: str) -> bool:
    return (muscle_group or "").strip().lower() == REST


def is_specialized(muscle_group: str) -> bool:
    return (muscle_group or "").strip().lower() in SPECIALIZED_WORKOUT_TYPES


def is_compound(exercise_name: str) -> bool:
    name = (exercise_name or "").lower()
    return any(term in name for term in COMPOUND_TERMS)


def muscle_tokens(muscle_group: str) -> Tuple[str, ...]:
    """Tokens an exercise's target muscle group is matched against."""
    tag = (muscle_group or "").strip().lower()
    if tag in SPECIALIZED_MUSCLE_SYNONYMS:
        return SPECIALIZED_MUSCLE_SYNONYMS[tag]
    return tuple(t for t in tag.split(MUSCLE_GROUP_SEPARATOR) if t)
