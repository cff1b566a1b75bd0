from __future__ import annotations

from typing import Dict, Tuple

from fitplan.domains.goals import GoalCategory, classify_goal
from fitplan.domains.profile import ProfileSnapshot
from fitplan.domains.workout.contract import DEFAULT_DURATION_WEEKS
from fitplan.domains.workout.schemas import WorkoutPlanDraft
from fitplan.shared.text import format_label

# (category, experience) -> (name, description, duration_weeks)
PLAN_TABLE: Dict[Tuple[GoalCategory, str], Tuple[str, str, int]] = {
    (GoalCategory.WEIGHT_LOSS, "beginner"): (
        "Fat Burning Plan", "Beginner-friendly fat loss program with progressive intensity", 8,
    ),
    (GoalCategory.WEIGHT_LOSS, "intermediate"): (
        "Fat Burning Plan", "Moderate intensity fat loss program with cardio acceleration", 12,
    ),
    (GoalCategory.WEIGHT_LOSS, "advanced"): (
        "Fat Burning Plan", "Advanced fat loss program with high intensity intervals", 16,
    ),
    (GoalCategory.MUSCLE_GAIN, "beginner"): (
        "Muscle Building Plan",
        "Fundamental muscle building program focusing on form and progressive overload",
        DEFAULT_DURATION_WEEKS,
    ),
    (GoalCategory.MUSCLE_GAIN, "intermediate"): (
        "Muscle Building Plan",
        "Hypertrophy-focused program with periodized volume and intensity",
        DEFAULT_DURATION_WEEKS,
    ),
    (GoalCategory.MUSCLE_GAIN, "advanced"): (
        "Muscle Building Plan", "Advanced hypertrophy program with specialized techniques", DEFAULT_DURATION_WEEKS,
    ),
    (GoalCategory.STRENGTH, "beginner"): (
        "Strength Development Plan", "Linear progression strength program for beginners", DEFAULT_DURATION_WEEKS,
    ),
    (GoalCategory.STRENGTH, "intermediate"): (
        "Strength Development Plan",
        "Intermediate strength program with wave periodization",
        DEFAULT_DURATION_WEEKS,
    ),
    (GoalCategory.STRENGTH, "advanced"): (
        "Strength Development Plan",
        "Advanced strength program with specialized lifts and periodization",
        DEFAULT_DURATION_WEEKS,
    ),
}

# Anything other than beginner/intermediate reads as advanced in the table
_TABLE_LEVELS = ("beginner", "intermediate")


def build_plan(profile: ProfileSnapshot) -> WorkoutPlanDraft:
    goal = profile.fitness_goal
    level = profile.experience_level
    category = classify_goal(goal)

    table_level = level if level in _TABLE_LEVELS else "advanced"
    entry = PLAN_TABLE.get((category, table_level))
    if entry is None:
        label = format_label(goal)
        entry = (f"{label} Plan", f"Custom {label} plan for {level} level", DEFAULT_DURATION_WEEKS)

    name, description, duration_weeks = entry
    return WorkoutPlanDraft(
        name=name,
        description=description,
        goal=goal,
        difficulty=level,
        duration_weeks=duration_weeks,
        workout_type=profile.workout_type,
    )
