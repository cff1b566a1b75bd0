from __future__ import annotations

import random
from typing import List, Tuple

from fitplan.domains.goals import GoalCategory, GoalPredicate, classify_goal, contains, equals
from fitplan.domains.profile import ProfileSnapshot
from fitplan.domains.workout.contract import DEFAULT_SESSION_MINUTES, SESSION_MINUTES_BY_LEVEL, is_rest
from fitplan.domains.workout.schemas import GenerationConfigSpec, SessionDraft
from fitplan.shared.randomness import random_int
from fitplan.shared.text import format_label

# Endurance is checked before weight_loss here, independent of GOAL_RULES
DURATION_BONUS_RULES: Tuple[Tuple[GoalPredicate, int], ...] = (
    (contains("endurance"), 15),
    (equals("weight_loss"), 10),
)

REST_DAY_DESCRIPTION = "Active recovery or complete rest"

_HEAVY_MUSCLE_GAIN_GROUPS = ("chest", "back", "legs")


def session_duration(profile: ProfileSnapshot, rng: random.Random) -> int:
    low, high = SESSION_MINUTES_BY_LEVEL.get(profile.experience_level, DEFAULT_SESSION_MINUTES)
    minutes = random_int(rng, low, high)
    for predicate, bonus in DURATION_BONUS_RULES:
        if predicate(profile.fitness_goal):
            return minutes + bonus
    return minutes


def session_description(muscle_group: str, goal: str) -> str:
    label = format_label(muscle_group)
    category = classify_goal(goal)

    if category == GoalCategory.WEIGHT_LOSS:
        return f"High intensity {label} workout with minimal rest to maximize calorie burn"
    if category == GoalCategory.MUSCLE_GAIN:
        if any(m in muscle_group for m in _HEAVY_MUSCLE_GAIN_GROUPS):
            return f"Heavy {label} workout focused on hypertrophy with progressive overload"
        return f"Targeted {label} workout with isolation and compound movements"
    if category == GoalCategory.STRENGTH:
        return f"Heavy {label} workout with compound lifts and longer rest periods"
    if category == GoalCategory.ENDURANCE:
        return f"High-rep {label} workout with minimal rest to build muscular endurance"
    return f"Focus on {label}"


def schedule_sessions(
    config: GenerationConfigSpec,
    profile: ProfileSnapshot,
    rng: random.Random,
) -> List[SessionDraft]:
    """One session per split entry, in split order, without exercises."""
    sessions: List[SessionDraft] = []
    for day_number, muscle_group in config.split_days():
        if is_rest(muscle_group):
            sessions.append(
                SessionDraft(
                    day_number=day_number,
                    name=f"Day {day_number}: Rest Day",
                    description=REST_DAY_DESCRIPTION,
                    target_muscle_groups=muscle_group,
                    duration=0,
                )
            )
            continue

        sessions.append(
            SessionDraft(
                day_number=day_number,
                name=f"Day {day_number}: {format_label(muscle_group)}",
                description=session_description(muscle_group, profile.fitness_goal),
                target_muscle_groups=muscle_group,
                duration=session_duration(profile, rng),
            )
        )
    return sessions
