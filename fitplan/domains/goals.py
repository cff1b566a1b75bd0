"""Goal categorisation shared by the workout and nutrition rules.

The goal column is free text: the three enumerated values are matched exactly,
anything else by substring. Rules are evaluated top to bottom and the first
match wins, so "strength_endurance" lands in STRENGTH.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, Tuple


class GoalCategory(str, Enum):
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    STRENGTH = "strength"
    ENDURANCE = "endurance"
    GENERAL = "general"


GoalPredicate = Callable[[str], bool]


def equals(value: str) -> GoalPredicate:
    return lambda goal: goal == value


def contains(fragment: str) -> GoalPredicate:
    return lambda goal: fragment in goal


GOAL_RULES: Tuple[Tuple[GoalPredicate, GoalCategory], ...] = (
    (equals("weight_loss"), GoalCategory.WEIGHT_LOSS),
    (equals("muscle_gain"), GoalCategory.MUSCLE_GAIN),
    (contains("strength"), GoalCategory.STRENGTH),
    (contains("endurance"), GoalCategory.ENDURANCE),
)


def normalize_goal(goal: str) -> str:
    return (goal or "").strip().lower()


def classify_goal(goal: str) -> GoalCategory:
    g = normalize_goal(goal)
    for predicate, category in GOAL_RULES:
        if predicate(g):
            return category
    return GoalCategory.GENERAL
