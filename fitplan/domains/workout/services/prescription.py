from __future__ import annotations

import random
from typing import List, Optional, Sequence

from fitplan.domains.goals import GoalCategory, classify_goal
from fitplan.domains.workout.contract import (
    ENDURANCE_ANY,
    MUSCLE_GAIN_COMPOUND,
    MUSCLE_GAIN_ISOLATION,
    SPECIALIZED_PRESCRIPTIONS,
    STRENGTH_COMPOUND,
    STRENGTH_ISOLATION,
    WEIGHT_LOSS_ANY,
    Prescription,
    is_compound,
)
from fitplan.domains.workout.schemas import GenerationConfigSpec, PrescriptionDraft
from fitplan.models import Exercise
from fitplan.shared.randomness import random_int


def _goal_ranges(category: GoalCategory, compound: bool) -> Optional[Prescription]:
    if category == GoalCategory.STRENGTH:
        return STRENGTH_COMPOUND if compound else STRENGTH_ISOLATION
    if category == GoalCategory.MUSCLE_GAIN:
        return MUSCLE_GAIN_COMPOUND if compound else MUSCLE_GAIN_ISOLATION
    if category == GoalCategory.WEIGHT_LOSS:
        return WEIGHT_LOSS_ANY
    if category == GoalCategory.ENDURANCE:
        return ENDURANCE_ANY
    return None


def _config_ranges(config: GenerationConfigSpec, compound: bool) -> Prescription:
    sets = config.set_ranges.for_exercise(compound)
    reps = config.rep_ranges.for_exercise(compound)
    rest = config.rest_period_range
    return (sets.min, sets.max), (reps.min, reps.max), (rest.min, rest.max)


def prescription_ranges(
    exercise_name: str,
    goal: str,
    muscle_group: str,
    config: GenerationConfigSpec,
) -> Prescription:
    """Goal ranges, then specialized split-label ranges, then the configuration."""
    compound = is_compound(exercise_name)
    ranges = _goal_ranges(classify_goal(goal), compound)
    if ranges is not None:
        return ranges
    tag = (muscle_group or "").strip().lower()
    if tag in SPECIALIZED_PRESCRIPTIONS:
        return SPECIALIZED_PRESCRIPTIONS[tag]
    return _config_ranges(config, compound)


def assign_prescription(
    exercise: Exercise,
    goal: str,
    muscle_group: str,
    config: GenerationConfigSpec,
    rng: random.Random,
    order: int,
) -> PrescriptionDraft:
    (sets_lo, sets_hi), (reps_lo, reps_hi), (rest_lo, rest_hi) = prescription_ranges(
        exercise.name, goal, muscle_group, config
    )
    return PrescriptionDraft(
        exercise_id=exercise.id,
        exercise_name=exercise.name,
        sets=max(1, random_int(rng, sets_lo, sets_hi)),
        reps=max(1, random_int(rng, reps_lo, reps_hi)),
        rest_period=random_int(rng, rest_lo, rest_hi),
        order=order,
    )


def assign_prescriptions(
    exercises: Sequence[Exercise],
    goal: str,
    muscle_group: str,
    config: GenerationConfigSpec,
    rng: random.Random,
) -> List[PrescriptionDraft]:
    """Prescriptions in selection order; order is 1..N without gaps."""
    return [
        assign_prescription(ex, goal, muscle_group, config, rng, order=i)
        for i, ex in enumerate(exercises, start=1)
    ]
