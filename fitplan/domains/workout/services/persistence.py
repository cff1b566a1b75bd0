from __future__ import annotations

import logging
from typing import Sequence

from django.db import DatabaseError, transaction

from fitplan.domains.errors import PersistenceFailure
from fitplan.domains.history import record_generation
from fitplan.domains.profile import ProfileSnapshot
from fitplan.domains.workout.schemas import SessionDraft, WorkoutPlanDraft
from fitplan.models import WorkoutExercise, WorkoutPlan, WorkoutSession

logger = logging.getLogger(__name__)


def save_workout_plan(
    profile: ProfileSnapshot,
    plan: WorkoutPlanDraft,
    sessions: Sequence[SessionDraft],
    record_history: bool = True,
) -> WorkoutPlan:
    """Write plan, sessions, exercises and history; all or nothing."""
    try:
        with transaction.atomic():
            row = WorkoutPlan.objects.create(user_id=profile.user_id, **plan.model_dump())
            for s in sessions:
                session_row = WorkoutSession.objects.create(
                    plan=row,
                    day_number=s.day_number,
                    name=s.name,
                    description=s.description,
                    target_muscle_groups=s.target_muscle_groups,
                    duration=s.duration,
                )
                WorkoutExercise.objects.bulk_create(
                    [
                        WorkoutExercise(
                            session=session_row,
                            exercise_id=p.exercise_id,
                            sets=p.sets,
                            reps=p.reps,
                            rest_period=p.rest_period,
                            order=p.order,
                        )
                        for p in s.exercises
                    ]
                )
            if record_history:
                record_generation(profile, workout_plan=row)
    except DatabaseError as e:
        logger.error("[PERSIST] workout plan for user %s rolled back: %s", profile.user_id, e)
        raise PersistenceFailure(f"Could not save workout plan: {e}") from e

    logger.info("[PERSIST] workout plan %s saved with %d sessions", row.pk, len(sessions))
    return row
