"""Entry points used by callers such as the registration flow.

Both return False rather than raising when the profile is missing, no
configuration exists, or the writes fail; the reason is logged and kept in
the run's issues.
"""
from __future__ import annotations

from typing import Optional

from fitplan.core.execution import Observer
from fitplan.core.audit import log_observer
from fitplan.domains.nutrition import run_nutrition_generation
from fitplan.domains.workout import run_workout_generation


def generate_workout_plan(
    user_id: int,
    seed: Optional[int] = None,
    observer: Optional[Observer] = log_observer,
) -> bool:
    return run_workout_generation(user_id, seed=seed, observer=observer).success


def generate_nutrition_plan(
    user_id: int,
    seed: Optional[int] = None,
    observer: Optional[Observer] = log_observer,
) -> bool:
    return run_nutrition_generation(user_id, seed=seed, observer=observer).success
