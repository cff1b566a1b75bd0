from __future__ import annotations


class PlanGenerationError(Exception):
    """Base class for conditions that stop or degrade a generation run."""

    kind = "plan_generation_error"


class ProfileNotFound(PlanGenerationError):
    kind = "profile_not_found"

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User with ID {user_id} not found")
        self.user_id = user_id


class NoConfigurationAvailable(PlanGenerationError):
    kind = "no_configuration"


class EmptyExercisePool(PlanGenerationError):
    """Raised per session; the run continues with an empty session."""

    kind = "empty_exercise_pool"

    def __init__(self, muscle_group: str) -> None:
        super().__init__(f"No suitable exercises found for {muscle_group}")
        self.muscle_group = muscle_group


class PersistenceFailure(PlanGenerationError):
    kind = "persistence_failure"
