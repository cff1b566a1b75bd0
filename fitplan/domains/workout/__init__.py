from .graph import run_workout_generation

__all__ = ["run_workout_generation"]
