from .graph import run_nutrition_generation

__all__ = ["run_nutrition_generation"]
