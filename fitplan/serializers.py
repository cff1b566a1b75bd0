from rest_framework import serializers
from .models import MealPlan, NutritionPlan, WorkoutExercise, WorkoutPlan, WorkoutSession


class WorkoutExerciseSerializer(serializers.ModelSerializer):
    exercise_name = serializers.CharField(source="exercise.name", read_only=True)

    class Meta:
        model = WorkoutExercise
        fields = ["id", "exercise", "exercise_name", "sets", "reps", "rest_period", "order"]


class WorkoutSessionSerializer(serializers.ModelSerializer):
    exercises = WorkoutExerciseSerializer(many=True, read_only=True)

    class Meta:
        model = WorkoutSession
        fields = ["id", "day_number", "name", "description", "target_muscle_groups", "duration", "exercises"]


class WorkoutPlanSerializer(serializers.ModelSerializer):
    sessions = WorkoutSessionSerializer(many=True, read_only=True)

    class Meta:
        model = WorkoutPlan
        fields = [
            "id", "user", "name", "description", "goal", "difficulty",
            "duration_weeks", "workout_type", "is_ai_generated", "sessions",
        ]


class MealPlanSerializer(serializers.ModelSerializer):
    class Meta:
        model = MealPlan
        fields = ["id", "day_number", "meal_time", "name", "description", "calories", "protein", "carbs", "fat", "recipe"]


class NutritionPlanSerializer(serializers.ModelSerializer):
    meals = MealPlanSerializer(many=True, read_only=True)

    class Meta:
        model = NutritionPlan
        fields = [
            "id", "user", "goal", "daily_calories", "protein_grams", "carbs_grams", "fat_grams",
            "meals_per_day", "restrictions", "is_ai_generated", "meals",
        ]
