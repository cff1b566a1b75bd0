from django.db import models


class ExperienceLevel(models.TextChoices):
    BEGINNER = "beginner", "Beginner"
    INTERMEDIATE = "intermediate", "Intermediate"
    ADVANCED = "advanced", "Advanced"


class WorkoutType(models.TextChoices):
    HOME = "home", "Home"
    GYM = "gym", "Gym"


class UserProfile(models.Model):
    full_name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255, unique=True)
    date_of_birth = models.DateField()
    gender = models.CharField(max_length=20)
    height = models.DecimalField(max_digits=6, decimal_places=2)  # cm
    weight = models.DecimalField(max_digits=6, decimal_places=2)  # kg

    # weight_loss | muscle_gain | maintenance, or free text such as "strength"
    fitness_goal = models.CharField(max_length=64)
    experience_level = models.CharField(max_length=16, choices=ExperienceLevel.choices)
    preferred_workout_type = models.CharField(max_length=8, choices=WorkoutType.choices)
    activity_level = models.CharField(max_length=50)

    medical_conditions = models.TextField(blank=True, null=True)
    dietary_restrictions = models.TextField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.full_name} <{self.email}>"


class Exercise(models.Model):
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, default="")
    target_muscle_group = models.CharField(max_length=50)
    equipment = models.TextField(blank=True, null=True)
    difficulty = models.CharField(max_length=16, choices=ExperienceLevel.choices)
    workout_type = models.CharField(max_length=8, choices=WorkoutType.choices)

    video_url = models.URLField(blank=True, null=True)
    image_url = models.URLField(blank=True, null=True)
    calories_burn_rate = models.DecimalField(max_digits=6, decimal_places=2, blank=True, null=True)
    instructions = models.TextField(blank=True, default="")

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name


class AiConfiguration(models.Model):
    fitness_goal = models.CharField(max_length=64)
    experience_level = models.CharField(max_length=16, choices=ExperienceLevel.choices)
    workout_type = models.CharField(max_length=8, choices=WorkoutType.choices)

    # {"day1": "chest_triceps", "day2": "rest", ...}
    muscle_group_split = models.JSONField(default=dict)
    # {"min": 4, "max": 6}
    exercise_count_range = models.JSONField(default=dict)
    # {"min": 60, "max": 120}
    rest_period_range = models.JSONField(default=dict)
    # {"compound": {"min": 3, "max": 5}, "isolation": {"min": 2, "max": 4}}
    set_ranges = models.JSONField(default=dict)
    rep_ranges = models.JSONField(default=dict)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.fitness_goal}/{self.experience_level}/{self.workout_type}"


class WorkoutPlan(models.Model):
    user = models.ForeignKey(UserProfile, on_delete=models.CASCADE, related_name="workout_plans")
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, null=True)
    goal = models.CharField(max_length=64)
    difficulty = models.CharField(max_length=16, choices=ExperienceLevel.choices)
    duration_weeks = models.PositiveIntegerField()
    is_ai_generated = models.BooleanField(default=False)
    workout_type = models.CharField(max_length=8, choices=WorkoutType.choices)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.name


class WorkoutSession(models.Model):
    plan = models.ForeignKey(WorkoutPlan, on_delete=models.CASCADE, related_name="sessions")
    day_number = models.PositiveSmallIntegerField()
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, null=True)
    target_muscle_groups = models.TextField()
    duration = models.PositiveIntegerField()  # minutes

    class Meta:
        ordering = ["plan_id", "id"]

    def __str__(self) -> str:
        return self.name


class WorkoutExercise(models.Model):
    session = models.ForeignKey(WorkoutSession, on_delete=models.CASCADE, related_name="exercises")
    exercise = models.ForeignKey(Exercise, on_delete=models.PROTECT, related_name="+")
    sets = models.PositiveSmallIntegerField()
    reps = models.PositiveSmallIntegerField()
    rest_period = models.PositiveIntegerField()  # seconds
    order = models.PositiveSmallIntegerField()

    class Meta:
        ordering = ["session_id", "order"]


class NutritionPlan(models.Model):
    user = models.ForeignKey(UserProfile, on_delete=models.CASCADE, related_name="nutrition_plans")
    goal = models.CharField(max_length=64)
    daily_calories = models.PositiveIntegerField()
    protein_grams = models.PositiveIntegerField()
    carbs_grams = models.PositiveIntegerField()
    fat_grams = models.PositiveIntegerField()
    meals_per_day = models.PositiveSmallIntegerField()
    is_ai_generated = models.BooleanField(default=False)
    restrictions = models.TextField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)


class MealPlan(models.Model):
    class MealTime(models.TextChoices):
        BREAKFAST = "breakfast", "Breakfast"
        LUNCH = "lunch", "Lunch"
        DINNER = "dinner", "Dinner"
        SNACK = "snack", "Snack"
        MORNING_SNACK = "morning_snack", "Morning Snack"
        AFTERNOON_SNACK = "afternoon_snack", "Afternoon Snack"
        EVENING_SNACK = "evening_snack", "Evening Snack"

    nutrition_plan = models.ForeignKey(NutritionPlan, on_delete=models.CASCADE, related_name="meals")
    day_number = models.PositiveSmallIntegerField()
    meal_time = models.CharField(max_length=50, choices=MealTime.choices)
    name = models.CharField(max_length=100)
    description = models.TextField()
    calories = models.PositiveIntegerField()
    protein = models.PositiveIntegerField()
    carbs = models.PositiveIntegerField()
    fat = models.PositiveIntegerField()
    recipe = models.TextField(blank=True, null=True)

    class Meta:
        ordering = ["nutrition_plan_id", "id"]


class AiPlanHistory(models.Model):
    user = models.ForeignKey(UserProfile, on_delete=models.CASCADE, related_name="plan_history")
    workout_plan = models.ForeignKey(
        WorkoutPlan, on_delete=models.SET_NULL, null=True, blank=True, related_name="history"
    )
    nutrition_plan = models.ForeignKey(
        NutritionPlan, on_delete=models.SET_NULL, null=True, blank=True, related_name="history"
    )
    user_inputs = models.JSONField()
    generated_at = models.DateTimeField(auto_now_add=True)
    rating = models.PositiveSmallIntegerField(blank=True, null=True)
    feedback = models.TextField(blank=True, null=True)

    class Meta:
        ordering = ["-generated_at"]
