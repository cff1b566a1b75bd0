from django.urls import path
from .views import NutritionPlanGenerateView, WorkoutPlanGenerateView

urlpatterns = [
    path("plans/workout/generate/", WorkoutPlanGenerateView.as_view(), name="workout-plan-generate"),
    path("plans/nutrition/generate/", NutritionPlanGenerateView.as_view(), name="nutrition-plan-generate"),
]
