from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from .models import NutritionPlan, WorkoutPlan
from .serializers import NutritionPlanSerializer, WorkoutPlanSerializer
from .serializers_plan import PlanGenerateSerializer

from fitplan.domains.nutrition import run_nutrition_generation
from fitplan.domains.workout import run_workout_generation


class WorkoutPlanGenerateView(APIView):
    def post(self, request):
        ser = PlanGenerateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        result = run_workout_generation(ser.validated_data["user_id"], seed=ser.validated_data["seed"])
        if not result.success:
            return Response({
                "request_id": result.request_id,
                "success": False,
                "issues": result.issues,
            }, status=status.HTTP_422_UNPROCESSABLE_ENTITY)

        plan = WorkoutPlan.objects.prefetch_related("sessions__exercises__exercise").get(pk=result.plan_id)
        return Response({
            "request_id": result.request_id,
            "success": True,
            "plan": WorkoutPlanSerializer(plan).data,
            "warnings": result.warnings,
        }, status=status.HTTP_201_CREATED)


class NutritionPlanGenerateView(APIView):
    def post(self, request):
        ser = PlanGenerateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        result = run_nutrition_generation(ser.validated_data["user_id"], seed=ser.validated_data["seed"])
        if not result.success:
            return Response({
                "request_id": result.request_id,
                "success": False,
                "issues": result.issues,
            }, status=status.HTTP_422_UNPROCESSABLE_ENTITY)

        plan = NutritionPlan.objects.prefetch_related("meals").get(pk=result.plan_id)
        return Response({
            "request_id": result.request_id,
            "success": True,
            "plan": NutritionPlanSerializer(plan).data,
        }, status=status.HTTP_201_CREATED)
