from rest_framework import serializers


class PlanGenerateSerializer(serializers.Serializer):
    user_id = serializers.IntegerField(min_value=1)

    # same seed -> same exercise and meal picks
    seed = serializers.IntegerField(required=False, allow_null=True, default=None)
