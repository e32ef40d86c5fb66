from rest_framework import serializers

from .models import LeagueSettings


class LeagueSettingsSerializer(serializers.ModelSerializer):
    class Meta:
        model = LeagueSettings
        fields = ("id", "tournament_fee_18_holes", "tournament_fee_9_holes", "updated_at", )
        read_only_fields = ("id", "updated_at", )


class FeePatchSerializer(serializers.Serializer):
    tournament_fee_18_holes = serializers.DecimalField(max_digits=6, decimal_places=2, min_value=0, required=False)
    tournament_fee_9_holes = serializers.DecimalField(max_digits=6, decimal_places=2, min_value=0, required=False)
