from rest_framework import serializers

from .models import Player


class PlayerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Player
        fields = (
            "id",
            "name",
            "email",
            "phone",
            "sex",
            "quota",
            "fedex_points",
            "tournaments_played",
            "prize_money",
            "active",
            "role",
        )


class PlayerPatchSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100, required=False)
    email = serializers.CharField(max_length=200, required=False)
    phone = serializers.CharField(max_length=20, required=False)
    sex = serializers.ChoiceField(choices=["M", "F"], required=False)
    quota = serializers.IntegerField(required=False)
    fedex_points = serializers.IntegerField(required=False)
    tournaments_played = serializers.IntegerField(required=False)
    prize_money = serializers.DecimalField(max_digits=8, decimal_places=2, required=False)
    active = serializers.BooleanField(required=False)
    role = serializers.ChoiceField(choices=["player", "admin"], required=False)
