from rest_framework import serializers

from .models import TournamentPlayer


class RosterEntrySerializer(serializers.ModelSerializer):
    id = serializers.IntegerField(source="player.id", read_only=True)
    name = serializers.CharField(source="player.name", read_only=True)
    email = serializers.CharField(source="player.email", read_only=True)
    phone = serializers.CharField(source="player.phone", read_only=True)
    sex = serializers.CharField(source="player.sex", read_only=True)
    quota = serializers.IntegerField(source="player.quota", read_only=True)
    role = serializers.CharField(source="player.role", read_only=True)

    class Meta:
        model = TournamentPlayer
        fields = ("id", "name", "email", "phone", "sex", "quota", "role", "registration_date", "paid", )


class AddPlayerSerializer(serializers.Serializer):
    player_id = serializers.IntegerField()
    paid = serializers.BooleanField(required=False, default=False)


class PaidSerializer(serializers.Serializer):
    paid = serializers.BooleanField()
