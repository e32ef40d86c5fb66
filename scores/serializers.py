from rest_framework import serializers

from courses.models import Hole
from events.models import Tournament
from register.models import Player
from scores.models import Score


class ScoreSerializer(serializers.ModelSerializer):
    hole_number = serializers.IntegerField(source="hole.hole_number", read_only=True)
    player_name = serializers.CharField(source="player.name", read_only=True)

    class Meta:
        model = Score
        fields = ("id", "tournament", "player", "player_name", "hole", "hole_number", "score", "quota",
                  "foursome_group", "entered_at", )


class ScoreEntrySerializer(serializers.Serializer):
    tournament_id = serializers.PrimaryKeyRelatedField(source="tournament", queryset=Tournament.objects.all())
    player_id = serializers.PrimaryKeyRelatedField(source="player", queryset=Player.objects.all())
    hole_id = serializers.PrimaryKeyRelatedField(source="hole", queryset=Hole.objects.all())
    score = serializers.IntegerField(min_value=1)
    quota = serializers.IntegerField()
    foursome_group = serializers.CharField(max_length=20, required=False, allow_null=True, allow_blank=True)
