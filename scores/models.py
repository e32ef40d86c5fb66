from django.db import models
from django.db.models import UniqueConstraint, CASCADE

from courses.models import Hole
from events.models import Tournament
from register.models import Player
from scores.managers import ScoreManager


class Score(models.Model):
    tournament = models.ForeignKey(verbose_name="Tournament", to=Tournament, on_delete=CASCADE, related_name="scores")
    player = models.ForeignKey(verbose_name="Player", to=Player, on_delete=CASCADE, related_name="scores")
    hole = models.ForeignKey(verbose_name="Hole", to=Hole, on_delete=CASCADE)
    score = models.IntegerField(verbose_name="Strokes")
    quota = models.IntegerField(verbose_name="Quota points", default=0)
    foursome_group = models.CharField(verbose_name="Foursome", max_length=20, blank=True, null=True)
    entered_at = models.DateTimeField(verbose_name="Entered", auto_now=True)

    objects = ScoreManager()

    class Meta:
        verbose_name = "Score"
        verbose_name_plural = "Scores"
        constraints = [
            UniqueConstraint(fields=["tournament", "player", "hole"], name="unique_tournament_player_hole")
        ]

    def __str__(self):
        return "{}: {} {} {}".format(self.tournament, self.player, self.hole, self.score)
