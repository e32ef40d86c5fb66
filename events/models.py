from django.db import models
from django.db.models import CASCADE, DO_NOTHING, UniqueConstraint

from courses.models import Course, HOLE_COUNT_CHOICES
from register.models import Player
from events.managers import TournamentManager, TournamentPlayerManager


class Tournament(models.Model):
    date = models.DateField(verbose_name="Date")
    course = models.ForeignKey(verbose_name="Course", to=Course, on_delete=DO_NOTHING, related_name="tournaments")
    number_of_holes = models.IntegerField(verbose_name="Number of holes", choices=HOLE_COUNT_CHOICES, default=18)
    players = models.ManyToManyField(to=Player, through="TournamentPlayer", related_name="tournaments", blank=True)
    created_at = models.DateTimeField(verbose_name="Created", auto_now_add=True)

    objects = TournamentManager()

    class Meta:
        ordering = ("date", )

    def __str__(self):
        return "{} ({} holes) {}".format(self.course.name, self.number_of_holes, self.date)


class TournamentPlayer(models.Model):
    tournament = models.ForeignKey(verbose_name="Tournament", to=Tournament, on_delete=CASCADE, related_name="roster")
    player = models.ForeignKey(verbose_name="Player", to=Player, on_delete=CASCADE)
    registration_date = models.DateTimeField(verbose_name="Registered", auto_now_add=True)
    paid = models.BooleanField(verbose_name="Paid", default=False)

    objects = TournamentPlayerManager()

    class Meta:
        verbose_name = "Tournament Player"
        verbose_name_plural = "Tournament Players"
        constraints = [
            UniqueConstraint(fields=["tournament", "player"], name="unique_tournament_player")
        ]

    def __str__(self):
        return "{}: {}".format(self.tournament, self.player)
