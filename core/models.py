from django.db import models

from .manager import SettingsManager


class LeagueSettings(models.Model):
    tournament_fee_18_holes = models.DecimalField(verbose_name="18 hole tournament fee", max_digits=6,
                                                  decimal_places=2, default=0)
    tournament_fee_9_holes = models.DecimalField(verbose_name="9 hole tournament fee", max_digits=6,
                                                 decimal_places=2, default=0)
    updated_at = models.DateTimeField(verbose_name="Updated", auto_now=True)

    objects = SettingsManager()

    class Meta:
        verbose_name = "League Settings"
        verbose_name_plural = "League Settings"

    def __str__(self):
        return "18 holes: ${} / 9 holes: ${}".format(self.tournament_fee_18_holes, self.tournament_fee_9_holes)
