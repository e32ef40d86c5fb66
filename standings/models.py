from django.db import models
from django.db.models import CASCADE, UniqueConstraint

from register.models import Player

SEASON_LEDGER = "season"
SKINS_LEDGER = "skins"

LEDGER_KIND_CHOICES = (
    (SEASON_LEDGER, "Season Quota"),
    (SKINS_LEDGER, "Skins Quota"),
)


class QuotaLedger(models.Model):
    player = models.ForeignKey(verbose_name="Player", to=Player, on_delete=CASCADE, related_name="quota_ledgers")
    kind = models.CharField(verbose_name="Ledger", choices=LEDGER_KIND_CHOICES, max_length=10)
    slots = models.JSONField(verbose_name="Results (most recent first)", default=list)
    updated_at = models.DateTimeField(verbose_name="Updated", auto_now=True)

    class Meta:
        verbose_name = "Quota Ledger"
        verbose_name_plural = "Quota Ledgers"
        constraints = [
            UniqueConstraint(fields=["player", "kind"], name="unique_player_ledger")
        ]

    def __str__(self):
        return "{} ({})".format(self.player, self.get_kind_display())
