import structlog

from django.db import models, IntegrityError, transaction
from django.utils import timezone as tz

from events.exceptions import PlayerAlreadyRegisteredError, PlayerNotRegisteredError

logger = structlog.get_logger(__name__)


class TournamentManager(models.Manager):
    def get_queryset(self):
        return super().get_queryset().select_related("course")

    def upcoming(self, limit=3):
        today = tz.localdate()
        return self.filter(date__gte=today).order_by("date")[:limit]


class TournamentPlayerManager(models.Manager):

    def add_player(self, tournament, player, paid=False):
        try:
            with transaction.atomic():
                entry = self.create(tournament=tournament, player=player, paid=paid)
        except IntegrityError:
            raise PlayerAlreadyRegisteredError()

        logger.info("Player added to tournament", tournament_id=tournament.id, player_id=player.id)
        return entry

    def remove_player(self, tournament, player):
        deleted, _ = self.filter(tournament=tournament, player=player).delete()
        if deleted == 0:
            raise PlayerNotRegisteredError()

        logger.info("Player removed from tournament", tournament_id=tournament.id, player_id=player.id)

    def mark_paid(self, tournament, player, paid=True):
        updated = self.filter(tournament=tournament, player=player).update(paid=paid)
        if updated == 0:
            raise PlayerNotRegisteredError()

    def paid_count(self, tournament_id):
        return self.filter(tournament_id=tournament_id, paid=True).count()

    def available_players(self, tournament):
        from register.models import Player
        registered = self.filter(tournament=tournament).values_list("player_id", flat=True)
        return Player.objects.active().exclude(pk__in=registered).order_by("name")
