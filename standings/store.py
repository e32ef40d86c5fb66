from contextlib import AbstractContextManager
from datetime import date
from decimal import Decimal
from typing import List, NamedTuple, Optional

from django.db import transaction
from django.db.models import F

from core.models import LeagueSettings
from events.models import Tournament, TournamentPlayer
from register.models import Player
from scores.models import Score
from standings.exceptions import TournamentNotFoundError, SettingsNotFoundError
from standings.models import QuotaLedger
from standings.rolling import LEDGER_CAPACITY, RollingLedger


class TournamentInfo(NamedTuple):
    id: int
    date: date
    number_of_holes: int


class ScoreRow(NamedTuple):
    player_id: int
    hole_id: int
    hole_number: int
    score: int
    quota: int
    player_name: str
    player_email: str
    player_quota: int


class FeeSettings(NamedTuple):
    tournament_fee_18_holes: Decimal
    tournament_fee_9_holes: Decimal

    def fee_for(self, number_of_holes):
        return self.tournament_fee_18_holes if number_of_holes == 18 else self.tournament_fee_9_holes


class ScoringStore:
    """
    The reads and writes the leaderboard and ledger services need from storage.

    Every method either returns plain rows or raises: TournamentNotFoundError and
    SettingsNotFoundError for missing records, and the storage layer's own
    errors (django.db.DatabaseError) for anything else.
    """

    def atomic(self) -> AbstractContextManager:
        raise NotImplementedError

    def get_tournament(self, tournament_id: int) -> TournamentInfo:
        raise NotImplementedError

    def get_tournament_date(self, tournament_id: int) -> date:
        return self.get_tournament(tournament_id).date

    def get_scores_for_tournament(self, tournament_id: int) -> List[ScoreRow]:
        raise NotImplementedError

    def get_settings(self) -> FeeSettings:
        raise NotImplementedError

    def get_paid_participant_count(self, tournament_id: int) -> int:
        raise NotImplementedError

    def get_existing_ledger(self, player_id: int, kind: str) -> Optional[RollingLedger]:
        raise NotImplementedError

    def upsert_ledger(self, player_id: int, kind: str, ledger: RollingLedger):
        raise NotImplementedError

    def add_season_results(self, player_id: int, prize_money: Decimal):
        raise NotImplementedError


class DjangoScoringStore(ScoringStore):

    def atomic(self):
        return transaction.atomic()

    def get_tournament(self, tournament_id):
        try:
            tournament = Tournament.objects.get(pk=tournament_id)
        except Tournament.DoesNotExist:
            raise TournamentNotFoundError(tournament_id)
        return TournamentInfo(id=tournament.id, date=tournament.date, number_of_holes=tournament.number_of_holes)

    def get_scores_for_tournament(self, tournament_id):
        rows = Score.objects \
            .filter(tournament_id=tournament_id) \
            .order_by("hole__hole_number", "player__name", "player_id") \
            .values_list("player_id", "hole_id", "hole__hole_number", "score", "quota",
                         "player__name", "player__email", "player__quota")
        return [ScoreRow(*row) for row in rows]

    def get_settings(self):
        settings = LeagueSettings.objects.current_settings()
        if settings is None:
            raise SettingsNotFoundError()
        return FeeSettings(settings.tournament_fee_18_holes, settings.tournament_fee_9_holes)

    def get_paid_participant_count(self, tournament_id):
        return TournamentPlayer.objects.paid_count(tournament_id)

    def get_existing_ledger(self, player_id, kind):
        # callers hold a transaction; the row stays locked until it commits
        row = QuotaLedger.objects.select_for_update().filter(player_id=player_id, kind=kind).first()
        if row is None:
            return None
        return RollingLedger.from_json(LEDGER_CAPACITY[kind], row.slots)

    def upsert_ledger(self, player_id, kind, ledger):
        QuotaLedger.objects.update_or_create(player_id=player_id, kind=kind, defaults={"slots": ledger.to_json()})

    def add_season_results(self, player_id, prize_money):
        Player.objects.filter(pk=player_id).update(
            tournaments_played=F("tournaments_played") + 1,
            prize_money=F("prize_money") + prize_money,
        )
