from decimal import Decimal
from typing import Dict, Optional

import structlog
from django.db import DatabaseError

from standings.aggregation import aggregate_players
from standings.exceptions import NoScoresRecordedError, StorageFailureError
from standings.leaderboard import LeaderboardService
from standings.rolling import LEDGER_CAPACITY, LedgerEntry, RollingLedger
from standings.store import DjangoScoringStore, ScoringStore

logger = structlog.get_logger(__name__)


class CompletionResult:
    """Container for a tournament completion"""

    def __init__(self, tournament_id: int, players_updated: int = 0):
        self.tournament_id = tournament_id
        self.players_updated = players_updated

    def to_dict(self) -> Dict:
        return {
            "message": "Tournament completed successfully",
            "playersUpdated": self.players_updated,
        }


class QuotaLedgerService:
    """
    Rolls a finished tournament into every participant's quota ledgers.

    Each player keeps two fixed-width histories (7 results for the season quota,
    20 for the skins quota). Completion pushes the tournament's result into slot 1
    of both and credits the player's season totals. Completing the same tournament
    twice records it twice.
    """

    def __init__(self, store: Optional[ScoringStore] = None):
        self.store = store or DjangoScoringStore()

    def complete_tournament(self, tournament_id: int) -> CompletionResult:
        """
        Args:
            tournament_id: The tournament being completed

        Returns:
            CompletionResult with the number of players whose ledgers were updated

        Raises:
            TournamentNotFoundError: The tournament does not exist
            NoScoresRecordedError: No scores have been entered for the tournament
            SettingsNotFoundError: There are no fee settings to price the prizes
            StorageFailureError: A read or write failed; nothing was saved
        """
        logger.info("Completing tournament", tournament_id=tournament_id)
        try:
            with self.store.atomic():
                players_updated = self._complete(tournament_id)
        except DatabaseError as e:
            logger.error("Tournament completion rolled back", tournament_id=tournament_id, error=str(e))
            raise StorageFailureError() from e

        logger.info("Tournament completed", tournament_id=tournament_id, players_updated=players_updated)
        return CompletionResult(tournament_id, players_updated)

    def _complete(self, tournament_id):
        tournament_date = self.store.get_tournament_date(tournament_id)
        totals = aggregate_players(self.store.get_scores_for_tournament(tournament_id))
        if not totals:
            raise NoScoresRecordedError(tournament_id)

        for player in totals:
            # positive is above quota, negative below
            entry = LedgerEntry(date=tournament_date, points=player.quota_diff, quota_diff=player.quota_diff)
            for kind in LEDGER_CAPACITY:
                self.roll_ledger(player.player_id, kind, entry)

        leaderboard = LeaderboardService(self.store).compute_leaderboard(tournament_id)
        for line in leaderboard.entries:
            self.store.add_season_results(line.player_id, Decimal(line.prize_money))

        return len(totals)

    def roll_ledger(self, player_id: int, kind: str, entry: LedgerEntry) -> RollingLedger:
        ledger = self.store.get_existing_ledger(player_id, kind)
        if ledger is None:
            ledger = RollingLedger.for_kind(kind)
        ledger.push(entry)
        self.store.upsert_ledger(player_id, kind, ledger)
        return ledger
