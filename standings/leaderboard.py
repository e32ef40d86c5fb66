from decimal import Decimal, ROUND_FLOOR
from typing import Dict, List, Optional

import structlog

from standings.aggregation import PlayerTotals, aggregate_players, group_by_hole
from standings.store import DjangoScoringStore, ScoreRow, ScoringStore

logger = structlog.get_logger(__name__)

# Share of the quota pot paid to finishing positions 1, 2 and 3
PRIZE_PERCENTAGES = (Decimal("0.5"), Decimal("0.3"), Decimal("0.2"))
QUOTA_POT_SHARE = Decimal("0.5")
# Applied to the half of the pot left after the quota prizes; the rest is kept
SKINS_POT_SHARE = Decimal("0.6")


def floor_currency(amount: Decimal) -> int:
    return int(amount.to_integral_value(rounding=ROUND_FLOOR))


def award_skins(rows: List[ScoreRow]) -> Dict[int, List[int]]:
    """
    Find the skin winners for a tournament.

    A hole pays a skin only when a single player holds its lowest stroke count.

    Args:
        rows: Every score row recorded for the tournament

    Returns:
        Map of player id to the sorted hole numbers that player won
    """
    skins: Dict[int, List[int]] = {}
    for hole_rows in group_by_hole(rows).values():
        best = min(row.score for row in hole_rows)
        winners = [row for row in hole_rows if row.score == best]
        if len(winners) == 1:
            skins.setdefault(winners[0].player_id, []).append(winners[0].hole_number)

    return {player_id: sorted(holes) for player_id, holes in skins.items()}


def pool_quota_prizes(totals: List[PlayerTotals], quota_prize_pot: Decimal) -> List[tuple]:
    """
    Rank players who are already sorted best first, pooling prizes across ties.

    Players with the same over/under share the rank of the first of them. A tied
    block covering positions i..i+k-1 splits the percentages of whichever of those
    positions pay out evenly across its k players.

    Returns:
        A (rank, quota_prize_money) pair for each player, in the same order
    """
    ranks = []
    start = 0
    while start < len(totals):
        end = start
        while end < len(totals) and totals[end].over_under == totals[start].over_under:
            end += 1

        tied = end - start
        share = sum(PRIZE_PERCENTAGES[start:end], Decimal(0))
        prize = floor_currency(quota_prize_pot * share / tied)
        ranks.extend([(start + 1, prize)] * tied)
        start = end

    return ranks


class LeaderboardEntry:
    """One player's line on a tournament leaderboard"""

    def __init__(self, rank: int, totals: PlayerTotals, skin_holes: List[int], quota_prize_money: int,
                 skin_prize_money: int):
        self.rank = rank
        self.player_id = totals.player_id
        self.name = totals.name
        self.email = totals.email
        self.player_quota = totals.player_quota
        self.total_quota_points = totals.total_quota_points
        self.over_under = totals.over_under
        self.holes_played = totals.holes_played
        self.total_strokes = totals.total_strokes
        self.skin_holes = skin_holes
        self.quota_prize_money = quota_prize_money
        self.skin_prize_money = skin_prize_money

    @property
    def skins(self):
        return len(self.skin_holes)

    @property
    def prize_money(self):
        return self.quota_prize_money + self.skin_prize_money

    def to_dict(self) -> Dict:
        return {
            "rank": self.rank,
            "id": self.player_id,
            "name": self.name,
            "email": self.email,
            "player_quota": self.player_quota,
            "total_quota_points": self.total_quota_points,
            "over_under": self.over_under,
            "holes_played": self.holes_played,
            "total_strokes": self.total_strokes,
            "skins": self.skins,
            "skin_holes": list(self.skin_holes),
            "quota_prize_money": self.quota_prize_money,
            "skin_prize_money": self.skin_prize_money,
        }


class LeaderboardResult:
    """Container for a computed leaderboard and the pots that funded it"""

    def __init__(self, tournament_id: int, total_pot=Decimal(0), quota_prize_pot=Decimal(0),
                 skin_prize_pot=Decimal(0), skin_price_per_skin=Decimal(0), total_skins=0):
        self.tournament_id = tournament_id
        self.total_pot = total_pot
        self.quota_prize_pot = quota_prize_pot
        self.skin_prize_pot = skin_prize_pot
        self.skin_price_per_skin = skin_price_per_skin
        self.total_skins = total_skins
        self.entries: List[LeaderboardEntry] = []

    def to_dict(self) -> Dict:
        return {
            "tournament_id": self.tournament_id,
            "total_pot": self.total_pot,
            "quota_prize_pot": self.quota_prize_pot,
            "skin_prize_pot": self.skin_prize_pot,
            "skin_price_per_skin": self.skin_price_per_skin,
            "total_skins": self.total_skins,
            "leaderboard": [entry.to_dict() for entry in self.entries],
        }


class LeaderboardService:
    """
    Builds the ranked, prize-annotated leaderboard for a tournament from its
    recorded hole scores. Nothing is written; ranks are computed on every call.
    """

    def __init__(self, store: Optional[ScoringStore] = None):
        self.store = store or DjangoScoringStore()

    def compute_leaderboard(self, tournament_id: int) -> LeaderboardResult:
        """
        Args:
            tournament_id: The tournament to rank

        Returns:
            LeaderboardResult with entries ordered by rank. A tournament without
            scores gives an empty leaderboard.

        Raises:
            TournamentNotFoundError: The tournament does not exist
            SettingsNotFoundError: There are scores but no fee settings to price the pots
        """
        with self.store.atomic():
            tournament = self.store.get_tournament(tournament_id)
            rows = self.store.get_scores_for_tournament(tournament_id)
            if not rows:
                return LeaderboardResult(tournament_id)

            settings = self.store.get_settings()
            paid_count = self.store.get_paid_participant_count(tournament_id)

        totals = aggregate_players(rows)
        skins = award_skins(rows)

        total_pot = paid_count * settings.fee_for(tournament.number_of_holes)
        quota_prize_pot = total_pot * QUOTA_POT_SHARE
        skin_prize_pot = (total_pot - quota_prize_pot) * SKINS_POT_SHARE
        total_skins = sum(len(holes) for holes in skins.values())
        skin_price = skin_prize_pot / total_skins if total_skins > 0 else Decimal(0)

        result = LeaderboardResult(tournament_id, total_pot, quota_prize_pot, skin_prize_pot, skin_price,
                                   total_skins)
        for player, (rank, quota_prize) in zip(totals, pool_quota_prizes(totals, quota_prize_pot)):
            skin_holes = skins.get(player.player_id, [])
            skin_prize = floor_currency(len(skin_holes) * skin_prize_pot / total_skins) if skin_holes else 0
            result.entries.append(LeaderboardEntry(rank, player, skin_holes, quota_prize, skin_prize))

        logger.info("Leaderboard computed", tournament_id=tournament_id, players=len(result.entries),
                    total_pot=str(total_pot), total_skins=total_skins)
        return result
