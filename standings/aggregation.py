from collections import defaultdict
from typing import Dict, Iterable, List

from standings.store import ScoreRow


class PlayerTotals:
    """One player's summed scores for a single tournament"""

    def __init__(self, player_id, name, email, player_quota):
        self.player_id = player_id
        self.name = name
        self.email = email
        self.player_quota = player_quota
        self.total_quota_points = 0
        self.total_strokes = 0
        self.quota_diff = 0
        self.hole_ids = set()

    def add(self, row: ScoreRow):
        self.total_quota_points += row.quota
        self.total_strokes += row.score
        self.quota_diff += row.score - row.quota
        self.hole_ids.add(row.hole_id)

    @property
    def holes_played(self):
        return len(self.hole_ids)

    @property
    def over_under(self):
        return self.total_quota_points - self.player_quota


def aggregate_players(rows: Iterable[ScoreRow]) -> List[PlayerTotals]:
    """
    Sum each player's rows, ordered best first: over/under descending, then
    name and player id ascending. Players without rows never appear.
    """
    totals: Dict[int, PlayerTotals] = {}
    for row in rows:
        player = totals.get(row.player_id)
        if player is None:
            player = PlayerTotals(row.player_id, row.player_name, row.player_email, row.player_quota)
            totals[row.player_id] = player
        player.add(row)

    return sorted(totals.values(), key=lambda p: (-p.over_under, p.name, p.player_id))


def group_by_hole(rows: Iterable[ScoreRow]) -> Dict[int, List[ScoreRow]]:
    holes = defaultdict(list)
    for row in rows:
        holes[row.hole_id].append(row)
    return holes
