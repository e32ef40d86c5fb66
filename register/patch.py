from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)


@dataclass
class PlayerPatch:
    """
    A partial update to a Player. Only the fields that were supplied are
    written; a field left as None is not touched.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    sex: Optional[str] = None
    quota: Optional[int] = None
    fedex_points: Optional[int] = None
    tournaments_played: Optional[int] = None
    prize_money: Optional[Decimal] = None
    active: Optional[bool] = None
    role: Optional[str] = None

    @classmethod
    def from_data(cls, data):
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in names})

    def changes(self):
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}

    def is_empty(self):
        return len(self.changes()) == 0

    def apply(self, player):
        changes = self.changes()
        if not changes:
            return player

        for name, value in changes.items():
            setattr(player, name, value)
        player.save(update_fields=list(changes.keys()))

        logger.info("Player updated", player_id=player.id, fields=sorted(changes.keys()))
        return player
