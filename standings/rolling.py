from datetime import date
from typing import List, NamedTuple, Optional

from standings.models import SEASON_LEDGER, SKINS_LEDGER

LEDGER_CAPACITY = {
    SEASON_LEDGER: 7,
    SKINS_LEDGER: 20,
}


class LedgerEntry(NamedTuple):
    date: date
    points: int
    quota_diff: int

    def to_dict(self):
        return {
            "date": self.date.isoformat(),
            "points": self.points,
            "quota_diff": self.quota_diff,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(date=date.fromisoformat(data["date"]), points=data["points"], quota_diff=data["quota_diff"])


class RollingLedger:
    """
    A fixed-width history of tournament results, most recent first.

    Slot 1 (index 0) holds the newest result. Pushing a result moves every
    entry one slot older and drops whatever sat in the last slot. Empty slots
    are None.
    """

    def __init__(self, capacity: int, slots: Optional[List[Optional[LedgerEntry]]] = None):
        if capacity < 1:
            raise ValueError("A ledger needs at least one slot")
        self.capacity = capacity
        self.slots = (list(slots or []) + [None] * capacity)[:capacity]

    @classmethod
    def for_kind(cls, kind: str):
        return cls(LEDGER_CAPACITY[kind])

    @classmethod
    def from_json(cls, capacity: int, data: list):
        return cls(capacity, [LedgerEntry.from_dict(slot) if slot else None for slot in data])

    def to_json(self) -> list:
        return [slot.to_dict() if slot else None for slot in self.slots]

    def push(self, entry: LedgerEntry):
        self.slots = [entry] + self.slots[:-1]

    @property
    def entries(self) -> List[LedgerEntry]:
        return [slot for slot in self.slots if slot is not None]

    def __len__(self):
        return len(self.entries)

    def __repr__(self):
        return "RollingLedger(capacity={}, entries={})".format(self.capacity, len(self))
