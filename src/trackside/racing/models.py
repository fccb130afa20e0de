from dataclasses import dataclass
from datetime import datetime

from trackside.listing import Status


@dataclass(frozen=True)
class RaceFilter:
    """
    Optional predicates for listing races.

    An empty ``meeting_ids`` and ``visible_only=False`` constrain nothing.
    ``meeting_ids`` keeps the caller's order so bound parameters are stable.
    """

    meeting_ids: tuple = ()
    visible_only: bool = False

    def __post_init__(self):
        meeting_ids = tuple(self.meeting_ids)
        for meeting_id in meeting_ids:
            if isinstance(meeting_id, bool) or not isinstance(meeting_id, int):
                raise ValueError(f"meeting id must be an integer, got {meeting_id!r}")
        # Drop duplicates, keep first-seen order
        object.__setattr__(self, "meeting_ids", tuple(dict.fromkeys(meeting_ids)))


@dataclass(frozen=True)
class Race:
    id: int
    meeting_id: int
    name: str
    number: int
    visible: bool
    advertised_start_time: datetime
    status: Status

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "meeting_id": self.meeting_id,
            "name": self.name,
            "number": self.number,
            "visible": self.visible,
            "advertised_start_time": self.advertised_start_time.isoformat(),
            "status": self.status.value,
        }
