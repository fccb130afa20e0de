from dataclasses import dataclass
from datetime import datetime

from trackside.listing import Status


@dataclass(frozen=True)
class EventFilter:
    """Optional predicates for listing sporting events."""

    visible_only: bool = False


@dataclass(frozen=True)
class Event:
    id: int
    name: str
    address: str
    visible: bool
    advertised_start_time: datetime
    status: Status

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "visible": self.visible,
            "advertised_start_time": self.advertised_start_time.isoformat(),
            "status": self.status.value,
        }
