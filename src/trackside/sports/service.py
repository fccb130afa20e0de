from typing import List, Optional

from trackside.listing import OrderBy
from trackside.sports.models import Event, EventFilter
from trackside.sports.repository import EventsRepository


class SportsService:
    """Sporting event use cases consumed by the HTTP layer and the CLI."""

    def __init__(self, repository: EventsRepository):
        self.repository = repository

    def list_events(
        self,
        event_filter: Optional[EventFilter] = None,
        order_by: Optional[OrderBy] = None,
        timeout: Optional[float] = None,
    ) -> List[Event]:
        return self.repository.list(event_filter, order_by, timeout=timeout)
