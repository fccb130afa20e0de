import logging
from typing import Callable, List, Optional, Tuple

from trackside.db import Database
from trackside.errors import StoreError
from trackside.listing import OrderBy, apply_order_by, derive_status, to_timestamp, utcnow
from trackside.seeding import SeedGuard, SeedState
from trackside.sports import queries, seed
from trackside.sports.models import Event, EventFilter

logger = logging.getLogger(__name__)


class EventsRepository:
    """
    Repository for sporting event data access.
    Encapsulates all SQL and queries for the events table.
    """

    def __init__(self, database: Database, clock: Callable = utcnow):
        self.database = database
        self.clock = clock
        self._seed_guard = SeedGuard("events")

    @property
    def seed_state(self) -> SeedState:
        return self._seed_guard.state

    def init(self) -> bool:
        """Create and seed the events table, at most once per repository."""
        return self._seed_guard.run(self._seed)

    def list(
        self,
        event_filter: Optional[EventFilter] = None,
        order_by: Optional[OrderBy] = None,
        timeout: Optional[float] = None,
    ) -> List[Event]:
        """List events matching the filter, in the requested order."""
        query, params = self.apply_filter(queries.EVENTS_LIST, event_filter)
        query = self.apply_order_by(query, order_by)

        try:
            rows = self.database.fetch_all(query, tuple(params), timeout=timeout)
        except StoreError as e:
            raise type(e)(f"listing events: {e}") from e

        now = self.clock()
        return [self.scan_event(row, now) for row in rows]

    @staticmethod
    def apply_filter(query: str, event_filter: Optional[EventFilter]) -> Tuple[str, List]:
        clauses = []
        params = []

        if event_filter is None:
            return query, params

        if event_filter.visible_only:
            clauses.append("visible = 1")

        if clauses:
            query += " WHERE " + " AND ".join(clauses)

        return query, params

    @staticmethod
    def apply_order_by(query: str, order_by: Optional[OrderBy]) -> str:
        return apply_order_by(query, order_by, queries.EVENTS_SORTABLE)

    def scan_event(self, row: dict, now=None) -> Event:
        advertised_start = to_timestamp(row["advertised_start_time"])
        return Event(
            id=row["id"],
            name=row["name"],
            address=row["address"],
            visible=bool(row["visible"]),
            advertised_start_time=advertised_start,
            status=derive_status(advertised_start, now or self.clock()),
        )

    def _seed(self) -> None:
        self.database.execute(queries.CREATE_EVENTS_TABLE)
        inserted = self.database.execute_many(queries.INSERT_EVENT, seed.event_rows(self.clock()))
        logger.info("Inserted %s demo events", inserted)
