import logging
from typing import Callable, List, Optional, Tuple

from trackside.db import Database
from trackside.errors import StoreError
from trackside.listing import OrderBy, apply_order_by, derive_status, to_timestamp, utcnow
from trackside.racing import queries, seed
from trackside.racing.models import Race, RaceFilter
from trackside.seeding import SeedGuard, SeedState

logger = logging.getLogger(__name__)


class RacesRepository:
    """
    Repository for race data access.
    Encapsulates all SQL and queries for the races table.
    """

    def __init__(self, database: Database, clock: Callable = utcnow):
        self.database = database
        self.clock = clock
        self._seed_guard = SeedGuard("races")

    @property
    def seed_state(self) -> SeedState:
        return self._seed_guard.state

    def init(self) -> bool:
        """Create and seed the races table, at most once per repository."""
        return self._seed_guard.run(self._seed)

    def list(
        self,
        race_filter: Optional[RaceFilter] = None,
        order_by: Optional[OrderBy] = None,
        timeout: Optional[float] = None,
    ) -> List[Race]:
        """List races matching the filter, in the requested order."""
        query, params = self.apply_filter(queries.RACES_LIST, race_filter)
        query = self.apply_order_by(query, order_by)

        try:
            rows = self.database.fetch_all(query, tuple(params), timeout=timeout)
        except StoreError as e:
            raise type(e)(f"listing races: {e}") from e

        return self.scan_races(rows)

    def get(self, race_id: int, timeout: Optional[float] = None) -> Optional[Race]:
        """Get a race by ID, or None when there is no such race."""
        query = queries.RACES_LIST + " WHERE id = %s"

        try:
            row = self.database.fetch_one(query, (race_id,), timeout=timeout)
        except StoreError as e:
            raise type(e)(f"getting race {race_id}: {e}") from e

        if row is None:
            return None
        return self.scan_race(row)

    @staticmethod
    def apply_filter(query: str, race_filter: Optional[RaceFilter]) -> Tuple[str, List]:
        """
        Append a WHERE clause for the filter.

        The meeting clause always comes before the visibility clause.
        """
        clauses = []
        params = []

        if race_filter is None:
            return query, params

        if race_filter.meeting_ids:
            placeholders = ",".join(["%s"] * len(race_filter.meeting_ids))
            clauses.append(f"meeting_id IN ({placeholders})")
            params.extend(race_filter.meeting_ids)

        if race_filter.visible_only:
            clauses.append("visible = 1")

        if clauses:
            query += " WHERE " + " AND ".join(clauses)

        return query, params

    @staticmethod
    def apply_order_by(query: str, order_by: Optional[OrderBy]) -> str:
        return apply_order_by(query, order_by, queries.RACES_SORTABLE)

    def scan_races(self, rows: List[dict]) -> List[Race]:
        # One clock reading per call so every race in a listing agrees on "now"
        now = self.clock()
        return [self.scan_race(row, now) for row in rows]

    def scan_race(self, row: dict, now=None) -> Race:
        advertised_start = to_timestamp(row["advertised_start_time"])
        return Race(
            id=row["id"],
            meeting_id=row["meeting_id"],
            name=row["name"],
            number=row["number"],
            visible=bool(row["visible"]),
            advertised_start_time=advertised_start,
            status=derive_status(advertised_start, now or self.clock()),
        )

    def _seed(self) -> None:
        self.database.execute(queries.CREATE_RACES_TABLE)
        inserted = self.database.execute_many(queries.INSERT_RACE, seed.race_rows(self.clock()))
        logger.info("Inserted %s demo races", inserted)
