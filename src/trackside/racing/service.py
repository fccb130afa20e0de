from typing import List, Optional

from trackside.listing import OrderBy
from trackside.racing.models import Race, RaceFilter
from trackside.racing.repository import RacesRepository


class RacingService:
    """Race use cases consumed by the HTTP layer and the CLI."""

    def __init__(self, repository: RacesRepository):
        self.repository = repository

    def list_races(
        self,
        race_filter: Optional[RaceFilter] = None,
        order_by: Optional[OrderBy] = None,
        timeout: Optional[float] = None,
    ) -> List[Race]:
        return self.repository.list(race_filter, order_by, timeout=timeout)

    def get_race(self, race_id: int, timeout: Optional[float] = None) -> Optional[Race]:
        """Get a single race; None means the race does not exist."""
        return self.repository.get(race_id, timeout=timeout)
