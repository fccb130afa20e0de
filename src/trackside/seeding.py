"""
Run-once guard for seeding demo data.

The guard moves NOT_SEEDED -> SEEDED or NOT_SEEDED -> FAILED exactly
once. Concurrent first callers block on the lock until the seed has
finished, and only the caller that ran the seed sees its error.
"""

import enum
import logging
import threading
from typing import Callable

from trackside.errors import SeedError

logger = logging.getLogger(__name__)


class SeedState(str, enum.Enum):
    NOT_SEEDED = "not_seeded"
    SEEDED = "seeded"
    FAILED = "failed"


class SeedGuard:
    def __init__(self, name: str):
        self.name = name
        self._lock = threading.Lock()
        self._state = SeedState.NOT_SEEDED

    @property
    def state(self) -> SeedState:
        return self._state

    def run(self, seed: Callable[[], None]) -> bool:
        """
        Run ``seed`` if it has never been attempted.

        Returns True when this call performed the seed, False when an
        earlier call already did (successfully or not). A failing seed
        raises SeedError to this caller and is not retried.
        """
        with self._lock:
            if self._state is not SeedState.NOT_SEEDED:
                logger.debug("Seeding %s already attempted (%s)", self.name, self._state.value)
                return False

            try:
                seed()
            except Exception as e:
                self._state = SeedState.FAILED
                logger.error("Seeding %s failed: %s", self.name, e)
                raise SeedError(f"seeding {self.name} failed: {e}") from e

            self._state = SeedState.SEEDED
            logger.info("Seeded %s", self.name)
            return True
