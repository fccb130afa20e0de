"""
Racing

Read-only access to races: filtered, ordered listings and single-race
lookups, each race carrying a status derived at read time.
"""

from trackside.racing.models import Race, RaceFilter
from trackside.racing.repository import RacesRepository
from trackside.racing.service import RacingService

__all__ = ["Race", "RaceFilter", "RacesRepository", "RacingService"]
