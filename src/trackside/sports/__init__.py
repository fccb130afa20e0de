"""
Sports

Read-only listings of sporting events with a status derived at read time.
"""

from trackside.sports.models import Event, EventFilter
from trackside.sports.repository import EventsRepository
from trackside.sports.service import SportsService

__all__ = ["Event", "EventFilter", "EventsRepository", "SportsService"]
