"""
Demo races loaded by RacesRepository.init().

The data is fixed so listings are predictable: 100 races over 10
meetings, 54 of them visible, with meeting 5 holding 15 races of
which 5 are visible. Start times are spread an hour apart around the
time of seeding, so roughly half the races are open.
"""

from datetime import datetime, timedelta
from typing import List

VENUES = [
    "Flemington",
    "Randwick",
    "Caulfield",
    "Eagle Farm",
    "Morphettville",
    "Ascot",
    "Moonee Valley",
    "Rosehill",
    "Doomben",
    "Ellerslie",
]

# meeting_id -> (races at the meeting, how many of them are visible)
MEETINGS = {
    1: (9, 5),
    2: (10, 6),
    3: (8, 4),
    4: (11, 6),
    5: (15, 5),
    6: (9, 5),
    7: (10, 6),
    8: (12, 7),
    9: (8, 5),
    10: (8, 5),
}


def race_rows(now: datetime) -> List[tuple]:
    """Build the insert parameters for every demo race."""
    rows = []
    race_id = 1
    for meeting_id, (count, visible) in MEETINGS.items():
        venue = VENUES[meeting_id - 1]
        for number in range(1, count + 1):
            start = now + timedelta(hours=race_id - 50)
            rows.append(
                (
                    race_id,
                    meeting_id,
                    f"{venue} Race {number}",
                    number,
                    1 if number <= visible else 0,
                    start,
                )
            )
            race_id += 1
    return rows
