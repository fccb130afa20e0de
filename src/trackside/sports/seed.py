"""
Demo sporting events loaded by EventsRepository.init().

100 events, 49 of them visible, with start times two hours apart
around the time of seeding.
"""

from datetime import datetime, timedelta
from typing import List

FIXTURES = [
    ("Collingwood vs Carlton", "MCG, Brunton Ave, Richmond VIC 3002"),
    ("Sydney FC vs Melbourne Victory", "Allianz Stadium, Moore Park NSW 2021"),
    ("Broncos vs Storm", "Suncorp Stadium, 40 Castlemaine St, Milton QLD 4064"),
    ("Australia vs India", "Adelaide Oval, War Memorial Dr, North Adelaide SA 5006"),
    ("Wildcats vs Kings", "RAC Arena, 700 Wellington St, Perth WA 6000"),
    ("Brumbies vs Crusaders", "GIO Stadium, Battye St, Bruce ACT 2617"),
    ("Hawks vs Cats", "UTAS Stadium, Invermay Rd, Invermay TAS 7248"),
]

TOTAL_EVENTS = 100
VISIBLE_EVENTS = 49


def event_rows(now: datetime) -> List[tuple]:
    """Build the insert parameters for every demo event."""
    rows = []
    for event_id in range(1, TOTAL_EVENTS + 1):
        name, address = FIXTURES[(event_id - 1) % len(FIXTURES)]
        rows.append(
            (
                event_id,
                f"{name} (Round {(event_id - 1) // len(FIXTURES) + 1})",
                address,
                # Every other event is visible until 49 have been marked
                1 if event_id % 2 == 1 and event_id < 2 * VISIBLE_EVENTS else 0,
                now + timedelta(hours=2 * (event_id - 50)),
            )
        )
    return rows
