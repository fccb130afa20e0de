"""SQL for the events table."""

EVENTS_LIST = """
    SELECT
        id,
        name,
        address,
        visible,
        advertised_start_time
    FROM events
"""

EVENTS_SORTABLE = frozenset(
    ("id", "name", "address", "visible", "advertised_start_time")
)

CREATE_EVENTS_TABLE = """
    CREATE TABLE IF NOT EXISTS events (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL,
        address TEXT NOT NULL,
        visible INTEGER NOT NULL DEFAULT 0,
        advertised_start_time TIMESTAMPTZ NOT NULL
    )
"""

INSERT_EVENT = """
    INSERT INTO events (id, name, address, visible, advertised_start_time)
    VALUES (%s, %s, %s, %s, %s)
    ON CONFLICT (id) DO NOTHING
"""
