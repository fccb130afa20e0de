"""SQL for the races table."""

RACES_LIST = """
    SELECT
        id,
        meeting_id,
        name,
        number,
        visible,
        advertised_start_time
    FROM races
"""

RACES_COLUMNS = (
    "id",
    "meeting_id",
    "name",
    "number",
    "visible",
    "advertised_start_time",
)

# Columns a listing may be ordered by
RACES_SORTABLE = frozenset(RACES_COLUMNS)

CREATE_RACES_TABLE = """
    CREATE TABLE IF NOT EXISTS races (
        id INTEGER PRIMARY KEY,
        meeting_id INTEGER NOT NULL,
        name TEXT NOT NULL,
        number INTEGER NOT NULL,
        visible INTEGER NOT NULL DEFAULT 0,
        advertised_start_time TIMESTAMPTZ NOT NULL
    )
"""

INSERT_RACE = """
    INSERT INTO races (id, meeting_id, name, number, visible, advertised_start_time)
    VALUES (%s, %s, %s, %s, %s, %s)
    ON CONFLICT (id) DO NOTHING
"""
