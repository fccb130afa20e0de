"""
Pieces shared by the race and event listings.

Ordering is restricted to a per-table set of sortable columns, so the
order-by property never reaches the query text unless it names one of
them. Status is derived from the advertised start time every time a
row is mapped and is never stored.
"""

import enum
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Optional

from trackside.errors import ConversionError, InvalidOrderByError

logger = logging.getLogger(__name__)


class Status(str, enum.Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


@dataclass(frozen=True)
class OrderBy:
    """Requested ordering: a column name and a direction."""

    property: str = ""
    asc: bool = True


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def apply_order_by(query: str, order_by: Optional[OrderBy], sortable: Iterable[str]) -> str:
    """
    Append an ORDER BY clause for the requested property.

    A missing order or an empty property leaves the query untouched.
    Properties outside ``sortable`` raise InvalidOrderByError.
    """
    if order_by is None or not order_by.property:
        return query

    sortable = frozenset(sortable)
    column = order_by.property
    if column not in sortable:
        logger.warning("Rejected order by property %r", order_by.property)
        raise InvalidOrderByError(order_by.property, sortable)

    direction = "ASC" if order_by.asc else "DESC"
    return f"{query} ORDER BY {column} {direction}"


def to_timestamp(value) -> datetime:
    """
    Convert a stored advertised start time into an aware UTC datetime.

    Naive datetimes are taken to be UTC. ISO 8601 strings are parsed.
    Anything else raises ConversionError.
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as e:
            raise ConversionError(f"invalid advertised start time {value!r}") from e

    if not isinstance(value, datetime):
        raise ConversionError(
            f"invalid advertised start time {value!r} ({type(value).__name__})"
        )

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def derive_status(advertised_start_time: datetime, now: datetime) -> Status:
    """OPEN while now is strictly before the advertised start, CLOSED after."""
    if now < advertised_start_time:
        return Status.OPEN
    return Status.CLOSED
