from flask import request

from trackside.listing import OrderBy


class InvalidArgument(ValueError):
    """A query argument could not be parsed."""


def flag(name: str, default: bool = False) -> bool:
    value = request.args.get(name)
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes")


def order_by() -> OrderBy | None:
    """Build an OrderBy from the order_by and asc query arguments."""
    prop = request.args.get("order_by", "")
    if not prop:
        return None
    return OrderBy(property=prop, asc=flag("asc", default=True))


def int_list(name: str) -> list[int]:
    values = []
    for raw in request.args.getlist(name):
        # Accept both ?meeting_id=1&meeting_id=2 and ?meeting_id=1,2
        for part in raw.split(","):
            part = part.strip()
            if not part:
                continue
            try:
                values.append(int(part))
            except ValueError:
                raise InvalidArgument(f"{name} must be an integer, got {part!r}") from None
    return values
