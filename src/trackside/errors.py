"""
Error types raised by the repositories and the store client.

The HTTP layer turns every TracksideError into a generic
"could not complete request" response. InvalidOrderByError is a
ValueError so callers can treat it as bad input.
"""


class TracksideError(Exception):
    """Base class for failures raised inside trackside."""


class StoreError(TracksideError):
    """The underlying query or connection failed."""


class QueryTimeoutError(StoreError):
    """The store did not answer within the allowed time."""


class ConversionError(TracksideError):
    """A stored value could not be converted into its entity field."""


class SeedError(TracksideError):
    """Seeding demo data failed."""


class InvalidOrderByError(ValueError):
    """An order-by property is not one of the sortable columns."""

    def __init__(self, prop: str, allowed):
        self.property = prop
        self.allowed = tuple(sorted(allowed))
        super().__init__(
            f"cannot order by {prop!r}; expected one of: {', '.join(self.allowed)}"
        )
