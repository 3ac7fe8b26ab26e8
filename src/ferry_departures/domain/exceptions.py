"""Domain exceptions."""


class FerryError(Exception):
    """Base class for all ferry departure errors."""


class NotFoundError(FerryError):
    """Raised when a route or direction is not part of the catalog."""


class InvalidDirectionError(FerryError):
    """Raised when a caller asks for a direction the route does not have."""

    def __init__(self, route_id: str, requested: str, valid_directions: list[str]) -> None:
        super().__init__(
            f"Unknown direction '{requested}' for route '{route_id}'. "
            f"Valid directions: {', '.join(valid_directions)} or 'auto'"
        )
        self.route_id = route_id
        self.requested = requested
        self.valid_directions = valid_directions


class UpstreamError(FerryError):
    """Base class for failures of a live upstream feed."""


class UpstreamTimeout(UpstreamError):
    """A live feed did not answer within its time bound."""


class UpstreamMalformed(UpstreamError):
    """A live feed answered but the body did not have the expected shape."""


class UpstreamUnavailable(UpstreamError):
    """A live feed could not be reached or returned a non-success status."""
