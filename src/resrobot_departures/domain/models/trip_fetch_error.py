"""Error raised when trips for a route cannot be fetched."""


class TripFetchError(RuntimeError):
    """Transport-level failure: network error, non-2xx response or undecodable payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
