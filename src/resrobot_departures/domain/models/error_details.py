"""Fetch failure details used for per-route error logging."""

from pydantic import BaseModel, ConfigDict

RATE_LIMIT_STATUS = 429


class ErrorDetails(BaseModel):
    """Why a trip fetch failed: HTTP status (when known) and a short reason."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str

    @property
    def is_rate_limited(self) -> bool:
        """True when ResRobot rejected the request for exceeding the quota."""
        return self.status_code == RATE_LIMIT_STATUS

    def describe(self) -> str:
        """One-line summary, e.g. ``"Service unavailable (status: 503)"``."""
        return f"{self.reason} (status: {self.status_code})"
