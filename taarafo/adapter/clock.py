"""System clock adapter."""

from datetime import datetime, timezone

from taarafo.domain.clock import Clock


class SystemClock(Clock):
    """Clock backed by the host's wall clock, always in UTC."""

    def get_current_time(self) -> datetime:
        return datetime.now(timezone.utc)
