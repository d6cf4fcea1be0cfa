"""Instant data model: a point in time as seconds from the reference epoch."""

from dataclasses import dataclass
from datetime import datetime, timezone

from ..constants import REFERENCE_EPOCH

# Seconds between the Unix epoch and the reference epoch.
_REFERENCE_UNIX_OFFSET = REFERENCE_EPOCH.timestamp()


@dataclass(frozen=True, order=True)
class Instant:
    """A timezone-independent point in time.

    The value is a floating-point offset in seconds from 2001-01-01 UTC.
    Negative offsets are instants before the reference epoch.
    """

    offset: float = 0.0

    def __post_init__(self):
        """Normalize the offset to a float."""
        object.__setattr__(self, "offset", float(self.offset))

    @classmethod
    def epoch(cls) -> "Instant":
        """Get the reference epoch itself."""
        return cls(0.0)

    @classmethod
    def now(cls) -> "Instant":
        """Get the current instant."""
        return cls.from_datetime(datetime.now(timezone.utc))

    @classmethod
    def from_datetime(cls, value: datetime) -> "Instant":
        """Create an instant from a datetime. Naive datetimes are read as UTC."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return cls((value - REFERENCE_EPOCH).total_seconds())

    @classmethod
    def from_unix_timestamp(cls, timestamp: float) -> "Instant":
        """Create an instant from seconds since 1970-01-01 UTC."""
        return cls(timestamp - _REFERENCE_UNIX_OFFSET)

    @property
    def unix_timestamp(self) -> float:
        """Get seconds since 1970-01-01 UTC."""
        return self.offset + _REFERENCE_UNIX_OFFSET

    def to_datetime(self) -> datetime:
        """Convert to an aware UTC datetime (microsecond precision)."""
        return datetime.fromtimestamp(self.unix_timestamp, tz=timezone.utc)
