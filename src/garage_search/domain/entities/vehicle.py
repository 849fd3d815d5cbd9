"""Vehicle and spot snapshots supplied by the directory collaborators."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional


@dataclass(frozen=True)
class VehicleSnapshot:
    """Read-only view of a parked vehicle record."""

    license_plate: str
    spot_id: str
    check_in_time: datetime
    vehicle_type: str
    status: str = "parked"

    # Billing fields, passed through untouched
    rate_type: Optional[str] = None
    total_amount: Optional[float] = None
    is_paid: bool = False

    def __post_init__(self):
        """Validate entity invariants."""
        if not self.license_plate or not self.license_plate.strip():
            raise ValueError("License plate cannot be empty")


@dataclass(frozen=True)
class SpotSnapshot:
    """Read-only view of a parking spot record."""

    id: str
    floor: int
    bay: int
    spot_number: int
    type: str
    status: str = "available"
    features: List[str] = field(default_factory=list)
    current_vehicle: Optional[str] = None

    def has_feature(self, feature: str) -> bool:
        """Check if the spot offers a feature."""
        return feature in self.features

    @property
    def is_available(self) -> bool:
        return self.status == "available"


@dataclass(frozen=True)
class ParkingDuration:
    """Whole hours and minutes elapsed since check-in."""

    hours: int
    minutes: int

    @classmethod
    def between(cls, check_in_time: datetime, now: datetime) -> 'ParkingDuration':
        """Compute the duration from check-in to ``now``.

        Naive timestamps are treated as UTC.
        """
        if check_in_time.tzinfo is None:
            check_in_time = check_in_time.replace(tzinfo=timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        total_minutes = max(0, int((now - check_in_time).total_seconds() // 60))
        return cls(hours=total_minutes // 60, minutes=total_minutes % 60)
