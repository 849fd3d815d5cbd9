"""Result entities returned by the search engine."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..value_objects.match_mode import MatchMode, MatchType
from .vehicle import ParkingDuration, SpotSnapshot, VehicleSnapshot


@dataclass(frozen=True)
class SpotLocation:
    """Where a vehicle is parked."""

    floor: int
    bay: int
    spot_number: int
    type: str
    features: List[str] = field(default_factory=list)

    @classmethod
    def from_spot(cls, spot: Optional[SpotSnapshot]) -> Optional['SpotLocation']:
        if spot is None:
            return None
        return cls(
            floor=spot.floor,
            bay=spot.bay,
            spot_number=spot.spot_number,
            type=spot.type,
            features=list(spot.features)
        )


@dataclass(frozen=True)
class VehicleDetail:
    """Vehicle snapshot enriched with duration and spot location."""

    license_plate: str
    spot_id: str
    check_in_time: datetime
    vehicle_type: str
    status: str
    current_duration: ParkingDuration
    spot: Optional[SpotLocation] = None
    rate_type: Optional[str] = None
    total_amount: Optional[float] = None
    is_paid: bool = False

    @classmethod
    def from_snapshot(cls,
                      vehicle: VehicleSnapshot,
                      spot: Optional[SpotSnapshot],
                      now: datetime) -> 'VehicleDetail':
        return cls(
            license_plate=vehicle.license_plate,
            spot_id=vehicle.spot_id,
            check_in_time=vehicle.check_in_time,
            vehicle_type=vehicle.vehicle_type,
            status=vehicle.status,
            current_duration=ParkingDuration.between(vehicle.check_in_time, now),
            spot=SpotLocation.from_spot(spot),
            rate_type=vehicle.rate_type,
            total_amount=vehicle.total_amount,
            is_paid=vehicle.is_paid
        )


@dataclass(frozen=True)
class VehicleLookupResult:
    """Result of an exact plate lookup."""

    found: bool
    vehicle: Optional[VehicleDetail] = None
    message: Optional[str] = None

    @classmethod
    def not_found(cls) -> 'VehicleLookupResult':
        return cls(found=False, vehicle=None, message="Vehicle not found")


@dataclass(frozen=True)
class EnrichedMatch:
    """A ranked plate match with its vehicle and spot detail."""

    license_plate: str
    score: float
    match_type: MatchType
    vehicle: VehicleDetail

    @property
    def spot(self) -> Optional[SpotLocation]:
        return self.vehicle.spot


@dataclass(frozen=True)
class VehicleSearchResults:
    """Ranked search response, or a rejection carrying validation errors."""

    matches: List[EnrichedMatch]
    count: int
    search_term: Optional[str] = None
    mode: Optional[MatchMode] = None
    errors: Optional[List[str]] = None

    @classmethod
    def rejected(cls, errors: List[str]) -> 'VehicleSearchResults':
        """Zero-result response for a term that failed validation."""
        return cls(matches=[], count=0, errors=list(errors))

    @classmethod
    def from_matches(cls,
                     matches: List[EnrichedMatch],
                     search_term: str,
                     mode: MatchMode) -> 'VehicleSearchResults':
        return cls(matches=matches, count=len(matches), search_term=search_term, mode=mode)


@dataclass(frozen=True)
class AvailableSpotInfo:
    """An unoccupied spot matching the requested criteria."""

    spot_id: str
    floor: int
    bay: int
    spot_number: int
    type: str
    status: str
    features: List[str] = field(default_factory=list)

    @classmethod
    def from_spot(cls, spot: SpotSnapshot) -> 'AvailableSpotInfo':
        return cls(
            spot_id=spot.id,
            floor=spot.floor,
            bay=spot.bay,
            spot_number=spot.spot_number,
            type=spot.type,
            status=spot.status,
            features=list(spot.features)
        )
