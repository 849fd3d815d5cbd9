from .scored_match import FuzzyMatch, ScoredMatch
from .search_results import (
    AvailableSpotInfo,
    EnrichedMatch,
    SpotLocation,
    VehicleDetail,
    VehicleLookupResult,
    VehicleSearchResults,
)
from .vehicle import ParkingDuration, SpotSnapshot, VehicleSnapshot

__all__ = [
    "FuzzyMatch",
    "ScoredMatch",
    "AvailableSpotInfo",
    "EnrichedMatch",
    "SpotLocation",
    "VehicleDetail",
    "VehicleLookupResult",
    "VehicleSearchResults",
    "ParkingDuration",
    "SpotSnapshot",
    "VehicleSnapshot",
]
