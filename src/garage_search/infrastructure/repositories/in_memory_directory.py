"""In-memory vehicle and spot directories."""

from typing import Dict, Iterable, List, Optional

import structlog

from ...domain.entities.vehicle import SpotSnapshot, VehicleSnapshot
from ...domain.repositories import ISpotDirectory, IVehicleDirectory
from ...domain.services.string_matcher import normalize_license_plate

logger = structlog.get_logger()


class InMemoryVehicleDirectory(IVehicleDirectory):
    """Vehicle directory backed by a dict keyed on normalized plate.

    Iteration follows insertion (check-in) order.
    """

    def __init__(self, vehicles: Optional[Iterable[VehicleSnapshot]] = None):
        self._vehicles: Dict[str, VehicleSnapshot] = {}
        for vehicle in vehicles or []:
            self.add(vehicle)

    def add(self, vehicle: VehicleSnapshot) -> None:
        """Register or replace a vehicle record."""
        self._vehicles[normalize_license_plate(vehicle.license_plate)] = vehicle

    def remove(self, license_plate: str) -> Optional[VehicleSnapshot]:
        """Drop a vehicle record, returning it if present."""
        return self._vehicles.pop(normalize_license_plate(license_plate), None)

    async def find_by_plate(self, license_plate: str) -> Optional[VehicleSnapshot]:
        return self._vehicles.get(normalize_license_plate(license_plate))

    async def find_currently_parked(self) -> List[VehicleSnapshot]:
        parked = [v for v in self._vehicles.values() if v.status == "parked"]

        logger.debug("Parked vehicles listed", count=len(parked))
        return parked

    async def find_by_spot_id(self, spot_id: str) -> Optional[VehicleSnapshot]:
        for vehicle in self._vehicles.values():
            if vehicle.spot_id == spot_id and vehicle.status == "parked":
                return vehicle
        return None

    def __len__(self) -> int:
        return len(self._vehicles)


class InMemorySpotDirectory(ISpotDirectory):
    """Spot directory backed by a dict keyed on spot id."""

    def __init__(self, spots: Optional[Iterable[SpotSnapshot]] = None):
        self._spots: Dict[str, SpotSnapshot] = {}
        for spot in spots or []:
            self.add(spot)

    def add(self, spot: SpotSnapshot) -> None:
        """Register or replace a spot record."""
        self._spots[spot.id] = spot

    async def find_by_id(self, spot_id: str) -> Optional[SpotSnapshot]:
        return self._spots.get(spot_id)

    async def find_by_floor(self, floor: int) -> List[SpotSnapshot]:
        return [s for s in self._spots.values() if s.floor == floor]

    async def find_by_floor_and_bay(self, floor: int, bay: int) -> List[SpotSnapshot]:
        return [s for s in self._spots.values() if s.floor == floor and s.bay == bay]

    async def find_available(self) -> List[SpotSnapshot]:
        available = [s for s in self._spots.values() if s.is_available]

        logger.debug("Available spots listed", count=len(available))
        return available

    def __len__(self) -> int:
        return len(self._spots)
