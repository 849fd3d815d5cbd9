"""Interfaces for the vehicle and spot directories consumed by the engine."""

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities.vehicle import SpotSnapshot, VehicleSnapshot


class IVehicleDirectory(ABC):
    """Interface for read access to vehicle records."""

    @abstractmethod
    async def find_by_plate(self, license_plate: str) -> Optional[VehicleSnapshot]:
        """Exact lookup by normalized license plate."""
        pass

    @abstractmethod
    async def find_currently_parked(self) -> List[VehicleSnapshot]:
        """Return every vehicle currently parked."""
        pass

    @abstractmethod
    async def find_by_spot_id(self, spot_id: str) -> Optional[VehicleSnapshot]:
        """Return the vehicle occupying a spot, if any."""
        pass


class ISpotDirectory(ABC):
    """Interface for read access to spot records."""

    @abstractmethod
    async def find_by_id(self, spot_id: str) -> Optional[SpotSnapshot]:
        pass

    @abstractmethod
    async def find_by_floor(self, floor: int) -> List[SpotSnapshot]:
        pass

    @abstractmethod
    async def find_by_floor_and_bay(self, floor: int, bay: int) -> List[SpotSnapshot]:
        pass

    @abstractmethod
    async def find_available(self) -> List[SpotSnapshot]:
        pass
