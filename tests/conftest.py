from datetime import datetime, timezone

import pytest

from garage_search.application.search_engine import SearchEngine
from garage_search.config.settings import Settings
from garage_search.domain.entities.vehicle import SpotSnapshot, VehicleSnapshot
from garage_search.infrastructure.repositories.in_memory_directory import (
    InMemorySpotDirectory,
    InMemoryVehicleDirectory,
)

NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
CHECK_IN = datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc)


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingVehicleDirectory(InMemoryVehicleDirectory):
    """Vehicle directory that records full scans."""

    def __init__(self, vehicles=None):
        super().__init__(vehicles)
        self.parked_calls = 0

    async def find_currently_parked(self):
        self.parked_calls += 1
        return await super().find_currently_parked()


class FailingVehicleDirectory(InMemoryVehicleDirectory):
    """Vehicle directory whose backing store is down."""

    async def find_by_plate(self, license_plate):
        raise RuntimeError("database offline")

    async def find_currently_parked(self):
        raise RuntimeError("database offline")

    async def find_by_spot_id(self, spot_id):
        raise RuntimeError("database offline")


def make_vehicle(plate: str, spot_id: str, **kwargs) -> VehicleSnapshot:
    defaults = dict(check_in_time=CHECK_IN, vehicle_type="standard", status="parked")
    defaults.update(kwargs)
    return VehicleSnapshot(license_plate=plate, spot_id=spot_id, **defaults)


def make_spot(spot_id: str, floor: int, bay: int, number: int, **kwargs) -> SpotSnapshot:
    defaults = dict(type="standard", status="available", features=[])
    defaults.update(kwargs)
    return SpotSnapshot(id=spot_id, floor=floor, bay=bay, spot_number=number, **defaults)


@pytest.fixture
def settings():
    return Settings(log_format="console")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def spots():
    return [
        make_spot("F1-B1-S1", 1, 1, 1, status="occupied", current_vehicle="ABC123"),
        make_spot("F1-B1-S2", 1, 1, 2, status="occupied", current_vehicle="XABC9"),
        make_spot("F1-B2-S1", 1, 2, 1, status="occupied", current_vehicle="ZZZ000"),
        make_spot("F2-B1-S1", 2, 1, 1, status="occupied", type="compact", current_vehicle="AB1234"),
        make_spot("F1-B2-S2", 1, 2, 2, features=["ev_charging"]),
        make_spot("F2-B1-S2", 2, 1, 2, type="compact"),
        make_spot("F2-B2-S1", 2, 2, 1, type="oversized", features=["ev_charging", "covered"]),
    ]


@pytest.fixture
def vehicles():
    return [
        make_vehicle("ABC123", "F1-B1-S1", rate_type="hourly"),
        make_vehicle("XABC9", "F1-B1-S2"),
        make_vehicle("ZZZ000", "F1-B2-S1"),
        make_vehicle("AB1234", "F2-B1-S1", vehicle_type="compact"),
    ]


@pytest.fixture
def vehicle_directory(vehicles):
    return CountingVehicleDirectory(vehicles)


@pytest.fixture
def spot_directory(spots):
    return InMemorySpotDirectory(spots)


@pytest.fixture
def engine(vehicle_directory, spot_directory, settings, clock):
    return SearchEngine(
        vehicle_directory=vehicle_directory,
        spot_directory=spot_directory,
        settings=settings,
        clock=clock,
        now=lambda: NOW
    )


@pytest.fixture
def vehicle_factory():
    return make_vehicle


@pytest.fixture
def spot_factory():
    return make_spot
