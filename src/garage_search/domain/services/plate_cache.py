"""Short-lived cache of currently parked plates for typeahead suggestions."""

import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Iterable, List, Optional

from ...utils.logging import search_logger
from ..entities.vehicle import VehicleSnapshot
from .string_matcher import normalize_license_plate

PlateLoader = Callable[[], Awaitable[Iterable[VehicleSnapshot]]]


@dataclass(frozen=True)
class CacheEntry:
    """A cached vehicle keyed by its normalized plate."""

    plate: str
    vehicle: VehicleSnapshot
    inserted_at: float


class PlateCache:
    """Wholesale-refresh TTL cache mapping normalized plate to vehicle snapshot.

    The whole entry set shares one expiry. The first read after the TTL has
    elapsed discards every entry and reloads them with a single loader call.
    There is no per-plate invalidation.
    """

    def __init__(self,
                 loader: PlateLoader,
                 ttl_seconds: float = 30.0,
                 clock: Callable[[], float] = time.monotonic):
        self._loader = loader
        self.ttl_seconds = ttl_seconds
        self._clock = clock

        self._entries: Dict[str, CacheEntry] = {}
        self._last_refreshed: Optional[float] = None

    @property
    def last_refreshed(self) -> Optional[float]:
        return self._last_refreshed

    def is_expired(self) -> bool:
        """Check if the next read will trigger a rebuild."""
        if self._last_refreshed is None:
            return True
        return self._clock() - self._last_refreshed >= self.ttl_seconds

    async def refresh(self) -> None:
        """Rebuild the whole cache from the loader."""
        start_time = time.time()
        vehicles = await self._loader()

        now = self._clock()
        entries = {}
        for vehicle in vehicles:
            plate = normalize_license_plate(vehicle.license_plate)
            if plate:
                entries[plate] = CacheEntry(plate=plate, vehicle=vehicle, inserted_at=now)

        # Swap in one step; a failed load leaves the previous state intact
        self._entries = entries
        self._last_refreshed = now

        search_logger.log_cache_refresh(
            record_count=len(entries),
            load_time_ms=(time.time() - start_time) * 1000
        )

    async def get_entries(self) -> List[CacheEntry]:
        """Return cached entries in load order, rebuilding if expired."""
        if self.is_expired():
            await self.refresh()
        else:
            search_logger.log_cache_hit(len(self._entries))
        return list(self._entries.values())

    async def get_plates(self) -> List[str]:
        """Return cached normalized plates in load order, rebuilding if expired."""
        return [entry.plate for entry in await self.get_entries()]

    def clear(self) -> None:
        """Drop every entry and force a rebuild on the next read."""
        self._entries = {}
        self._last_refreshed = None
        search_logger.log_cache_cleared()

    def get_stats(self) -> dict:
        """Get cache statistics."""
        age_seconds = None
        if self._last_refreshed is not None:
            age_seconds = round(self._clock() - self._last_refreshed, 3)

        return {
            "record_count": len(self._entries),
            "ttl_seconds": self.ttl_seconds,
            "age_seconds": age_seconds,
            "expired": self.is_expired()
        }

    def __len__(self) -> int:
        return len(self._entries)
