"""Search engine for vehicle and spot lookups."""

import asyncio
import time
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Sequence

import structlog

from ..config.settings import Settings, get_settings
from ..domain.entities.scored_match import ScoredMatch
from ..domain.entities.search_results import (
    AvailableSpotInfo,
    EnrichedMatch,
    VehicleDetail,
    VehicleLookupResult,
    VehicleSearchResults,
)
from ..domain.entities.vehicle import SpotSnapshot, VehicleSnapshot
from ..domain.exceptions import LookupFailedError, MissingArgumentError
from ..domain.repositories import ISpotDirectory, IVehicleDirectory
from ..domain.services.plate_cache import PlateCache
from ..domain.services.string_matcher import (
    get_search_statistics,
    normalize_license_plate,
    search_license_plates,
    validate_search_term,
)
from ..domain.value_objects.search_options import SearchOptions
from ..utils.logging import search_logger

logger = structlog.get_logger()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SearchEngine:
    """Resolves partial or misspelled plates into parked vehicle records.

    Authoritative searches always read the live vehicle directory.
    Typeahead suggestions read from a short-lived PlateCache instead.
    """

    def __init__(self,
                 vehicle_directory: IVehicleDirectory,
                 spot_directory: ISpotDirectory,
                 settings: Optional[Settings] = None,
                 clock: Callable[[], float] = time.monotonic,
                 now: Callable[[], datetime] = _utcnow,
                 plate_cache: Optional[PlateCache] = None):
        self.settings = settings or get_settings()
        self.vehicle_directory = vehicle_directory
        self.spot_directory = spot_directory
        self._now = now

        self.plate_cache = plate_cache or PlateCache(
            loader=vehicle_directory.find_currently_parked,
            ttl_seconds=self.settings.plate_cache_ttl_seconds,
            clock=clock
        )

    async def find_vehicle_by_license_plate(self, license_plate: str) -> VehicleLookupResult:
        """
        Find a vehicle by exact license plate match.

        Raises:
            MissingArgumentError: if no plate was supplied
            LookupFailedError: if a directory lookup fails
        """
        if not isinstance(license_plate, str) or not license_plate.strip():
            raise MissingArgumentError("License plate is required")

        plate = normalize_license_plate(license_plate)
        if not plate:
            return VehicleLookupResult.not_found()

        try:
            vehicle = await self.vehicle_directory.find_by_plate(plate)
            if vehicle is None:
                return VehicleLookupResult.not_found()

            detail = await self._describe_vehicle(vehicle)
        except Exception as e:
            raise self._lookup_failed("find vehicle", e) from e

        return VehicleLookupResult(found=True, vehicle=detail)

    async def search_vehicles(self,
                              search_term: str,
                              options: Optional[SearchOptions] = None) -> VehicleSearchResults:
        """
        Search parked vehicles by partial or fuzzy license plate match.

        Invalid terms never raise; they come back as an empty result carrying
        the validation errors.
        """
        options = options or SearchOptions.from_settings(self.settings)

        validation = validate_search_term(search_term, self.settings.max_search_term_length)
        if not validation.is_valid:
            search_logger.log_search_rejected(search_term, validation.errors)
            return VehicleSearchResults.rejected(validation.errors)

        normalized = validation.normalized
        search_logger.log_search_start(
            normalized, options.mode.value, options.threshold, options.max_results
        )
        start_time = time.time()

        try:
            parked = await self.vehicle_directory.find_currently_parked()
            vehicles_by_plate = self._index_by_plate(parked)

            scored = search_license_plates(
                normalized,
                list(vehicles_by_plate),
                mode=options.mode,
                threshold=options.threshold,
                max_results=options.max_results
            )

            # gather keeps rank order regardless of completion order
            matches = await asyncio.gather(*[
                self._enrich_match(match, vehicles_by_plate[match.license_plate])
                for match in scored
            ])
        except Exception as e:
            raise self._lookup_failed("search vehicles", e) from e

        processing_time_ms = (time.time() - start_time) * 1000
        search_logger.log_search_result(
            get_search_statistics(normalized, scored, processing_time_ms),
            candidates_evaluated=len(vehicles_by_plate)
        )

        return VehicleSearchResults.from_matches(list(matches), normalized, options.mode)

    async def find_vehicles_by_location(self,
                                        floor: Optional[int] = None,
                                        bay: Optional[int] = None,
                                        spot_id: Optional[str] = None) -> List[VehicleDetail]:
        """
        Find vehicles in a specific spot, bay or floor.

        The most specific criterion wins: spot, then floor and bay, then
        floor. With no criteria every parked vehicle is returned. A bay
        without a floor is ignored.
        """
        try:
            if spot_id:
                vehicle = await self.vehicle_directory.find_by_spot_id(spot_id)
                vehicles = [vehicle] if vehicle else []
            elif floor is not None and bay is not None:
                spots = await self.spot_directory.find_by_floor_and_bay(floor, bay)
                vehicles = await self._vehicles_in_spots(spots)
            elif floor is not None:
                spots = await self.spot_directory.find_by_floor(floor)
                vehicles = await self._vehicles_in_spots(spots)
            else:
                vehicles = await self.vehicle_directory.find_currently_parked()

            details = await asyncio.gather(*[self._describe_vehicle(v) for v in vehicles])
        except Exception as e:
            raise self._lookup_failed("find vehicles by location", e) from e

        logger.debug("Vehicles found by location",
                     floor=floor, bay=bay, spot_id=spot_id, count=len(details))
        return list(details)

    async def find_available_spots(self,
                                   floor: Optional[int] = None,
                                   bay: Optional[int] = None,
                                   spot_type: Optional[str] = None,
                                   features: Optional[Sequence[str]] = None) -> List[AvailableSpotInfo]:
        """Find available spots, keeping only those that satisfy every given criterion."""
        try:
            spots = await self.spot_directory.find_available()
        except Exception as e:
            raise self._lookup_failed("find available spots", e) from e

        if floor is not None:
            spots = [s for s in spots if s.floor == floor]
        if bay is not None:
            spots = [s for s in spots if s.bay == bay]
        if spot_type:
            spots = [s for s in spots if s.type == spot_type]
        if features:
            spots = [s for s in spots if all(s.has_feature(f) for f in features)]

        return [AvailableSpotInfo.from_spot(spot) for spot in spots]

    async def get_search_suggestions(self,
                                     partial: str,
                                     limit: Optional[int] = None) -> List[str]:
        """
        Get typeahead plate suggestions for partial input.

        Reads the plate cache, never the live directory. Prefix matches
        always rank ahead of contains-only matches.
        """
        if limit is None:
            limit = self.settings.default_suggestion_limit

        partial_upper = normalize_license_plate(partial)
        if len(partial_upper) < self.settings.suggestion_min_length or limit < 1:
            return []

        try:
            plates = await self.plate_cache.get_plates()
        except Exception as e:
            raise self._lookup_failed("get search suggestions", e) from e

        suggestions = []
        for plate in plates:
            if len(suggestions) >= limit:
                break
            if plate.startswith(partial_upper):
                suggestions.append(plate)

        if len(suggestions) < limit:
            seen = set(suggestions)
            for plate in plates:
                if len(suggestions) >= limit:
                    break
                if plate not in seen and partial_upper in plate:
                    suggestions.append(plate)

        return suggestions

    def clear_cache(self) -> None:
        """Clear the plate cache (useful for testing or forced refresh)."""
        self.plate_cache.clear()

    def get_cache_stats(self) -> dict:
        return self.plate_cache.get_stats()

    async def _enrich_match(self,
                            match: ScoredMatch,
                            vehicle: VehicleSnapshot) -> EnrichedMatch:
        """Attach vehicle and spot detail to a ranked match."""
        return EnrichedMatch(
            license_plate=match.license_plate,
            score=match.score,
            match_type=match.match_type,
            vehicle=await self._describe_vehicle(vehicle)
        )

    async def _describe_vehicle(self, vehicle: VehicleSnapshot) -> VehicleDetail:
        spot = await self.spot_directory.find_by_id(vehicle.spot_id) if vehicle.spot_id else None
        return VehicleDetail.from_snapshot(vehicle, spot, self._now())

    async def _vehicles_in_spots(self, spots: Sequence[SpotSnapshot]) -> List[VehicleSnapshot]:
        """Resolve the vehicles occupying the given spots."""
        occupied = [spot.current_vehicle for spot in spots if spot.current_vehicle]
        vehicles = await asyncio.gather(*[
            self.vehicle_directory.find_by_plate(normalize_license_plate(plate))
            for plate in occupied
        ])
        return [vehicle for vehicle in vehicles if vehicle]

    @staticmethod
    def _index_by_plate(vehicles: Sequence[VehicleSnapshot]) -> Dict[str, VehicleSnapshot]:
        """Map each normalized plate to its snapshot, keeping the first of any duplicates."""
        indexed = {}
        for vehicle in vehicles:
            plate = normalize_license_plate(vehicle.license_plate)
            if plate and plate not in indexed:
                indexed[plate] = vehicle
        return indexed

    def _lookup_failed(self, operation: str, error: Exception) -> LookupFailedError:
        search_logger.log_operation_error(operation, str(error))
        return LookupFailedError(operation, error)
