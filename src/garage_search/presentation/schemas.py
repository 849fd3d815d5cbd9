"""Pydantic response models for the garage search API."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..domain.value_objects.match_mode import MatchMode, MatchType


class ParkingDurationModel(BaseModel):
    """Elapsed parking time."""
    hours: int
    minutes: int

    model_config = {"from_attributes": True}


class SpotLocationModel(BaseModel):
    """Location of the spot a vehicle occupies."""
    floor: int
    bay: int
    spot_number: int
    type: str
    features: List[str] = []

    model_config = {"from_attributes": True}


class VehicleDetailModel(BaseModel):
    """Parked vehicle with duration and location."""
    license_plate: str
    spot_id: str
    check_in_time: datetime
    vehicle_type: str
    status: str
    current_duration: ParkingDurationModel
    spot: Optional[SpotLocationModel] = None
    rate_type: Optional[str] = None
    total_amount: Optional[float] = None
    is_paid: bool = False

    model_config = {"from_attributes": True}


class VehicleLookupResponse(BaseModel):
    """Result of an exact plate lookup."""
    found: bool
    vehicle: Optional[VehicleDetailModel] = None
    message: Optional[str] = None

    model_config = {"from_attributes": True}


class SearchMatchModel(BaseModel):
    """A ranked search match."""
    license_plate: str
    score: float = Field(..., ge=0.0, le=1.0, description="Confidence score (0.0 - 1.0)")
    match_type: MatchType
    vehicle: VehicleDetailModel
    spot: Optional[SpotLocationModel] = None

    model_config = {"from_attributes": True}


class VehicleSearchResponse(BaseModel):
    """Ranked search results, or validation errors for a rejected term."""
    matches: List[SearchMatchModel] = []
    count: int = 0
    search_term: Optional[str] = None
    mode: Optional[MatchMode] = None
    errors: Optional[List[str]] = None

    model_config = {"from_attributes": True}


class AvailableSpotModel(BaseModel):
    """An unoccupied spot."""
    spot_id: str
    floor: int
    bay: int
    spot_number: int
    type: str
    status: str
    features: List[str] = []

    model_config = {"from_attributes": True}


class SuggestionsResponse(BaseModel):
    """Typeahead plate suggestions."""
    suggestions: List[str]
    count: int


class CacheClearResponse(BaseModel):
    cleared: bool = True


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    plate_cache: Dict[str, Any] = Field(default_factory=dict)
