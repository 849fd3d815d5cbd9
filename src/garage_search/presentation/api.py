"""FastAPI routes for plate search, suggestions and spot lookups."""

from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, FastAPI, Query, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..application.search_engine import SearchEngine
from ..config.settings import Settings, get_settings
from ..domain.exceptions import LookupFailedError, MissingArgumentError
from ..domain.value_objects.match_mode import MatchMode
from ..domain.value_objects.search_options import SearchOptions
from ..infrastructure.di_container import get_container
from .schemas import (
    AvailableSpotModel,
    CacheClearResponse,
    HealthResponse,
    SuggestionsResponse,
    VehicleDetailModel,
    VehicleLookupResponse,
    VehicleSearchResponse,
)

logger = structlog.get_logger()

router = APIRouter()


def get_search_engine() -> SearchEngine:
    """Resolve the shared search engine."""
    return get_container().get('search_engine')


@router.get("/health", response_model=HealthResponse)
async def health_check(engine: SearchEngine = Depends(get_search_engine)):
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=engine.settings.app_version,
        plate_cache=engine.get_cache_stats()
    )


@router.get("/vehicles/search", response_model=VehicleSearchResponse)
async def search_vehicles(
    q: str = Query(..., description="Full or partial license plate"),
    mode: Optional[MatchMode] = Query(None, description="exact, partial, fuzzy or all"),
    threshold: Optional[float] = Query(None, ge=0.0, le=1.0),
    max_results: Optional[int] = Query(None, ge=1, le=100),
    engine: SearchEngine = Depends(get_search_engine)
):
    """
    Search parked vehicles by license plate.

    Invalid search terms return an empty result with ``errors`` rather
    than an error status.
    """
    defaults = SearchOptions.from_settings(engine.settings)
    options = SearchOptions(
        mode=mode or defaults.mode,
        threshold=defaults.threshold if threshold is None else threshold,
        max_results=defaults.max_results if max_results is None else max_results
    )

    results = await engine.search_vehicles(q, options)
    return VehicleSearchResponse.model_validate(results)


@router.get("/vehicles/suggestions", response_model=SuggestionsResponse)
async def get_search_suggestions(
    partial: str = Query("", description="Partial license plate"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    engine: SearchEngine = Depends(get_search_engine)
):
    """Typeahead suggestions served from the plate cache."""
    suggestions = await engine.get_search_suggestions(partial, limit)
    return SuggestionsResponse(suggestions=suggestions, count=len(suggestions))


@router.get("/vehicles/location", response_model=List[VehicleDetailModel])
async def find_vehicles_by_location(
    floor: Optional[int] = Query(None),
    bay: Optional[int] = Query(None),
    spot_id: Optional[str] = Query(None),
    engine: SearchEngine = Depends(get_search_engine)
):
    """Vehicles parked in a spot, bay or floor."""
    vehicles = await engine.find_vehicles_by_location(floor=floor, bay=bay, spot_id=spot_id)
    return [VehicleDetailModel.model_validate(v) for v in vehicles]


@router.get("/vehicles/{license_plate}", response_model=VehicleLookupResponse)
async def find_vehicle_by_license_plate(
    license_plate: str,
    response: Response,
    engine: SearchEngine = Depends(get_search_engine)
):
    """Exact plate lookup with spot location."""
    result = await engine.find_vehicle_by_license_plate(license_plate)
    if not result.found:
        response.status_code = 404
    return VehicleLookupResponse.model_validate(result)


@router.get("/spots/available", response_model=List[AvailableSpotModel])
async def find_available_spots(
    floor: Optional[int] = Query(None),
    bay: Optional[int] = Query(None),
    spot_type: Optional[str] = Query(None, alias="type"),
    features: Optional[List[str]] = Query(None),
    engine: SearchEngine = Depends(get_search_engine)
):
    """Available spots filtered by floor, bay, type and required features."""
    spots = await engine.find_available_spots(
        floor=floor, bay=bay, spot_type=spot_type, features=features
    )
    return [AvailableSpotModel.model_validate(s) for s in spots]


@router.post("/cache/clear", response_model=CacheClearResponse)
async def clear_cache(engine: SearchEngine = Depends(get_search_engine)):
    """Force the plate cache to rebuild on the next suggestion request."""
    engine.clear_cache()
    return CacheClearResponse(cleared=True)


async def _missing_argument_handler(request: Request, exc: MissingArgumentError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _lookup_failed_handler(request: Request, exc: LookupFailedError):
    logger.error("Request failed on directory lookup",
                 path=request.url.path,
                 operation=exc.operation,
                 error=str(exc.original))
    return JSONResponse(status_code=502, content={"detail": str(exc)})


def create_app(engine: Optional[SearchEngine] = None,
               settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application, optionally bound to a specific engine."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="License plate search and fuzzy matching for parked vehicles"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    app.add_exception_handler(MissingArgumentError, _missing_argument_handler)
    app.add_exception_handler(LookupFailedError, _lookup_failed_handler)

    if engine is not None:
        app.dependency_overrides[get_search_engine] = lambda: engine

    return app
