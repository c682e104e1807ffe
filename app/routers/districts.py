"""
Districts: internal id / administrative code registry endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Dict, List, Optional

from app.dependencies import get_district_registry
from app.models.schemas import District, PeriodType
from app.services.district_registry import DistrictRegistry
from app.services.query_params import build_query_params

router = APIRouter(
    prefix="/districts",
    tags=["Districts"],
    responses={404: {"description": "Not found"}}
)


@router.get("", response_model=List[District])
async def list_districts(
    registry: DistrictRegistry = Depends(get_district_registry)
):
    """
    List all 25 Seoul districts with their internal ids and
    administrative codes.
    """
    return registry.list_districts()


@router.get("/query-params", response_model=Dict[str, str])
async def get_query_params(
    district_id: Optional[int] = Query(default=None, alias="districtId", description="Internal id or administrative code"),
    date: Optional[str] = Query(default=None, description="Single day (YYYY-MM-DD)"),
    start: Optional[str] = Query(default=None, alias="from", description="Range start"),
    end: Optional[str] = Query(default=None, alias="to", description="Range end"),
    gender: Optional[str] = Query(default=None, description="male, female or all"),
    age_bucket: Optional[str] = Query(default=None, alias="ageBucket", description="Age bucket key or all"),
    period: Optional[PeriodType] = Query(default=None)
):
    """
    Build the query parameters the population backend expects for the
    given dashboard filters. The district is always sent as an
    administrative code.
    """
    return build_query_params(
        district_id=district_id,
        date=date,
        start=start,
        end=end,
        gender=gender,
        age_bucket=age_bucket,
        period=period
    )


@router.get("/resolve/{value}", response_model=District)
async def resolve_district(
    value: int,
    registry: DistrictRegistry = Depends(get_district_registry)
):
    """
    Resolve a value that is either an internal id (< 11000) or an
    administrative code (>= 11000).
    """
    code = registry.resolve_district_code(value)
    internal_id = registry.code_to_internal_id(code)
    if internal_id is None:
        raise HTTPException(status_code=404, detail=f"Unknown administrative code: {code}")
    return registry.get_district(internal_id)


@router.get("/by-code/{code}", response_model=District)
async def get_district_by_code(
    code: str,
    registry: DistrictRegistry = Depends(get_district_registry)
):
    """
    Look up a district by its 5-digit administrative code.
    """
    internal_id = registry.code_to_internal_id(code)
    if internal_id is None:
        raise HTTPException(status_code=404, detail=f"Unknown administrative code: {code}")
    return registry.get_district(internal_id)


@router.get("/{internal_id}", response_model=District)
async def get_district(
    internal_id: int,
    registry: DistrictRegistry = Depends(get_district_registry)
):
    """
    Get a district by internal id (1-25).
    """
    district = registry.get_district(internal_id)
    if district is None:
        raise HTTPException(status_code=404, detail=f"Unknown district id: {internal_id}")
    return district
