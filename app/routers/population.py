"""
Population: reshape backend aggregates into chart-ready series.
Each endpoint takes the backend payload as-is and returns flat series
or tables for the dashboard charts.
"""

from fastapi import APIRouter, Body, Query
from typing import Any, List

from app.config import TOP_DISTRICTS_DEFAULT
from app.models.schemas import (
    AgeDistributionRequest, AgeGenderBucket, ChartPoint, ChartSeriesResponse,
    DistrictRankPoint, MonthlyPoint, PyramidRequest, PyramidResponse,
    SeriesMode, WeekSeriesPoint
)
from app.services.age_distribution import (
    build_age_distribution, calculate_axis_domain, to_pyramid_rows
)
from app.services.chart_series import summarize_series, to_chart_points
from app.services.rankings import top_districts
from app.services.trends import aggregate_by_weekday, normalize_weeks, to_monthly_points

router = APIRouter(
    prefix="/population",
    tags=["Population"]
)


@router.post("/age-distribution", response_model=List[AgeGenderBucket])
async def get_age_distribution(request: AgeDistributionRequest):
    """
    Build male/female counts per age group.

    Groups are returned youngest first; groups without any population
    are left out.
    """
    return build_age_distribution(
        request.male_buckets,
        request.female_buckets,
        with_suffix=request.with_suffix
    )


@router.post("/pyramid", response_model=PyramidResponse)
async def get_pyramid(request: PyramidRequest):
    """
    Build population pyramid rows (male on the left) and a symmetric
    x-axis domain.
    """
    distribution = build_age_distribution(
        request.male_buckets,
        request.female_buckets,
        with_suffix=request.with_suffix
    )
    return PyramidResponse(
        rows=to_pyramid_rows(distribution, ascending=request.ascending),
        domain=calculate_axis_domain(distribution)
    )


@router.post("/weekday", response_model=List[ChartPoint])
async def get_weekday_trend(daily: List[Any] = Body(...)):
    """
    Average daily totals per weekday.

    Body items follow DailyAggregate. Always returns 7 points, Monday
    first. Days whose date or total cannot be read are skipped.
    """
    return aggregate_by_weekday(daily)


@router.post("/weeks", response_model=List[WeekSeriesPoint])
async def get_week_series(weekly: List[Any] = Body(...)):
    """
    Body items follow WeeklyAggregate.

    Order weekly aggregates by the week number in their label and
    re-index them as 1주차, 2주차, ...
    """
    return normalize_weeks(weekly)


@router.post("/monthly", response_model=List[MonthlyPoint])
async def get_monthly_trend(monthly: List[Any] = Body(...)):
    """
    Label monthly totals ({"month": "YYYY-MM", "value": ...}) for a line chart.

    Input order is kept; months that cannot be read are skipped.
    """
    return to_monthly_points(monthly)


@router.post("/top-districts", response_model=List[DistrictRankPoint])
async def get_top_districts(
    stats: List[Any] = Body(...),
    limit: int = Query(default=TOP_DISTRICTS_DEFAULT, ge=1, le=25, description="Number of districts")
):
    """
    Rank districts by total population, largest first.

    Body items carry `districtId` (internal id or code), `total` and
    optionally `districtName`.
    """
    return top_districts(stats, limit=limit)


@router.post("/chart-series", response_model=ChartSeriesResponse)
async def get_chart_series(
    series: List[Any] = Body(default=[]),
    mode: SeriesMode = Query(default=SeriesMode.HOURLY, description="hourly or weekly")
):
    """
    Normalize raw hourly or weekly points into chart points.

    - **hourly**: label is the hour as HH:00
    - **weekly**: label is the weekday name from `hourLabel` when present

    Invalid entries are dropped; highlights are omitted for an empty series.
    """
    points = to_chart_points(series, mode)
    return ChartSeriesResponse(
        mode=mode,
        points=points,
        highlights=summarize_series(points)
    )
