from .schemas import (
    SeriesMode,
    PeriodType,
    District,
    AgeGenderBucket,
    PyramidRow,
    DailyAggregate,
    WeeklyAggregate,
    ChartPoint,
    WeekSeriesPoint,
    MonthlyPoint,
    DistrictRankPoint,
    HourlyPoint,
    WeeklyPoint,
    SeriesHighlights,
    Favorite,
    FavoriteCreateRequest,
    FilterParams,
    AgeDistributionRequest,
    PyramidRequest,
    PyramidResponse,
    ChartSeriesResponse,
    ErrorResponse
)

__all__ = [
    "SeriesMode",
    "PeriodType",
    "District",
    "AgeGenderBucket",
    "PyramidRow",
    "DailyAggregate",
    "WeeklyAggregate",
    "ChartPoint",
    "WeekSeriesPoint",
    "MonthlyPoint",
    "DistrictRankPoint",
    "HourlyPoint",
    "WeeklyPoint",
    "SeriesHighlights",
    "Favorite",
    "FavoriteCreateRequest",
    "FilterParams",
    "AgeDistributionRequest",
    "PyramidRequest",
    "PyramidResponse",
    "ChartSeriesResponse",
    "ErrorResponse"
]
