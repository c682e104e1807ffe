"""
Pydantic models for API request/response validation and documentation.
These define the structure of data exchanged with the population backend
and the dashboard frontend.
"""

from pydantic import BaseModel, Field, StrictFloat, StrictInt, model_validator
from typing import Any, Dict, List, Optional, Tuple, Union
from enum import Enum


Number = Union[StrictInt, StrictFloat]


class SeriesMode(str, Enum):
    """Shape of the raw series handed to the chart adapter"""
    HOURLY = "hourly"
    WEEKLY = "weekly"


class PeriodType(str, Enum):
    """Aggregation period understood by the backend"""
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"
    DAYTIME = "DAYTIME"
    NIGHTTIME = "NIGHTTIME"


class District(BaseModel):
    """A Seoul district in both identifier spaces"""
    internal_id: int = Field(..., ge=1, le=25, alias="internalId", description="Internal district id (1-25)")
    administrative_code: str = Field(..., alias="administrativeCode", description="5-digit administrative code")
    name: str = Field(..., description="District name")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "internalId": 1,
                "administrativeCode": "11680",
                "name": "강남구"
            }
        }


class AgeGenderBucket(BaseModel):
    """Male/female population for one age group"""
    age_group: str = Field(..., alias="ageGroup", description="Display label, e.g. '20-24'")
    male: float = Field(..., ge=0, description="Male average population")
    female: float = Field(..., ge=0, description="Female average population")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {"ageGroup": "20-24", "male": 500, "female": 300}
        }


class PyramidRow(BaseModel):
    """Age group row for a population pyramid (male plotted on the left)"""
    age_group: str = Field(..., alias="ageGroup")
    male: float = Field(..., le=0, description="Negated male population")
    female: float = Field(..., ge=0)
    male_abs: float = Field(..., ge=0, alias="maleAbs")
    female_abs: float = Field(..., ge=0, alias="femaleAbs")
    total: float = Field(..., ge=0)

    class Config:
        populate_by_name = True


class DailyAggregate(BaseModel):
    """Per-day aggregate produced by the backend"""
    district_id: Optional[Union[int, str]] = Field(None, alias="districtId")
    period_start_date: Optional[str] = Field(None, alias="periodStartDate", description="ISO date of the day")
    total_avg: Optional[float] = Field(None, alias="totalAvg")
    male_buckets_avg: Dict[str, Optional[float]] = Field(default={}, alias="maleBucketsAvg")
    female_buckets_avg: Dict[str, Optional[float]] = Field(default={}, alias="femaleBucketsAvg")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "districtId": "11680",
                "periodStartDate": "2024-05-06",
                "totalAvg": 153210.4,
                "maleBucketsAvg": {"F20T24": 5120.5},
                "femaleBucketsAvg": {"F20T24": 6030.1}
            }
        }


class WeeklyAggregate(BaseModel):
    """Week-labelled aggregate produced by the backend"""
    week_period: Optional[str] = Field(None, alias="weekPeriod", description="Label containing 'W{n}'")
    total_avg: Optional[float] = Field(None, alias="totalAvg")
    district_id: Optional[Union[int, str]] = Field(None, alias="districtId")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {"weekPeriod": "2024-W19", "totalAvg": 150321.0, "districtId": "11680"}
        }


class ChartPoint(BaseModel):
    """Canonical point consumed by line/bar chart renderers"""
    index: int = Field(..., ge=0, description="Zero-based position (hour, weekday or week)")
    label: str = Field(..., description="Display label")
    value: float = Field(..., ge=0, description="Population count")

    class Config:
        json_schema_extra = {
            "example": {"index": 5, "label": "05:00", "value": 120}
        }


class WeekSeriesPoint(ChartPoint):
    """Chart point that remembers the week number it was sorted by"""
    week_number: int = Field(..., alias="weekNumber")
    unparsed: bool = Field(False, description="True when the week label had no 'W{n}' marker")

    class Config:
        populate_by_name = True


class MonthlyPoint(ChartPoint):
    """Chart point for one calendar month"""
    month: str = Field(..., description="Normalized 'YYYY-MM'")


class DistrictRankPoint(ChartPoint):
    """Chart point for one district in a population ranking (index = rank - 1)"""
    district_id: Optional[int] = Field(None, alias="districtId", description="Internal id, when known")

    class Config:
        populate_by_name = True


class HourlyPoint(BaseModel):
    """Raw hourly point; backends send either `value` or `total`"""
    hour: Number
    value: Optional[Number] = None
    total: Optional[Number] = None

    @model_validator(mode="after")
    def require_payload(self):
        if self.value is None and self.total is None:
            raise ValueError("point has neither 'value' nor 'total'")
        return self

    @property
    def payload(self) -> float:
        """`total` wins over `value` when both are present"""
        return self.total if self.total is not None else self.value


class WeeklyPoint(HourlyPoint):
    """Raw weekly point; `hourLabel` carries a weekday name"""
    hour_label: Optional[str] = Field(None, alias="hourLabel")

    class Config:
        populate_by_name = True


class SeriesHighlights(BaseModel):
    """Average, peak and low of a chart series"""
    average: float
    peak: ChartPoint
    low: ChartPoint


class Favorite(BaseModel):
    """A district a user has marked as favorite"""
    user_id: str = Field(..., alias="userId")
    district_id: int = Field(..., alias="districtId")
    district_name: Optional[str] = Field(None, alias="districtName")
    administrative_code: Optional[str] = Field(None, alias="administrativeCode")

    class Config:
        populate_by_name = True


class FavoriteCreateRequest(BaseModel):
    """Request body for adding a favorite"""
    district_id: int = Field(..., alias="districtId")

    class Config:
        populate_by_name = True


class FilterParams(BaseModel):
    """Dashboard filter state as carried in URL query strings"""
    district_id: Optional[int] = Field(None, alias="districtId")
    gender: Optional[str] = None
    age_bucket: Optional[str] = Field(None, alias="ageBucket")
    period: Optional[PeriodType] = None
    date: Optional[str] = None
    start: Optional[str] = Field(None, alias="from")
    end: Optional[str] = Field(None, alias="to")

    class Config:
        populate_by_name = True


class AgeDistributionRequest(BaseModel):
    """Bucketed male/female averages as returned by the backend"""
    male_buckets: Optional[Dict[str, Any]] = Field(None, alias="maleBuckets")
    female_buckets: Optional[Dict[str, Any]] = Field(None, alias="femaleBuckets")
    with_suffix: bool = Field(False, alias="withSuffix", description="Append '세' to labels")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "maleBuckets": {"F20T24": 500, "F30T34": 0},
                "femaleBuckets": {"F20T24": 300, "F30T34": 0}
            }
        }


class PyramidRequest(AgeDistributionRequest):
    """Age distribution request with pyramid ordering"""
    ascending: bool = Field(True, description="Youngest group first")


class PyramidResponse(BaseModel):
    """Pyramid rows plus a symmetric x-axis domain"""
    rows: List[PyramidRow]
    domain: Tuple[int, int]


class ChartSeriesResponse(BaseModel):
    """Normalized series with its highlights"""
    mode: SeriesMode
    points: List[ChartPoint]
    highlights: Optional[SeriesHighlights] = None


class ErrorResponse(BaseModel):
    """Standard error response format"""
    error: str = Field(..., description="Error type/code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict] = Field(None, description="Additional error details")
