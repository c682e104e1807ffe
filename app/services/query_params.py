"""
Backend query parameter construction.

Every district id that leaves the dashboard for the backend goes through
the district registry here.
"""

from typing import Dict, Mapping, Optional
import logging

from app.models.schemas import FilterParams, PeriodType
from app.services.district_registry import district_registry

logger = logging.getLogger(__name__)


def build_query_params(
    district_id: Optional[int] = None,
    date: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    gender: Optional[str] = None,
    age_bucket: Optional[str] = None,
    period: Optional[PeriodType] = None
) -> Dict[str, str]:
    """
    Build backend query parameters from dashboard filter values.

    Args:
        district_id: Internal id or administrative code of the district
        date: Single day (YYYY-MM-DD)
        start: Range start, sent as 'from'
        end: Range end, sent as 'to'
        gender: 'male', 'female' or 'all' (omitted)
        age_bucket: Backend age bucket key or 'all' (omitted)
        period: Aggregation period (DAILY, WEEKLY, ...)

    Returns:
        Dictionary of query parameter name -> string value

    Raises:
        InvalidDistrictId: district_id cannot be resolved to a code
    """
    params = {}
    if period:
        params["period"] = PeriodType(period).value
    if district_id is not None:
        params["districtId"] = district_registry.resolve_district_code(district_id)
    if date:
        params["date"] = date
    if start:
        params["from"] = start
    if end:
        params["to"] = end
    if gender and gender != "all":
        params["gender"] = gender
    if age_bucket and age_bucket != "all":
        params["ageBucket"] = age_bucket
    return params


def build_query_params_from_filters(filters: FilterParams) -> Dict[str, str]:
    """build_query_params for a parsed FilterParams"""
    return build_query_params(
        district_id=filters.district_id,
        date=filters.date,
        start=filters.start,
        end=filters.end,
        gender=filters.gender,
        age_bucket=filters.age_bucket,
        period=filters.period
    )


def parse_filter_params(query: Mapping[str, str]) -> FilterParams:
    """
    Read dashboard filter values from a query-string mapping.

    Unknown keys are ignored; a non-numeric districtId or unknown period
    is dropped with a warning.
    """
    values = {}

    district_id = query.get("districtId")
    if district_id:
        try:
            values["district_id"] = int(district_id)
        except ValueError:
            logger.warning(f"Ignoring non-numeric districtId: {district_id!r}")

    period = query.get("period")
    if period:
        try:
            values["period"] = PeriodType(period)
        except ValueError:
            logger.warning(f"Ignoring unknown period: {period!r}")

    for key, field in (
        ("gender", "gender"),
        ("ageBucket", "age_bucket"),
        ("date", "date"),
        ("from", "start"),
        ("to", "end"),
    ):
        value = query.get(key)
        if value:
            values[field] = value

    return FilterParams(**values)
