"""
Weekday, week-series and monthly trend builders.

All take backend aggregates and return ChartPoints ready for a bar or
line chart.
"""

import math
import re
from typing import Any, List, Optional, Sequence, Tuple
import logging

import pandas as pd

from app.config import WEEKDAY_NAMES
from app.exceptions import EmptyInput, MalformedRecord
from app.models.schemas import ChartPoint, MonthlyPoint, WeekSeriesPoint
from app.services.calculations import calc_service
from app.services.chart_series import make_chart_point
from app.utils.helpers import as_mapping, month_label

logger = logging.getLogger(__name__)

WEEK_PATTERN = re.compile(r"W(\d+)")
DATE_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})(?!\d)")
MONTH_PATTERN = re.compile(r"(\d{4})-(\d{1,2})")


def _pad_date(match: re.Match) -> str:
    """'2024-5-6' -> '2024-05-06'"""
    year, month, day = match.groups()
    return f"{year}-{int(month):02d}-{int(day):02d}"


def _daily_frame(daily: Sequence[Any]) -> pd.DataFrame:
    """
    Collect (date, totalAvg) rows from daily aggregates.

    Records that are not objects or carry a non-numeric or non-finite
    totalAvg are skipped here; dates are parsed by the caller.
    """
    rows = []
    for raw in daily:
        record = as_mapping(raw)
        if record is None:
            logger.warning(MalformedRecord("daily", raw, "not an object").message)
            continue

        total = record.get("totalAvg")
        if isinstance(total, bool) or not isinstance(total, (int, float)) or not math.isfinite(total):
            logger.warning(MalformedRecord("daily", raw, "totalAvg is not a finite number").message)
            continue

        rows.append({"period_start_date": record.get("periodStartDate"), "total_avg": float(total)})

    return pd.DataFrame(rows, columns=["period_start_date", "total_avg"])


def aggregate_by_weekday(daily: Optional[Sequence[Any]]) -> List[ChartPoint]:
    """
    Average daily totals per day of the week.

    Args:
        daily: Daily aggregates with 'periodStartDate' and 'totalAvg'

    Returns:
        Exactly 7 ChartPoints, Monday (index 0) through Sunday (index 6).
        Each value is the rounded mean of that weekday's totals, or 0 when
        no record fell on it.
    """
    if not daily or not isinstance(daily, (list, tuple)):
        logger.debug(EmptyInput("daily").message)
        daily = []

    df = _daily_frame(daily)

    # Only the calendar date matters; a time or offset suffix is ignored.
    # Month and day may come without zero padding ('2024-5-6').
    dates = pd.to_datetime(
        df["period_start_date"].astype("string")
        .str.replace(DATE_PATTERN, _pad_date, regex=True)
        .str.slice(0, 10),
        format="%Y-%m-%d",
        errors="coerce"
    )
    for raw_date in df.loc[dates.isna(), "period_start_date"]:
        logger.warning(MalformedRecord("daily", raw_date, "periodStartDate is not a valid date").message)

    valid = dates.notna()
    df = df[valid].assign(weekday=dates[valid].dt.dayofweek.astype(int))

    # pandas counts Monday as 0, which is already the display order
    means = calc_service.grouped_mean(df, "weekday", "total_avg", range(7))

    return [
        make_chart_point(weekday, WEEKDAY_NAMES[weekday], means[weekday])
        for weekday in range(7)
    ]


def extract_week_number(week_period: Any) -> Optional[int]:
    """'2024-W07' -> 7; None when the label has no W{n} marker"""
    if not isinstance(week_period, str):
        return None
    match = WEEK_PATTERN.search(week_period)
    return int(match.group(1)) if match else None


def normalize_weeks(weekly: Optional[Sequence[Any]]) -> List[WeekSeriesPoint]:
    """
    Sort week-labelled aggregates and re-index them densely.

    Week numbers come from the 'W{n}' marker in 'weekPeriod'. A label
    without one sorts as week 0 and is flagged unparsed. Nothing is
    dropped: the output has one point per input record.

    Returns:
        Points ordered by week number with index 0..n-1 and labels
        '1주차', '2주차', ...
    """
    if not weekly or not isinstance(weekly, (list, tuple)):
        logger.debug(EmptyInput("weekly").message)
        return []

    entries = []
    for raw in weekly:
        record = as_mapping(raw) or {}

        week_number = extract_week_number(record.get("weekPeriod"))
        unparsed = week_number is None
        if unparsed:
            logger.warning(MalformedRecord("weekly", raw, "weekPeriod has no W{n} marker, sorting as week 0").message)
            week_number = 0

        value = calc_service.to_non_negative(record.get("totalAvg"))
        entries.append((week_number, unparsed, value))

    # sorted() is stable, so records sharing a week keep their input order
    entries = sorted(entries, key=lambda entry: entry[0])

    return [
        make_chart_point(
            position,
            f"{position + 1}주차",
            value,
            point_cls=WeekSeriesPoint,
            week_number=week_number,
            unparsed=unparsed
        )
        for position, (week_number, unparsed, value) in enumerate(entries)
    ]


def _parse_month(value: Any) -> Optional[Tuple[int, int]]:
    """'2024-05' -> (2024, 5); None for anything else, full dates included"""
    if not isinstance(value, str):
        return None
    match = MONTH_PATTERN.fullmatch(value.strip())
    if not match:
        return None
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        return None
    return year, month


def to_monthly_points(monthly: Optional[Sequence[Any]]) -> List[MonthlyPoint]:
    """
    Turn monthly aggregates into labelled chart points.

    Args:
        monthly: Records with 'month' ('YYYY-MM') and 'value'

    Returns:
        Points in input order, indexed 0..n-1 and labelled '2024년 5월'.
        Records with an unreadable month or a negative, non-finite or
        non-numeric value are skipped.
    """
    if not monthly or not isinstance(monthly, (list, tuple)):
        logger.debug(EmptyInput("monthly").message)
        return []

    entries = []
    for raw in monthly:
        record = as_mapping(raw)
        if record is None:
            logger.warning(MalformedRecord("monthly", raw, "not an object").message)
            continue

        parsed = _parse_month(record.get("month"))
        if parsed is None:
            logger.warning(MalformedRecord("monthly", raw, "month is not 'YYYY-MM'").message)
            continue

        value = record.get("value")
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
            logger.warning(MalformedRecord("monthly", raw, "value is not a non-negative number").message)
            continue

        entries.append((parsed, value))

    if not entries:
        logger.debug(EmptyInput("monthly").message)

    return [
        make_chart_point(
            position,
            month_label(year, month),
            value,
            point_cls=MonthlyPoint,
            month=f"{year}-{month:02d}"
        )
        for position, ((year, month), value) in enumerate(entries)
    ]
