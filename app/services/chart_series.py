"""
Chart-series adapter.

Backend endpoints name point fields inconsistently (`value` vs `total`,
weekday names smuggled in `hourLabel`). All of that is absorbed here so
the rest of the code only ever sees ChartPoint.
"""

import math
from typing import Any, List, Optional, Sequence, Type
import logging

from pydantic import ValidationError

from app.config import MAX_HOUR
from app.exceptions import EmptyInput, MalformedRecord
from app.models.schemas import (
    ChartPoint, HourlyPoint, SeriesHighlights, SeriesMode, WeeklyPoint
)
from app.services.calculations import calc_service
from app.utils.helpers import as_mapping, hour_label

logger = logging.getLogger(__name__)

POINT_VARIANTS = {
    SeriesMode.HOURLY: HourlyPoint,
    SeriesMode.WEEKLY: WeeklyPoint,
}


def make_chart_point(
    index: int,
    label: str,
    value: float,
    point_cls: Type[ChartPoint] = ChartPoint,
    **extra
) -> ChartPoint:
    """
    The one constructor for ChartPoint and its subclasses.

    Extra keyword arguments are passed to point_cls for subclass fields.
    """
    return point_cls(index=index, label=label, value=value, **extra)


def _parse_point(raw: Any, mode: SeriesMode) -> Optional[HourlyPoint]:
    record = as_mapping(raw)
    if record is None:
        logger.warning(MalformedRecord("chart point", raw, "not an object").message)
        return None
    try:
        point = POINT_VARIANTS[mode].model_validate(record)
    except ValidationError as e:
        logger.warning(MalformedRecord("chart point", raw, f"{e.error_count()} validation error(s)").message)
        return None

    if not math.isfinite(point.hour) or point.hour < 0 or not float(point.hour).is_integer():
        logger.warning(MalformedRecord("chart point", raw, "hour is not a non-negative whole number").message)
        return None
    if mode is SeriesMode.HOURLY and point.hour > MAX_HOUR:
        logger.warning(MalformedRecord("chart point", raw, f"hour is above {MAX_HOUR}").message)
        return None
    if not math.isfinite(point.payload) or point.payload < 0:
        logger.warning(MalformedRecord("chart point", raw, "negative or non-finite value").message)
        return None
    return point


def to_chart_points(raw_series: Optional[Sequence[Any]], mode: str = SeriesMode.HOURLY) -> List[ChartPoint]:
    """
    Normalize raw backend points into ChartPoints.

    Args:
        raw_series: Points as delivered by the backend
        mode: 'hourly' or 'weekly'

    Returns:
        ChartPoints in input order. Invalid entries are dropped, including
        fractional hours and, in hourly mode, hours above 23. None,
        non-list input or no valid entries give an empty list.

    Raises:
        ValueError: mode is not a known SeriesMode
    """
    mode = SeriesMode(mode)

    if raw_series is None or not isinstance(raw_series, (list, tuple)):
        logger.debug(EmptyInput(f"{mode.value} series").message)
        return []

    points = []
    for raw in raw_series:
        point = _parse_point(raw, mode)
        if point is None:
            continue

        index = int(point.hour)
        if mode is SeriesMode.WEEKLY and point.hour_label:
            label = point.hour_label
        else:
            label = hour_label(index)
        points.append(make_chart_point(index, label, point.payload))

    if not points:
        logger.debug(EmptyInput(f"{mode.value} series").message)
    return points


def summarize_series(points: List[ChartPoint]) -> Optional[SeriesHighlights]:
    """
    Average, peak and low of a series.

    Returns None for an empty series; the first point wins ties.
    """
    summary = calc_service.peak_and_low([point.value for point in points])
    if summary is None:
        return None
    peak_pos, low_pos, average = summary
    return SeriesHighlights(
        average=average,
        peak=points[peak_pos],
        low=points[low_pos]
    )
