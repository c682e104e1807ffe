"""
District rankings.

Orders per-district totals so the dashboard can pick the most populated
districts (e.g. which districts get an hourly line when none is selected).
"""

import math
from typing import Any, List, Optional, Sequence
import logging

import pandas as pd

from app.config import CODE_THRESHOLD, TOP_DISTRICTS_DEFAULT
from app.exceptions import EmptyInput, MalformedRecord
from app.models.schemas import DistrictRankPoint
from app.services.chart_series import make_chart_point
from app.services.district_registry import DistrictRegistry, district_registry
from app.utils.helpers import as_mapping

logger = logging.getLogger(__name__)


def _internal_id(value: Any, registry: DistrictRegistry) -> Optional[int]:
    """Internal id for an internal id or administrative code, None if unknown"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int) and value < CODE_THRESHOLD:
        return value if registry.internal_id_to_code(value) is not None else None
    if isinstance(value, (int, str)):
        return registry.code_to_internal_id(value)
    return None


def _total_of(record) -> Any:
    """`total` wins over `totalAvg` when both are present"""
    total = record.get("total")
    return total if total is not None else record.get("totalAvg")


def top_districts(
    stats: Optional[Sequence[Any]],
    limit: int = TOP_DISTRICTS_DEFAULT,
    registry: DistrictRegistry = district_registry
) -> List[DistrictRankPoint]:
    """
    Rank districts by total population, largest first.

    Args:
        stats: Per-district records with 'districtId' (internal id or code),
            'total' (or 'totalAvg') and optionally 'districtName'
        limit: Maximum number of districts returned
        registry: Registry used to name and identify districts

    Returns:
        At most `limit` points; index is the rank minus one and the label is
        the district name. Districts with equal totals keep their input
        order. Records without a non-negative numeric total are skipped.
    """
    if not stats or not isinstance(stats, (list, tuple)) or limit <= 0:
        logger.debug(EmptyInput("district stats").message)
        return []

    rows = []
    for raw in stats:
        record = as_mapping(raw)
        if record is None:
            logger.warning(MalformedRecord("district stats", raw, "not an object").message)
            continue

        total = _total_of(record)
        if isinstance(total, bool) or not isinstance(total, (int, float)) or not math.isfinite(total) or total < 0:
            logger.warning(MalformedRecord("district stats", raw, "total is not a non-negative number").message)
            continue

        raw_id = record.get("districtId")
        internal_id = _internal_id(raw_id, registry)
        name = record.get("districtName")
        if not isinstance(name, str) or not name:
            district = registry.get_district(internal_id) if internal_id is not None else None
            name = district.name if district else str(raw_id)

        rows.append({"district_id": internal_id, "name": name, "total": float(total)})

    if not rows:
        logger.debug(EmptyInput("district stats").message)
        return []

    ranked = (
        pd.DataFrame(rows)
        .sort_values("total", ascending=False, kind="stable")
        .head(limit)
    )

    return [
        make_chart_point(
            rank,
            row.name,
            row.total,
            point_cls=DistrictRankPoint,
            district_id=None if pd.isna(row.district_id) else int(row.district_id)
        )
        for rank, row in enumerate(ranked.itertuples(index=False))
    ]
