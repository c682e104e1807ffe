"""
Age-bucket distribution builder.

Turns the backend's bucketed male/female averages into ordered age-group
records for the population pyramid.
"""

from typing import List, Mapping, Optional, Tuple
import logging

from app.config import AGE_BUCKETS
from app.exceptions import EmptyInput
from app.models.schemas import AgeGenderBucket, PyramidRow
from app.services.calculations import calc_service
from app.utils.helpers import format_age_group_label

logger = logging.getLogger(__name__)


def build_age_distribution(
    male_buckets: Optional[Mapping[str, float]],
    female_buckets: Optional[Mapping[str, float]],
    with_suffix: bool = False,
    buckets: List[str] = AGE_BUCKETS
) -> List[AgeGenderBucket]:
    """
    Build per-age-group male/female records.

    Args:
        male_buckets: Male average population keyed by bucket (e.g. 'F20T24')
        female_buckets: Female average population keyed by bucket
        with_suffix: Append '세' to the age group labels
        buckets: Bucket keys in output order (youngest first)

    Returns:
        One record per bucket with population in either gender; buckets
        without any population are left out. Empty when there is no data.
    """
    male_buckets = male_buckets or {}
    female_buckets = female_buckets or {}

    if not male_buckets and not female_buckets:
        logger.debug(EmptyInput("age bucket").message)
        return []

    distribution = []
    for bucket in buckets:
        male = calc_service.to_non_negative(male_buckets.get(bucket))
        female = calc_service.to_non_negative(female_buckets.get(bucket))
        if male <= 0 and female <= 0:
            continue

        distribution.append(AgeGenderBucket(
            age_group=format_age_group_label(bucket, with_suffix=with_suffix),
            male=male,
            female=female
        ))

    return distribution


def to_pyramid_rows(
    distribution: List[AgeGenderBucket],
    ascending: bool = True
) -> List[PyramidRow]:
    """
    Convert an age distribution into pyramid chart rows.

    Male counts are negated so they plot to the left of the axis; the
    absolute values are kept for tooltips. With ascending=False the oldest
    group comes first.
    """
    rows = [
        PyramidRow(
            age_group=item.age_group,
            male=-item.male,
            female=item.female,
            male_abs=item.male,
            female_abs=item.female,
            total=item.male + item.female
        )
        for item in distribution
    ]
    if not ascending:
        rows.reverse()
    return rows


def calculate_axis_domain(distribution: List[AgeGenderBucket]) -> Tuple[int, int]:
    """Symmetric x-axis domain wide enough for the largest bar"""
    return calc_service.symmetric_domain(
        max(item.male, item.female) for item in distribution
    )
