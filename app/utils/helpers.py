"""
Utility functions for data formatting and label construction.
"""

import re
from typing import Any, List, Mapping, Optional
import logging

from pydantic import BaseModel

from app.config import AGE_BUCKET_LABELS, GENDER_LABELS
from app.exceptions import MalformedRecord

logger = logging.getLogger(__name__)

AGE_BUCKET_PATTERN = re.compile(r"F(\d+)T(\d+)")


def as_mapping(record: Any) -> Optional[Mapping]:
    """
    Return a backend record as a plain mapping with camelCase keys.

    Pydantic models are dumped by alias; anything that is not a mapping
    yields None.
    """
    if isinstance(record, BaseModel):
        return record.model_dump(by_alias=True)
    if isinstance(record, Mapping):
        return record
    return None


def format_age_group_label(bucket: str, with_suffix: bool = False) -> str:
    """
    Convert an age bucket key to a display label.

    F0T9 -> "0-9" (or "0-9세" with suffix). Keys that do not match the
    F{start}T{end} pattern have the markers stripped literally instead.
    """
    match = AGE_BUCKET_PATTERN.search(bucket)
    if match:
        label = f"{match.group(1)}-{match.group(2)}"
        return f"{label}세" if with_suffix else label

    logger.warning(MalformedRecord("age bucket", bucket, "label does not match F{start}T{end}").message)
    return re.sub(r"^F", "", bucket).replace("T", "-")


def hour_label(hour: int) -> str:
    """5 -> "05:00" """
    return f"{int(hour):02d}:00"


def generate_hour_labels() -> List[str]:
    """Labels for the 24 hours of a day"""
    return [hour_label(hour) for hour in range(24)]


def month_label(year: int, month: int) -> str:
    """(2024, 5) -> "2024년 5월" """
    return f"{year}년 {month}월"



def format_number(num: float) -> str:
    """Thousands separators, at most three fraction digits"""
    if float(num).is_integer():
        return f"{int(num):,}"
    return f"{round(num, 3):,}"


def format_population(num: float) -> str:
    """
    Format a population count for display.

    Counts of 10,000 and above are shown in units of 만 (ten thousand)
    with one decimal place, e.g. 123456 -> "12.3만".
    """
    if num >= 10000:
        return f"{num / 10000:.1f}만"
    return format_number(num)


def gender_label(gender: str) -> str:
    """Korean label for a gender filter value"""
    return GENDER_LABELS.get(gender, gender)


def age_bucket_label(age_bucket: str) -> str:
    """Korean label for a simplified age bucket filter value"""
    return AGE_BUCKET_LABELS.get(age_bucket, age_bucket)
