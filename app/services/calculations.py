"""
Shared calculation utilities for population series.
Implements the rounding and summary conventions the dashboard expects.
"""

import pandas as pd
import math
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from app.config import AXIS_DEFAULT_DOMAIN, AXIS_PADDING

logger = logging.getLogger(__name__)


class CalculationService:
    """
    Service for performing standardized population calculations.
    All methods are pure and safe to call concurrently.
    """

    @staticmethod
    def standard_round(n: float) -> int:
        """
        Standard rounding: 0.5 rounds UP to nearest integer.
        """
        return int(math.floor(n + 0.5))

    @staticmethod
    def to_non_negative(value) -> float:
        """
        Coerce a raw bucket value to a non-negative float.

        Missing, non-numeric, NaN and infinite values count as 0; negative
        values are clamped to 0.
        """
        if value is None or isinstance(value, bool):
            return 0.0
        try:
            number = float(value)
        except (TypeError, ValueError):
            return 0.0
        if not math.isfinite(number):
            return 0.0
        return max(0.0, number)

    @staticmethod
    def grouped_mean(
        df: pd.DataFrame,
        group_col: str,
        value_col: str,
        groups: Iterable[int]
    ) -> Dict[int, int]:
        """
        Mean of value_col per group, rounded with standard_round.

        Args:
            df: Input dataframe
            group_col: Column holding the group key
            value_col: Column holding the values to average
            groups: Every group key expected in the result

        Returns:
            Dictionary of group -> rounded mean, 0 for groups without rows
        """
        groups = list(groups)
        if df.empty:
            return {group: 0 for group in groups}

        stats = df.groupby(group_col)[value_col].agg(["sum", "count"])
        result = {}
        for group in groups:
            if group in stats.index and stats.at[group, "count"] > 0:
                mean = stats.at[group, "sum"] / stats.at[group, "count"]
                result[group] = CalculationService.standard_round(mean)
            else:
                result[group] = 0
        return result

    @staticmethod
    def peak_and_low(values: List[float]) -> Optional[Tuple[int, int, float]]:
        """
        Locate the highest and lowest values of a series.

        Returns:
            (peak position, low position, mean), first occurrence wins ties;
            None for an empty series
        """
        if not values:
            return None
        series = pd.Series(values, dtype="float64")
        return int(series.idxmax()), int(series.idxmin()), float(series.mean())

    @staticmethod
    def symmetric_domain(values: Iterable[float]) -> Tuple[int, int]:
        """
        Symmetric axis domain around zero with padding.

        Returns AXIS_DEFAULT_DOMAIN when there are no values.
        """
        values = list(values)
        if not values:
            return AXIS_DEFAULT_DOMAIN
        bound = int(math.ceil(max(values) * AXIS_PADDING))
        return (-bound, bound)


# Singleton instance
calc_service = CalculationService()
