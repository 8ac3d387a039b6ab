"""Monthly tracked-hours series per plan."""

import math
from dataclasses import dataclass, field

from studytrack.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class TrendSeries(ValueObject):
    """Hours per month for one plan tag, aligned to TrendReport.month_keys."""

    label: str
    variant: str
    values: list[float] = field(default_factory=list)


@dataclass(frozen=True)
class TrendReport(ValueObject):
    """
    Trend series sharing one ascending sequence of ``YYYY-MM`` month keys.

    is_placeholder marks illustrative demo data substituted when there is no
    tracked history; real aggregation never sets it.
    """

    month_keys: list[str] = field(default_factory=list)
    series: list[TrendSeries] = field(default_factory=list)
    max_value: float = 0.0
    is_placeholder: bool = False

    @property
    def axis_max(self) -> int:
        """Upper bound for a value axis; never below 1."""
        return max(1, math.ceil(self.max_value))

    @property
    def is_empty(self) -> bool:
        return not self.month_keys
