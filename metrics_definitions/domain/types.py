"""Domain types and aliases."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

import pandas as pd

MetricName = str
MetricValue = int | float
MetricValues = Mapping[MetricName, MetricValue]
# One row per report row, one column per metric name
ReportFrame = pd.DataFrame

# JSON-serializable types (recursive)
# Using TYPE_CHECKING to avoid circular reference issues
if TYPE_CHECKING:
    JsonValue = str | int | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
else:
    # Runtime fallback - JSON values can be any JSON-serializable type
    JsonValue = str | int | float | bool | None | dict | list
