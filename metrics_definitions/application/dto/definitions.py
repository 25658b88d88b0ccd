"""Definition DTOs."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from metrics_definitions.domain.enums import AggregationKind, ComputedFormulaKind


class DimensionDefinition(BaseModel):
    """Dimension definition loaded from a report definition."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1)
    module: str = Field(min_length=1)
    category_id: str = Field(alias="categoryId")
    # Either table + column or a raw SQL segment
    table: str | None = None
    column: str | None = None
    sql_segment: str | None = Field(None, alias="sqlSegment")
    label_key: str = Field(alias="labelKey")
    plural_label_key: str | None = Field(None, alias="pluralLabelKey")

    @model_validator(mode="after")
    def _check_column(self) -> "DimensionDefinition":
        if not self.sql_segment and not (self.table and self.column):
            raise ValueError(f"Dimension {self.id} needs either sqlSegment or table and column")
        return self


class CustomMetricDefinition(BaseModel):
    """Custom metric with caller supplied texts."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    translated_name: str = Field(alias="translatedName")
    aggregation: str
    documentation: str = ""


class ComputedMetricDefinition(BaseModel):
    """Computed metric request: ratio of two named metrics."""

    model_config = ConfigDict(populate_by_name=True)

    metric1: str = Field(min_length=1)
    metric2: str = Field(min_length=1)
    formula: ComputedFormulaKind


class DimensionMetricsDefinition(BaseModel):
    """Metrics requested for one dimension."""

    model_config = ConfigDict(populate_by_name=True)

    dimension: DimensionDefinition
    aggregations: list[AggregationKind] = []
    custom_metrics: list[CustomMetricDefinition] = Field([], alias="customMetrics")
    computed_metrics: list[ComputedMetricDefinition] = Field([], alias="computedMetrics")


class ReportDefinition(BaseModel):
    """Report definition: a set of dimensions and the metrics to derive."""

    model_config = ConfigDict(populate_by_name=True)

    report_id: str = Field(alias="reportId")
    dimensions: list[DimensionMetricsDefinition]
