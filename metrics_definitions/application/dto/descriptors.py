"""Descriptor serialization DTOs."""

from pydantic import BaseModel, ConfigDict, Field

from metrics_definitions.domain.entities import (
    AnyMetricDescriptor,
    ComputedMetricDescriptor,
    MetricDescriptor,
)
from metrics_definitions.domain.enums import AggregationKind, ComputedFormulaKind


class MetricDescriptorModel(BaseModel):
    """Serialized base or custom metric."""

    model_config = ConfigDict(populate_by_name=True)

    type: str = "metric"
    name: str
    translated_name: str = Field(alias="translatedName")
    documentation: str
    category_id: str = Field(alias="categoryId")
    expression: str
    aggregation_kind: AggregationKind | None = Field(None, alias="aggregationKind")


class ComputedMetricDescriptorModel(BaseModel):
    """Serialized computed metric."""

    model_config = ConfigDict(populate_by_name=True)

    type: str = "computed_metric"
    name: str
    translated_name: str = Field(alias="translatedName")
    documentation: str
    category_id: str = Field(alias="categoryId")
    formula_kind: ComputedFormulaKind = Field(alias="formulaKind")
    dependency_names: list[str] = Field(alias="dependencyNames", min_length=2, max_length=2)


def to_model(descriptor: AnyMetricDescriptor) -> MetricDescriptorModel | ComputedMetricDescriptorModel:
    """Convert a domain descriptor to its serialization model."""
    if isinstance(descriptor, ComputedMetricDescriptor):
        return ComputedMetricDescriptorModel(
            name=descriptor.name,
            translated_name=descriptor.translated_name,
            documentation=descriptor.documentation,
            category_id=descriptor.category_id,
            formula_kind=descriptor.formula_kind,
            dependency_names=list(descriptor.dependency_names),
        )
    return MetricDescriptorModel(
        name=descriptor.name,
        translated_name=descriptor.translated_name,
        documentation=descriptor.documentation,
        category_id=descriptor.category_id,
        expression=descriptor.expression,
        aggregation_kind=descriptor.aggregation_kind,
    )


def from_model(model: MetricDescriptorModel | ComputedMetricDescriptorModel) -> AnyMetricDescriptor:
    """Convert a serialization model back to a domain descriptor."""
    if isinstance(model, ComputedMetricDescriptorModel):
        numerator, denominator = model.dependency_names
        return ComputedMetricDescriptor(
            name=model.name,
            translated_name=model.translated_name,
            documentation=model.documentation,
            category_id=model.category_id,
            formula_kind=model.formula_kind,
            dependency_names=(numerator, denominator),
        )
    return MetricDescriptor(
        name=model.name,
        translated_name=model.translated_name,
        documentation=model.documentation,
        category_id=model.category_id,
        expression=model.expression,
        aggregation_kind=model.aggregation_kind,
    )
