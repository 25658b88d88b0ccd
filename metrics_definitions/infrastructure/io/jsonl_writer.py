"""JSONL descriptor writer and reader."""

import io
import json
from pathlib import Path

from pydantic import ValidationError

from metrics_definitions.application.dto.descriptors import (
    ComputedMetricDescriptorModel,
    MetricDescriptorModel,
    from_model,
    to_model,
)
from metrics_definitions.domain.entities import AnyMetricDescriptor
from metrics_definitions.infrastructure.io.local_io import LocalIO


class JsonlDescriptorWriter:
    """Writes metric descriptors as JSON lines, one descriptor per line."""

    def __init__(self, local_io: LocalIO) -> None:
        """Initialize JSONL writer."""
        self.local_io = local_io

    def write(self, descriptors: list[AnyMetricDescriptor], output_path: str) -> Path:
        """Write descriptors and return the written path."""
        buffer = io.StringIO()
        for descriptor in descriptors:
            record = to_model(descriptor).model_dump(mode="json", by_alias=True)
            buffer.write(json.dumps(record, ensure_ascii=False))
            buffer.write("\n")

        return self.local_io.put_text(output_path, buffer.getvalue())

    def read(self, input_path: str) -> list[AnyMetricDescriptor]:
        """Read descriptors written by ``write``."""
        descriptors: list[AnyMetricDescriptor] = []
        for line_no, line in enumerate(self.local_io.get_lines(input_path), start=1):
            try:
                record = json.loads(line)
                if not isinstance(record, dict):
                    raise RuntimeError(f"Invalid descriptor at {input_path}:{line_no}: expected a JSON object")
                if record.get("type") == "computed_metric":
                    model = ComputedMetricDescriptorModel(**record)
                else:
                    model = MetricDescriptorModel(**record)
            except (json.JSONDecodeError, ValidationError) as e:
                raise RuntimeError(f"Invalid descriptor at {input_path}:{line_no}: {e}") from e
            descriptors.append(from_model(model))
        return descriptors
