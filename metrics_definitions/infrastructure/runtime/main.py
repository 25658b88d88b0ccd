"""Main entrypoint: generate metric descriptors for a report definition."""

import structlog
from prometheus_client import start_http_server
from pydantic import ValidationError

from metrics_definitions.application.dto.definitions import ReportDefinition
from metrics_definitions.application.use_cases.build_report_metrics import run as build_report_metrics
from metrics_definitions.application.use_cases.evaluate_report import run as evaluate_report
from metrics_definitions.infrastructure.config.settings import Settings
from metrics_definitions.infrastructure.i18n.catalog_translator import (
    CatalogTranslator,
    load_catalogs,
)
from metrics_definitions.infrastructure.io.jsonl_writer import JsonlDescriptorWriter
from metrics_definitions.infrastructure.io.local_io import LocalIO
from metrics_definitions.infrastructure.observability.logging import configure_logging

logger = structlog.get_logger()


def build_translator(settings: Settings, local_io: LocalIO) -> CatalogTranslator:
    """Create the translator from the configured catalog directory."""
    catalogs = []
    if settings.translations_dir:
        catalogs = load_catalogs(settings.translations_dir, local_io)
    else:
        logger.warning("translations_dir_not_set", message="Using built-in English templates and raw label keys")
    return CatalogTranslator(
        catalogs,
        locale=settings.locale,
        fallback_locale=settings.fallback_locale,
    )


def load_report_definition(path: str, local_io: LocalIO) -> ReportDefinition:
    """Read and validate a report definition file."""
    data = local_io.get_json(path)
    try:
        return ReportDefinition(**data)
    except ValidationError as e:
        raise RuntimeError(f"Invalid report definition {path}: {e}") from e


def run(settings: Settings) -> str:
    """Generate descriptors for the configured report and write them as JSONL.

    When metric values are configured, the report's computed metrics are
    evaluated over them and written next to the input columns.
    """
    if not settings.report_definition_path:
        raise RuntimeError("METRICS_DEFINITIONS_REPORT_DEFINITION_PATH is not set")

    local_io = LocalIO()
    translator = build_translator(settings, local_io)
    definition = load_report_definition(settings.report_definition_path, local_io)

    report_metrics = build_report_metrics(definition, translator)

    writer = JsonlDescriptorWriter(local_io)
    output_path = writer.write(report_metrics.descriptors, settings.output_path)

    logger.info(
        "descriptors_written",
        report_id=report_metrics.report_id,
        output_path=str(output_path),
        count=len(report_metrics.descriptors),
    )

    if settings.metric_values_path:
        frame = local_io.get_frame(settings.metric_values_path)
        result_df = evaluate_report(report_metrics.registry, frame)
        values_path = local_io.put_frame(settings.evaluated_values_path, result_df)
        logger.info(
            "computed_values_written",
            report_id=report_metrics.report_id,
            output_path=str(values_path),
            rows=len(result_df),
        )

    return str(output_path)


def main() -> None:
    """Entrypoint."""
    settings = Settings()
    configure_logging(settings.log_level, settings.log_json)

    logger.info(
        "settings_loaded",
        locale=settings.locale,
        translations_dir=settings.translations_dir,
        report_definition_path=settings.report_definition_path,
        output_path=settings.output_path,
        metric_values_path=settings.metric_values_path,
    )

    if settings.metrics_server_enabled:
        start_http_server(settings.prometheus_port)

    try:
        run(settings)
    except Exception as e:
        logger.error("descriptor_generation_failed", exc_info=True, error=str(e))
        raise


if __name__ == "__main__":
    main()
