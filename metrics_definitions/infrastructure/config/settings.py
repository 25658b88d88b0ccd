"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    locale: str = "en"
    fallback_locale: str = "en"
    # Directory of <locale>.json translation catalogs; built-in English templates apply without it
    translations_dir: str | None = None
    report_definition_path: str | None = None
    output_path: str = "metrics.jsonl"
    # CSV of produced base metric values; computed metrics are evaluated over it when set
    metric_values_path: str | None = None
    evaluated_values_path: str = "computed_metrics.csv"
    log_level: str = "INFO"
    log_json: bool = False
    metrics_server_enabled: bool = False
    prometheus_port: int = 9300

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="METRICS_DEFINITIONS_",
        extra="ignore",
    )
