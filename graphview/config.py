from typing import Literal, Optional

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GRAPHVIEW_", env_file=".env", env_ignore_empty=True, extra="ignore"
    )
    SERVICE_NAME: str = "graphview"
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    LOG_DIR: str = "."
    # When set, records are also written to this rotating file.
    LOG_FILE: Optional[str] = None
    OTEL_EXPORTER: Literal["otlp", "none"] = "otlp"
    OTEL_PROTOCOL: Literal["grpc", "http"] = "grpc"

    DEFAULT_TITLE: str = "Data Cloud Records"
    DEFAULT_ROW_LIMIT: int = 50
    CONFIG_MESSAGE_PREFIX: str = "Please configure the component in App Builder."

    @computed_field  # type: ignore[prop-decorator]
    @property
    def log_level_name(self) -> str:
        return self.LOG_LEVEL.strip().upper() or "INFO"


settings = Settings()  # type: ignore
