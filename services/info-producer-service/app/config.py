# services/info-producer-service/app/config.py
from __future__ import annotations
import os
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging ("Info", "debug", ... matched case-insensitively)
    log_level: str = os.getenv("LOG_LEVEL", "Info")

    # Callbacks advertised to the coordinator
    info_producer_supervision_callback_host: str = os.getenv(
        "INFO_PRODUCER_SUPERVISION_CALLBACK_HOST", ""
    )
    info_producer_supervision_callback_port: str = os.getenv(
        "INFO_PRODUCER_SUPERVISION_CALLBACK_PORT", "8085"
    )
    info_job_callback_host: str = os.getenv("INFO_JOB_CALLBACK_HOST", "")
    info_job_callback_port: str = os.getenv("INFO_JOB_CALLBACK_PORT", "8086")

    # Coordinator
    info_coord_addr: str = os.getenv("INFO_COORD_ADDR", "http://enrichmentservice:8083")
    producer_id: str = os.getenv("PRODUCER_ID", "DMaaP_Mediator_Producer")
    registration_max_attempts: int = int(os.getenv("REGISTRATION_MAX_ATTEMPTS", "5"))

    # Type catalog (one schema file per type)
    types_dir: str = os.getenv("TYPES_DIR", "configs")

    # HTTP client
    http_client_timeout_seconds: float = float(
        os.getenv("HTTP_CLIENT_TIMEOUT_SECONDS", "30")
    )

    # Identity
    service_name: str = os.getenv("SERVICE_NAME", "info-producer-service")
    service_version: str = os.getenv("SERVICE_VERSION", "0.1.0")

    model_config = SettingsConfigDict(env_file=None, extra="ignore")


settings = Settings()
