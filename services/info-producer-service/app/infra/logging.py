# services/info-producer-service/app/infra/logging.py
from __future__ import annotations
import logging
from typing import Optional

_LEVELS: dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "TRACE": logging.DEBUG,
}


def resolve_level(name: Optional[str]) -> int:
    """Map a LOG_LEVEL string ("Info", "debug", ...) to a logging level; unknown -> INFO."""
    if not name:
        return logging.INFO
    return _LEVELS.get(name.strip().upper(), logging.INFO)


def setup_logging(service_name: str = "info-producer-service", level_name: Optional[str] = None) -> None:
    """
    Minimal, consistent structured-ish logging across services.
    """
    level = resolve_level(level_name)
    logging.basicConfig(
        level=level,
        format=(
            "%(asctime)s | %(levelname)s | %(name)s | "
            f"svc={service_name} | %(message)s"
        ),
    )
    logging.getLogger("app").setLevel(level)
    # quiet noisy deps if needed
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
