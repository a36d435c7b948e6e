# services/info-producer-service/app/services/registration_service.py
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from app.config import Settings, settings as default_settings
from app.clients.coordinator import CoordinatorClient
from app.core.errors import TransportFailure
from app.core.registry import JobRegistry
from app.models import InfoType, ProducerRegistrationInfo

logger = logging.getLogger("app.services.registration")

STATUS_CALLBACK_PATH = "/status"
JOBS_CALLBACK_PATH = "/jobs"


def build_producer_info(cfg: Settings, type_ids: Sequence[str]) -> ProducerRegistrationInfo:
    supervision = f"{cfg.info_producer_supervision_callback_host}:{cfg.info_producer_supervision_callback_port}"
    job_callback = f"{cfg.info_job_callback_host}:{cfg.info_job_callback_port}"
    return ProducerRegistrationInfo(
        info_producer_supervision_callback_url=supervision + STATUS_CALLBACK_PATH,
        supported_info_types=list(type_ids),
        info_job_callback_url=job_callback + JOBS_CALLBACK_PATH,
    )


async def register_with_coordinator(
    registry: JobRegistry,
    types: List[InfoType],
    *,
    client: Optional[CoordinatorClient] = None,
    cfg: Optional[Settings] = None,
    max_attempts: Optional[int] = None,
) -> ProducerRegistrationInfo:
    """
    Announce the loaded types, then this producer, to the coordinator.

    Both calls are idempotent PUTs, so a transport failure restarts the whole
    sequence; the last error is re-raised once attempts run out.
    """
    cfg = cfg or default_settings
    client = client or CoordinatorClient(cfg.info_coord_addr)
    attempts = max_attempts or cfg.registration_max_attempts
    producer = build_producer_info(cfg, registry.supported_type_ids())

    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential_jitter(initial=0.5, max=10.0),
        retry=retry_if_exception_type(TransportFailure),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    ):
        with attempt:
            await client.register_types(types)
            await client.register_producer(cfg.producer_id, producer)

    logger.info(
        "Registered producer %s with %s (types=%s)",
        cfg.producer_id, client.base_url, producer.supported_info_types,
    )
    return producer
