# services/info-producer-service/app/clients/coordinator.py
from __future__ import annotations

import logging
from typing import Iterable, Optional
from urllib.parse import quote

import httpx

from app.config import settings
from app.core.errors import SerializationFailure
from app.clients.http_utils import get_http_client, put_json
from app.models import InfoType, ProducerRegistrationInfo

logger = logging.getLogger("app.clients.coordinator")

REGISTER_TYPE_PATH = "/data-producer/v1/info-types/"
REGISTER_PRODUCER_PATH = "/data-producer/v1/info-producers/"


def _path_escape(segment: str) -> str:
    # "/", ";", "," and "?" are escaped, the other sub-delims are kept
    return quote(segment, safe="$&+:=@")


class CoordinatorClient:
    """
    Thin async client for the information coordinator.
    Every call is an idempotent PUT; retrying is left to the caller.
    """

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.AsyncClient] = None) -> None:
        self.base_url = (base_url or settings.info_coord_addr).rstrip("/")
        self.service_name = "info-coordinator"
        self._client = client

    async def _http(self) -> httpx.AsyncClient:
        if self._client is not None:
            return self._client
        return await get_http_client(self.base_url)

    # --------- Types --------- #

    async def register_types(self, types: Iterable[InfoType]) -> None:
        """
        PUT /data-producer/v1/info-types/{type_id} for each type, in order.
        Stops at the first failure; types sent before it stay registered.
        """
        client = await self._http()
        for info_type in types:
            # schema is embedded raw, it is already JSON
            body = b'{"info_job_data_schema": ' + info_type.schema + b'}'
            url = self.base_url + REGISTER_TYPE_PATH + _path_escape(info_type.type_id)
            await put_json(client, url, body, service=self.service_name)
            logger.debug("Registered type: %s", info_type.type_id)

    # --------- Producer --------- #

    async def register_producer(self, producer_id: str, info: ProducerRegistrationInfo) -> None:
        """
        PUT /data-producer/v1/info-producers/{producer_id}
        """
        try:
            body = info.model_dump_json()
        except (ValueError, TypeError) as e:
            raise SerializationFailure(f"unable to encode producer {producer_id}: {e}") from e

        client = await self._http()
        url = self.base_url + REGISTER_PRODUCER_PATH + _path_escape(producer_id)
        await put_json(client, url, body, service=self.service_name)
        logger.debug("Registered producer: %s", producer_id)
