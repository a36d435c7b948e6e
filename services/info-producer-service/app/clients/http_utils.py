# services/info-producer-service/app/clients/http_utils.py
from __future__ import annotations

import asyncio
import logging
from typing import Dict, Optional, Union

import httpx

from app.config import settings
from app.core.errors import TransportFailure

logger = logging.getLogger("app.clients.http")


class _ClientPool:
    """
    AsyncClients keyed by base URL. Created on first use, closed together
    at shutdown; a closed client is replaced on the next acquire.
    """

    def __init__(self) -> None:
        self._clients: Dict[str, httpx.AsyncClient] = {}
        self._lock = asyncio.Lock()

    async def acquire(self, base_url: str) -> httpx.AsyncClient:
        async with self._lock:
            client = self._clients.get(base_url)
            if client is not None and not client.is_closed:
                return client
            client = httpx.AsyncClient(
                base_url=base_url,
                timeout=httpx.Timeout(settings.http_client_timeout_seconds),
                headers={"User-Agent": f"{settings.service_name}/{settings.service_version}"},
            )
            self._clients[base_url] = client
            logger.info("Opened HTTP client for %s (timeout=%ss)", base_url, settings.http_client_timeout_seconds)
            return client

    async def close_all(self) -> None:
        async with self._lock:
            pending = self._clients
            self._clients = {}
        for base_url, client in pending.items():
            try:
                await client.aclose()
            except Exception:
                logger.warning("Failed to close HTTP client for %s", base_url, exc_info=True)
            else:
                logger.debug("Closed HTTP client for %s", base_url)


_pool = _ClientPool()


async def get_http_client(base_url: str) -> httpx.AsyncClient:
    return await _pool.acquire(base_url)


async def close_http_clients() -> None:
    await _pool.close_all()


def _check_response(service: str, url: str, resp: httpx.Response) -> None:
    if resp.is_success:
        return
    try:
        body = resp.text
    except UnicodeDecodeError:
        body = repr(resp.content[:500])
    raise TransportFailure(service=service, status=resp.status_code, url=url, body=body)


async def put_json(
    client: httpx.AsyncClient,
    url: str,
    body: Union[str, bytes],
    *,
    service: str,
    headers: Optional[Dict[str, str]] = None,
) -> httpx.Response:
    """
    PUT an already-encoded JSON body. Network errors and non-2xx answers
    both surface as TransportFailure.
    """
    content = body.encode("utf-8") if isinstance(body, str) else body
    request_headers = {"Content-Type": "application/json", "Accept": "application/json"}
    request_headers.update(headers or {})
    try:
        resp = await client.put(url, content=content, headers=request_headers)
    except httpx.TransportError as e:
        raise TransportFailure(service=service, url=url, reason=str(e) or type(e).__name__) from e
    _check_response(service, url, resp)
    return resp
