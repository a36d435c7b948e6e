# services/info-producer-service/app/core/errors.py
from __future__ import annotations

from typing import Any, Optional


class ProducerError(RuntimeError):
    """Base class for every error the producer returns to its callers."""


# ─────────────────────────────────────────────────────────────
# Job admission
# ─────────────────────────────────────────────────────────────

class JobValidationError(ProducerError):
    def __init__(self, message: str, *, job: Any = None) -> None:
        super().__init__(message)
        self.job = job


class TypeNotSupported(JobValidationError):
    def __init__(self, type_id: str, *, job: Any = None) -> None:
        super().__init__(f"type not supported: {type_id}", job=job)
        self.type_id = type_id


class MissingJobIdentity(JobValidationError):
    def __init__(self, job: Any) -> None:
        super().__init__(f"missing required job identity: {_describe(job)}", job=job)


class MissingTargetUri(JobValidationError):
    def __init__(self, job: Any) -> None:
        super().__init__(f"missing required target URI: {_describe(job)}", job=job)


def _describe(job: Any) -> str:
    dump = getattr(job, "model_dump", None)
    return str(dump()) if callable(dump) else str(job)


# ─────────────────────────────────────────────────────────────
# Catalog / coordinator
# ─────────────────────────────────────────────────────────────

class CatalogLoadFailure(ProducerError):
    def __init__(self, directory: str, reason: str) -> None:
        super().__init__(f"unable to load types from {directory}: {reason}")
        self.directory = directory


class SerializationFailure(ProducerError):
    pass


class TransportFailure(ProducerError):
    def __init__(
        self,
        *,
        service: str,
        url: str,
        status: Optional[int] = None,
        body: str = "",
        reason: Optional[str] = None,
    ) -> None:
        if status is None:
            msg = f"{service} request failed: {url} :: {reason or 'transport error'}"
        else:
            msg = f"{service} HTTP {status}: {url} :: {body[:500]}"
        super().__init__(msg)
        self.service = service
        self.status = status
        self.url = url
        self.body = body
