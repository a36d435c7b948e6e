# services/info-producer-service/app/models/producer_models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ─────────────────────────────────────────────────────────────
# Types (loaded from the schema directory)
# ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class InfoType:
    type_id: str
    schema: bytes  # verbatim file content, never parsed


# ─────────────────────────────────────────────────────────────
# Jobs
# ─────────────────────────────────────────────────────────────

class JobInfo(BaseModel):
    """
    Job registration pushed to us by the coordinator.
    Required fields are enforced at admission (JobRegistry.add_job), not here,
    so that a partial record still yields a typed error naming what is missing.
    """
    model_config = ConfigDict(extra="ignore")

    owner: str = ""
    last_updated: str = ""
    info_job_identity: str = ""
    target_uri: str = ""
    info_job_data: Any = None
    info_type_identity: str = ""

    @field_validator(
        "owner", "last_updated", "info_job_identity", "target_uri", "info_type_identity",
        mode="before",
    )
    @classmethod
    def _null_as_empty(cls, v):
        return "" if v is None else v


# ─────────────────────────────────────────────────────────────
# Producer descriptor (sent to the coordinator, not stored)
# ─────────────────────────────────────────────────────────────

class ProducerRegistrationInfo(BaseModel):
    info_producer_supervision_callback_url: str
    supported_info_types: List[str] = Field(default_factory=list)
    info_job_callback_url: str


class StatusResponse(BaseModel):
    status: str
