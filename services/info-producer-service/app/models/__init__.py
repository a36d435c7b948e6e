from .producer_models import (
    InfoType,
    JobInfo,
    ProducerRegistrationInfo,
    StatusResponse,
)

__all__ = [
    "InfoType",
    "JobInfo",
    "ProducerRegistrationInfo",
    "StatusResponse",
]
