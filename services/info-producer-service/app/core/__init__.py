from .errors import (
    ProducerError,
    JobValidationError,
    TypeNotSupported,
    MissingJobIdentity,
    MissingTargetUri,
    CatalogLoadFailure,
    SerializationFailure,
    TransportFailure,
)
from .registry import JobRegistry, get_registry
from .catalog import load_types, refresh_catalog

__all__ = [
    "ProducerError",
    "JobValidationError",
    "TypeNotSupported",
    "MissingJobIdentity",
    "MissingTargetUri",
    "CatalogLoadFailure",
    "SerializationFailure",
    "TransportFailure",
    "JobRegistry",
    "get_registry",
    "load_types",
    "refresh_catalog",
]
