# services/info-producer-service/app/core/catalog.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from app.core.errors import CatalogLoadFailure
from app.core.registry import JobRegistry
from app.models import InfoType

logger = logging.getLogger("app.catalog")


def load_types(directory: Union[str, Path]) -> List[InfoType]:
    """
    One type per regular file in `directory`: the id is the file name without
    its extension, the schema is the file content as-is.
    Any I/O error fails the whole load.
    """
    root = Path(directory)
    types: List[InfoType] = []
    try:
        for path in sorted(root.iterdir(), key=lambda p: p.name):
            if not path.is_file():
                continue
            types.append(InfoType(type_id=path.stem, schema=path.read_bytes()))
    except OSError as e:
        raise CatalogLoadFailure(str(root), str(e)) from e

    logger.debug("Loaded %d type(s) from %s", len(types), root)
    return types


def refresh_catalog(registry: JobRegistry, directory: Union[str, Path]) -> List[InfoType]:
    """Load the type directory and swap it into `registry`; the registry is untouched on failure."""
    types = load_types(directory)
    registry.apply_catalog(types)
    logger.info("Type catalog refreshed from %s: %s", directory, [t.type_id for t in types])
    return types
