"""Shared test fixtures."""

import pytest

from app.core.registry import JobRegistry
from app.models import InfoType

TYPE1_SCHEMA = b'{"title": "Type 1"}'


@pytest.fixture
def registry() -> JobRegistry:
    return JobRegistry()


@pytest.fixture
def registry_with_type1(registry: JobRegistry) -> JobRegistry:
    registry.apply_catalog([InfoType(type_id="type1", schema=TYPE1_SCHEMA)])
    return registry


@pytest.fixture
def types_dir(tmp_path):
    (tmp_path / "type1.json").write_bytes(TYPE1_SCHEMA)
    return tmp_path
