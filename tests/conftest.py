"""Pytest configuration and fixtures for docsim tests."""

from __future__ import annotations

from typing import Generator

import pytest
from prometheus_client import CollectorRegistry

from docsim.application import WorkloadDriver
from docsim.domain.services import DocumentStore, RelationalDatabase
from docsim.infrastructure.config import Config, get_config
from docsim.infrastructure.metrics import MetricsRegistry


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def test_config() -> Config:
    """Provide a default configuration independent of the environment."""
    return Config()


@pytest.fixture(autouse=True)
def clear_config_cache() -> Generator[None, None, None]:
    """Keep get_config() from leaking environment overrides between tests."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def driver(metrics_registry: MetricsRegistry) -> WorkloadDriver:
    """Provide a workload driver bound to a fresh metrics registry."""
    return WorkloadDriver(metrics=metrics_registry)


@pytest.fixture
def document_store() -> DocumentStore:
    """Provide an empty document store."""
    return DocumentStore()


@pytest.fixture
def relational_db() -> RelationalDatabase:
    """Provide an empty relational database."""
    return RelationalDatabase()


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow tests")
