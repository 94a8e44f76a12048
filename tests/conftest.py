"""Shared fixtures for the hippo test suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from loguru import logger

from src.infra.k8s import ClusterGateway, CommandResult
from tests.project_files import write_project


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A project with the acme configuration and manifest template."""
    return write_project(tmp_path)


@pytest.fixture
def mock_gateway() -> MagicMock:
    """A ClusterGateway double whose secret deletes succeed."""
    gateway = MagicMock(spec=ClusterGateway)
    gateway.delete_secret.return_value = CommandResult(success=True)
    return gateway


@pytest.fixture
def mock_console() -> MagicMock:
    """A console double accepting info/ok/warn calls."""
    return MagicMock()


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="DEBUG")
    yield messages
    logger.remove(handler_id)
