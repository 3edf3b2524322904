from __future__ import annotations

from typing import Any

import pytest

from spark_notify.config import DeliveryConfig
from spark_notify.drone.models import BuildInfo, RepositoryInfo

from helpers import FakeSession


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def repo() -> RepositoryInfo:
    return RepositoryInfo(owner="octocat", name="hello-world", full_name="octocat/hello-world")


@pytest.fixture
def build() -> BuildInfo:
    return BuildInfo(
        event="push",
        number=42,
        commit="6f1c2b9",
        branch="main",
        author="Octo Cat",
        email="octo@example.com",
        status="success",
        link="https://drone.example.com/octocat/hello-world/42",
        commit_link="https://github.com/octocat/hello-world/commit/6f1c2b9",
        message="Fix the flux capacitor",
        started=1700000000,
        created=1699999990,
    )


@pytest.fixture
def make_config():
    def _make(**overrides: Any) -> DeliveryConfig:
        values: dict[str, Any] = {"auth_token": "T", "api_url": "https://spark.test/v1"}
        values.update(overrides)
        return DeliveryConfig(**values)

    return _make
