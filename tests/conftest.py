from __future__ import annotations

import pytest

from grackdb_provider.adapters.grackdb import GrackDBClient
from grackdb_provider.config import ProviderConfig
from grackdb_provider.provider import Provider
from tests.support.fake_grackdb import API_URL, TOKEN, FakeGrackDB


@pytest.fixture(autouse=True)
def _clear_grackdb_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GRACKDB_API_URL", raising=False)
    monkeypatch.delenv("GRACKDB_TOKEN", raising=False)


@pytest.fixture
def fake_grackdb() -> FakeGrackDB:
    return FakeGrackDB(token=TOKEN)


@pytest.fixture
def provider_config() -> ProviderConfig:
    return ProviderConfig(api_url=API_URL, token=TOKEN)


@pytest.fixture
def grackdb_client(fake_grackdb: FakeGrackDB, provider_config: ProviderConfig) -> GrackDBClient:
    return GrackDBClient(config=provider_config, client_factory=fake_grackdb.client_factory())


@pytest.fixture
def provider(grackdb_client: GrackDBClient) -> Provider:
    return Provider(executor=grackdb_client)
