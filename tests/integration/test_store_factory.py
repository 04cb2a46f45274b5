"""Tests for backend selection at composition time."""

import pytest

from gm_tracker.boundary.store import LocalStore, RemoteStore, create_data_store
from gm_tracker.configs import Settings
from gm_tracker.configs.local_store import LocalStoreSettings
from gm_tracker.configs.remote_backend import RemoteBackendSettings


def _settings(url: str, key: str) -> Settings:
    return Settings(
        remote=RemoteBackendSettings(url=url, anon_key=key),
        local_store=LocalStoreSettings(database_url="sqlite+aiosqlite:///:memory:"),
    )


@pytest.mark.asyncio
async def test_url_and_key_select_remote_store() -> None:
    store = create_data_store(_settings("https://example.supabase.co", "anon"))

    assert isinstance(store, RemoteStore)
    assert store.backend_name == "remote"
    await store.aclose()


@pytest.mark.asyncio
@pytest.mark.parametrize("url,key", [("", ""), ("https://example.supabase.co", ""), ("", "anon"), ("  ", "anon")])
async def test_missing_credential_selects_local_store(url: str, key: str) -> None:
    store = create_data_store(_settings(url, key))

    assert isinstance(store, LocalStore)
    assert store.backend_name == "local"
    await store.aclose()
