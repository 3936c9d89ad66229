"""Tests for the quote provider registry."""

from unittest.mock import patch

import pytest

from quoteproxy.services import quote_providers
from quoteproxy.services.quote_providers import (
    close_quote_provider,
    get_quote_provider,
    init_quote_provider,
)
from quoteproxy.services.quote_providers.finnhub import FinnhubProvider


@pytest.fixture(autouse=True)
async def reset_registry():
    yield
    await close_quote_provider()


async def test_get_before_init_raises():
    with pytest.raises(RuntimeError):
        get_quote_provider()


async def test_init_builds_finnhub_from_settings():
    with patch.object(quote_providers, "settings") as mock_settings:
        mock_settings.quote_provider = "finnhub"
        mock_settings.finnhub_token = "abc"
        mock_settings.finnhub_base_url = "https://finnhub.test/api/v1"
        mock_settings.upstream_timeout = 2.5
        provider = init_quote_provider()

    assert isinstance(provider, FinnhubProvider)
    assert get_quote_provider() is provider
    assert str(provider._client.base_url).startswith("https://finnhub.test/api/v1")
    assert provider._client.timeout.read == 2.5


async def test_unknown_provider_rejected():
    with patch.object(quote_providers, "settings") as mock_settings:
        mock_settings.quote_provider = "bloomberg"
        with pytest.raises(ValueError, match="Unknown quote provider"):
            init_quote_provider()


async def test_close_resets_singleton():
    init_quote_provider()
    await close_quote_provider()
    with pytest.raises(RuntimeError):
        get_quote_provider()
