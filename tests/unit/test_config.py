"""Unit tests for ClientConfig."""

import pytest

from crunchy.catalog import ClientConfig
from crunchy.catalog.config import BASE_URL, DEFAULT_LOCALE, DEFAULT_PAGE_SIZE


def test_defaults():
    config = ClientConfig()
    assert config.base_url == BASE_URL
    assert config.locale == DEFAULT_LOCALE
    assert config.page_size == DEFAULT_PAGE_SIZE
    assert config.account_id is None
    assert config.headers == {}


@pytest.mark.parametrize(
    "kwargs",
    [{"page_size": 0}, {"page_size": -5}, {"timeout": 0}, {"base_url": ""}],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        ClientConfig(**kwargs)


def test_frozen():
    config = ClientConfig()
    with pytest.raises(AttributeError):
        config.locale = "de-DE"
