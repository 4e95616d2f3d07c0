"""Shared fixtures for integration tests.

Integration tests talk to the live catalog. They are skipped unless
RUN_CRUNCHY_NETWORK_TESTS=1; personalized endpoints additionally need
CRUNCHY_ACCOUNT_ID and CRUNCHY_ACCESS_TOKEN.
"""

import os

import pytest

from crunchy.catalog import ClientConfig


@pytest.fixture
def catalog_config() -> ClientConfig:
    account_id = os.environ.get("CRUNCHY_ACCOUNT_ID")
    token = os.environ.get("CRUNCHY_ACCESS_TOKEN")
    if not account_id or not token:
        pytest.skip("Set CRUNCHY_ACCOUNT_ID and CRUNCHY_ACCESS_TOKEN to run")
    return ClientConfig(
        account_id=account_id,
        locale=os.environ.get("CRUNCHY_LOCALE", "en-US"),
        headers={"Authorization": f"Bearer {token}"},
    )
