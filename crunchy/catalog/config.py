"""Shared client configuration.

This module centralizes base URLs and defaults used by the REST transport and
the endpoint definitions so the client can stay small and focused.
"""

from __future__ import annotations

from dataclasses import dataclass, field

BASE_URL = "https://www.crunchyroll.com"

DEFAULT_LOCALE = "en-US"

# Items requested per round-trip unless the caller asks otherwise
DEFAULT_PAGE_SIZE = 20

# Seconds, applied to the whole request by the HTTP client
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ClientConfig:
    """Settings for a CatalogClient.

    Attributes:
        base_url: Scheme and host every endpoint path is joined onto
        locale: Locale sent with every localized request
        account_id: Account the personalized endpoints are issued for
        page_size: Items requested per page by paged endpoints
        timeout: Total request timeout in seconds
        headers: Extra headers sent with every request (e.g. Authorization)
    """

    base_url: str = BASE_URL
    locale: str = DEFAULT_LOCALE
    account_id: str | None = None
    page_size: int = DEFAULT_PAGE_SIZE
    timeout: float = DEFAULT_TIMEOUT
    headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.page_size <= 0:
            raise ValueError("page_size must be positive")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if not self.base_url:
            raise ValueError("base_url cannot be empty")
