"""Unit tests for pagination log records."""

from __future__ import annotations

import logging

import pytest

from crunchy.catalog.core import PageFetchError
from crunchy.catalog.runtime.pagination import PagedSequence, PageRequest, PageResponse

LOGGER = "crunchy.catalog.runtime.pagination.telemetry"


async def three_items(request: PageRequest) -> PageResponse[int]:
    items = [0, 1, 2][request.offset : request.offset + request.page_size]
    return PageResponse(items=items, total=3)


async def failing(request: PageRequest) -> PageResponse[int]:
    raise RuntimeError("backend down")


@pytest.mark.asyncio
async def test_fetch_and_exhaustion_logged(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER)

    await PagedSequence(three_items, page_size=2, name="numbers").collect_all()

    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["page_fetched", "page_fetched", "pagination_exhausted", "collect_complete"]
    fetched = caplog.records[1]
    assert fetched.sequence == "numbers"
    assert fetched.offset == 2
    assert fetched.items == 1
    assert caplog.records[-1].pages == 2


@pytest.mark.asyncio
async def test_fetch_error_logged(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER)

    with pytest.raises(PageFetchError):
        await PagedSequence(failing, {"locale": "en-US"}, name="broken").next_page()

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.getMessage() == "page_fetch_error"
    assert record.error_type == "RuntimeError"
    assert record.context == {"locale": "en-US"}
