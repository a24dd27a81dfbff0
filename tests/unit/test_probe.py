"""PageProbe 유닛 테스트 (Fake 브라우저)"""

import pytest
from playwright.async_api import Error as PlaywrightError

from product_search.core.exceptions import NavigationFailedException
from product_search.crawlers.probe import PageProbe
from tests.fixtures import EXAMPLE_DOMAIN_PAGE, FakePage, FakeProvider


@pytest.mark.asyncio
async def test_fetch_title_defaults_to_probe_url(test_settings):
    page = FakePage(EXAMPLE_DOMAIN_PAGE, title=" Example Domain ")
    provider = FakeProvider(page)

    title = await PageProbe(provider, test_settings).fetch_title()

    assert title == "Example Domain"
    assert page.goto_calls[0]["url"] == test_settings.probe_url
    assert provider.acquired == provider.released == 1


@pytest.mark.asyncio
async def test_fetch_heading_uses_configured_probe_url(test_settings):
    config = test_settings.model_copy(update={"probe_url": "https://example.org"})
    provider = FakeProvider(FakePage(EXAMPLE_DOMAIN_PAGE))

    heading = await PageProbe(provider, config).fetch_heading()

    assert heading == "Example Domain"
    assert [call["url"] for call in provider.page.goto_calls] == ["https://example.org"]
    assert provider.acquired == provider.released == 1


@pytest.mark.asyncio
async def test_navigation_failure_releases_session(test_settings):
    provider = FakeProvider(FakePage(goto_error=PlaywrightError("net::ERR_CONNECTION_REFUSED")))

    with pytest.raises(NavigationFailedException):
        await PageProbe(provider, test_settings).fetch_title()

    assert provider.acquired == provider.released == 1
