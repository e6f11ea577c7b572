"""Headless-browser source using Playwright with stealth."""

import asyncio
import logging

from playwright.async_api import Page, async_playwright
from playwright_stealth import Stealth

from nowshowing.config import settings
from nowshowing.sources.base import BaseSource, SourceError

logger = logging.getLogger(__name__)

BACKOFF_BASE = 5  # seconds


class BrowserSource(BaseSource):
    """
    Render the listings page in headless Chromium.

    Cinema chain sites build their listings client-side, so a plain HTTP GET
    returns an empty shell. The page is loaded, the cookie banner dismissed,
    and after a short settle delay either the visible text (``innerText``)
    or the rendered HTML is returned.
    """

    name = "browser"

    def __init__(
        self,
        url: str | None = None,
        want_html: bool = False,
        max_retries: int | None = None,
    ) -> None:
        """
        Args:
            url: Listings page (uses settings if not provided)
            want_html: Return rendered HTML instead of innerText
            max_retries: Attempts before giving up (uses settings if not provided)
        """
        self.url = url or settings.cinema_url
        self.want_html = want_html
        self.max_retries = max_retries or settings.scrape_max_retries

    async def fetch(self) -> str:
        """Load the page, retrying with exponential backoff."""
        last_error: Exception | None = None

        for attempt in range(1, self.max_retries + 1):
            try:
                document = await self._load()
                logger.info(
                    f"Browser: loaded {self.url} on attempt {attempt} ({len(document)} chars)"
                )
                return document
            except Exception as e:
                last_error = e
                logger.warning(
                    f"Browser: error on attempt {attempt}/{self.max_retries}: {e}"
                )
                if attempt < self.max_retries:
                    delay = BACKOFF_BASE * (2 ** (attempt - 1))
                    logger.info(f"Browser: retrying in {delay}s...")
                    await asyncio.sleep(delay)

        raise SourceError(
            f"Failed to load {self.url} after {self.max_retries} attempts: {last_error}"
        )

    async def _load(self) -> str:
        stealth = Stealth()
        async with stealth.use_async(async_playwright()) as p:
            browser = await p.chromium.launch(
                headless=True,
                args=["--no-sandbox", "--disable-setuid-sandbox"],
            )
            try:
                context = await browser.new_context(
                    locale="en-GB",
                    timezone_id=settings.timezone,
                )
                page = await context.new_page()
                await page.goto(
                    self.url,
                    wait_until="domcontentloaded",
                    timeout=settings.scrape_timeout * 1000,
                )
                await self._dismiss_consent(page)
                await page.wait_for_timeout(settings.page_settle_ms)

                if self.want_html:
                    return await page.content()
                return await page.evaluate("() => document.body.innerText")
            finally:
                await browser.close()

    async def _dismiss_consent(self, page: Page) -> None:
        """Click the first visible cookie-consent button, if any."""
        for selector in settings.consent_selectors:
            try:
                button = page.locator(selector).first
                if await button.is_visible(timeout=1000):
                    await button.click(timeout=2000)
                    logger.debug(f"Browser: dismissed consent banner via {selector!r}")
                    return
            except Exception as e:
                logger.debug(f"Browser: consent selector {selector!r} not usable: {e}")
