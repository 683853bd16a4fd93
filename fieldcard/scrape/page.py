from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Optional

from playwright.sync_api import Page, TimeoutError as PlaywrightTimeoutError

from fieldcard.text_clean.page_clean import normalize_whitespace, select_page_text


@dataclass
class PageCapture:
    title: str
    url: str
    text: str


def capture_page(page: Page, url: str, selector: Optional[str] = None) -> PageCapture:
    """
    Open `url` and capture (title, final url, visible text).
    `selector` narrows the capture to one element, the way a user selection
    narrows it in the extension.
    """
    page.goto(url, wait_until="domcontentloaded")
    try:
        page.wait_for_load_state("networkidle", timeout=15000)
    except PlaywrightTimeoutError:
        # busy pages never go idle; the DOM is already loaded
        pass

    selection = None
    if selector:
        loc = page.locator(selector).first
        if loc.count() > 0:
            selection = loc.inner_text()

    body = page.locator("body").inner_text()
    text = select_page_text(selection, body)

    return PageCapture(
        title=page.title().strip(),
        url=page.url,
        text=normalize_whitespace(text),
    )


def to_dict(capture: PageCapture) -> dict:
    return asdict(capture)
