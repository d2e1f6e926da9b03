from __future__ import annotations

import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from .errors import NoBooksFound
from .http_utils import DEFAULT_TIMEOUT, fetch
from .models import Book
from .urls import book_identifier, publisher_from_url

PAGE_LINK_SELECTOR = "a.fancybox"

_LEADING_DIGITS = re.compile(r"\d+")


def parse_issue_number(identifier: str, *, ui=None) -> int:
    parts = identifier.split("-")
    if len(parts) < 2:
        return 0

    suffix = parts[-1]
    match = _LEADING_DIGITS.match(suffix)
    if match:
        return int(match.group())

    message = f"Failed to parse issue number of {identifier!r}; using 0."
    if ui:
        ui.log_event(message, level="warning")
    else:
        print(f"    Warning: {message}", flush=True)
    return 0


def parse_listing(html: str, listing_url: str, *, ui=None) -> dict[str, Book]:
    """Group the page links of a listing page by book.

    Pages keep the order in which their anchors appear in the document.
    Title and issue number come from the first anchor seen for a book.
    """
    soup = BeautifulSoup(html, "html.parser")
    publisher = publisher_from_url(listing_url)

    pages: dict[str, list[str]] = {}
    details: dict[str, tuple[str, int]] = {}

    for link in soup.select(PAGE_LINK_SELECTOR):
        href = (link.get("href") or "").strip()
        if not href:
            continue
        identifier = book_identifier(href)
        if identifier is None:
            continue

        if identifier not in pages:
            pages[identifier] = []
            title = (link.get("title") or "").strip()
            details[identifier] = (title, parse_issue_number(identifier, ui=ui))
        pages[identifier].append(urljoin(listing_url, href))

    if not pages:
        raise NoBooksFound("no books found")

    return {
        identifier: Book(
            identifier=identifier,
            title=details[identifier][0],
            issue_number=details[identifier][1],
            publisher=publisher,
            pages=tuple(urls),
        )
        for identifier, urls in pages.items()
    }


def fetch_listing(
    scraper,
    listing_url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    ui=None,
) -> dict[str, Book]:
    response = fetch(scraper, listing_url, timeout=timeout, purpose="Listing page request")
    books = parse_listing(response.text, listing_url, ui=ui)
    if ui:
        total_pages = sum(book.page_count for book in books.values())
        ui.log_event(
            f"Found {len(books)} books ({total_pages} pages) on {listing_url}.",
            level="success",
        )
    return books
