from __future__ import annotations

import cloudscraper
import requests

from .errors import EmptyResponse, FetchError

DEFAULT_TIMEOUT = 60.0


def create_scraper() -> cloudscraper.CloudScraper:
    return cloudscraper.create_scraper(
        browser={"browser": "chrome", "platform": "windows", "mobile": False},
    )


def fetch(
    scraper: requests.Session,
    url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    purpose: str,
) -> requests.Response:
    """GET ``url`` once, without retries.

    Raises FetchError on transport failure or a non-success status and
    EmptyResponse when the server answers with an empty body.
    """
    try:
        response = scraper.request(method="GET", url=url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        message = str(exc).strip() or exc.__class__.__name__
        raise FetchError(f"{purpose} failed for {url}: {message}") from exc

    if not response.content:
        raise EmptyResponse(f"{purpose} returned an empty page: {url}")
    return response
