"""Shared fixtures: an in-memory HTTP scraper and a recording progress sink."""

from __future__ import annotations

import pytest
import requests

LISTING_URL = "https://drawnstories.ru/comics/Oni-press/rick-and-morty"
IMAGE_ROOT = "https://drawnstories.ru/images/comics/rick-and-morty"


def make_response(url: str, status: int = 200, content: bytes = b"") -> requests.Response:
    response = requests.Response()
    response.url = url
    response.status_code = status
    response.reason = "OK" if status < 400 else "Error"
    response._content = content
    response.encoding = "utf-8"
    return response


class FakeScraper:
    """Serves canned responses keyed by URL and records every request."""

    def __init__(self, routes: dict[str, tuple[int, bytes]] | None = None) -> None:
        self.routes = dict(routes or {})
        self.requested: list[str] = []

    def add(self, url: str, content: bytes, status: int = 200) -> None:
        self.routes[url] = (status, content)

    def request(self, method: str, url: str, timeout: float | None = None, **kwargs) -> requests.Response:
        assert method == "GET"
        self.requested.append(url)
        if url not in self.routes:
            raise requests.ConnectionError(f"no route to {url}")
        status, content = self.routes[url]
        return make_response(url, status, content)


class RecordingUI:
    def __init__(self) -> None:
        self.events: list[tuple] = []
        self.messages: list[tuple[str, str]] = []

    def page_resolved(self, url: str) -> None:
        self.events.append(("page", url))

    def book_started(self, identifier: str) -> None:
        self.events.append(("book", identifier))

    def finished(self) -> None:
        self.events.append(("finished",))

    def failed(self, error: BaseException) -> None:
        self.events.append(("failed", error))

    def log_event(self, message: str, *, level: str = "info") -> None:
        self.messages.append((level, message))


def listing_html(hrefs: list[tuple[str, str]]) -> str:
    anchors = "\n".join(
        f'<a class="fancybox" rel="group" href="{href}" title="{title}"><img src="thumb.jpg"></a>'
        for href, title in hrefs
    )
    return f"<html><body><div class='gallery'>{anchors}</div></body></html>"


@pytest.fixture
def scraper() -> FakeScraper:
    return FakeScraper()


@pytest.fixture
def ui() -> RecordingUI:
    return RecordingUI()
