from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit

from .errors import InvalidURL, MissingArgument, NotAComicPage, UnsupportedSite

SITE_HOST = "drawnstories.ru"
LISTING_PREFIX = "/comics/"


def validate_listing_url(candidate: Optional[str]) -> str:
    """Return ``candidate`` if it points at a drawnstories.ru comic listing.

    Checks run in order and stop at the first failure: presence, syntax,
    host presence, host match and finally the ``/comics/`` path prefix.
    """
    if candidate is None or not candidate.strip():
        raise MissingArgument("URL to the comic book is required")

    try:
        parts = urlsplit(candidate)
        host = parts.hostname
    except ValueError as exc:
        raise InvalidURL(f"invalid URL passed: {exc}") from exc

    if not parts.netloc or not host:
        raise InvalidURL(f"invalid URL passed: {candidate}")
    # host and port as written, without userinfo
    if parts.netloc.rpartition("@")[2] != SITE_HOST:
        raise UnsupportedSite(f"unsupported site: {parts.netloc}")
    if not parts.path.startswith(LISTING_PREFIX):
        raise NotAComicPage("not a comic book page")

    return candidate


def publisher_from_url(listing_url: str) -> str:
    # /comics/<publisher>/<series>
    segments = urlsplit(listing_url).path.split("/")
    if len(segments) < 3:
        return ""
    return segments[2].replace("-", " ")


def book_identifier(href: str) -> Optional[str]:
    segments = href.split("/")
    if len(segments) < 2 or not segments[-2]:
        return None
    return segments[-2]


def page_filename(page_url: str) -> str:
    """Final path segment of ``page_url``, kept percent-encoded.

    Returns an empty string when the segment cannot be used as a file name
    inside the staging directory.
    """
    path = urlsplit(page_url).path
    name = path.rsplit("/", 1)[-1].rsplit("\\", 1)[-1]
    if name in ("", ".", ".."):
        return ""
    return name
