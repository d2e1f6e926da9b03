from __future__ import annotations

import tempfile
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Mapping, Optional, Sequence

from .archive import write_archive
from .errors import WriteError
from .http_utils import DEFAULT_TIMEOUT, create_scraper, fetch
from .metadata import write_metadata
from .models import Book
from .parsing import fetch_listing
from .selection import select_books
from .ui import ConsoleUI, ProgressSink
from .urls import page_filename, validate_listing_url


def download_page(
    scraper,
    page_url: str,
    staging_dir: Path,
    position: int,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> Path:
    response = fetch(scraper, page_url, timeout=timeout, purpose=f"Page {position} request")
    filename = page_filename(page_url) or f"page-{position:04d}"
    target = staging_dir / filename
    try:
        target.write_bytes(response.content)
    except OSError as exc:
        raise WriteError(f"failed to save {filename}: {exc}") from exc
    return target


def _download_pages(
    scraper,
    book: Book,
    staging_dir: Path,
    *,
    timeout: float,
    workers: int,
) -> None:
    if workers <= 1:
        for position, page_url in enumerate(book.pages, start=1):
            download_page(scraper, page_url, staging_dir, position, timeout=timeout)
        return

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix=book.identifier) as executor:
        futures = [
            executor.submit(download_page, scraper, page_url, staging_dir, position, timeout=timeout)
            for position, page_url in enumerate(book.pages, start=1)
        ]
        try:
            for future in futures:
                future.result()
        except BaseException:
            for future in futures:
                future.cancel()
            raise


def archive_book(
    book: Book,
    output_directory: Path,
    *,
    scraper,
    timeout: float = DEFAULT_TIMEOUT,
    workers: int = 1,
    ui: ProgressSink,
) -> Optional[Path]:
    """Download every page of ``book`` and pack it as ``<identifier>.cbz``.

    The staging directory lives only for the duration of this call, whatever
    the outcome. Returns None for books without pages.
    """
    if not book.pages:
        return None

    ui.book_started(book.identifier)
    try:
        staging = tempfile.TemporaryDirectory(prefix=f"{book.identifier}-")
    except OSError as exc:
        raise WriteError(f"failed to create temp dir: {exc}") from exc

    with staging as staging_name:
        staging_dir = Path(staging_name)
        _download_pages(scraper, book, staging_dir, timeout=timeout, workers=workers)
        write_metadata(staging_dir, book)
        return write_archive(staging_dir, output_directory / book.archive_name)


def archive_books(
    books: Mapping[str, Book],
    output_directory: Path,
    *,
    scraper,
    timeout: float = DEFAULT_TIMEOUT,
    workers: int = 1,
    ui: ProgressSink,
) -> list[Path]:
    written: list[Path] = []
    for identifier in sorted(books):
        archive_path = archive_book(
            books[identifier],
            output_directory,
            scraper=scraper,
            timeout=timeout,
            workers=workers,
            ui=ui,
        )
        if archive_path is not None:
            written.append(archive_path)
    return written


def download_comics(
    url: Optional[str],
    issues: Sequence[str],
    output_directory: Path,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    workers: int = 1,
    ui: Optional[ProgressSink] = None,
    scraper=None,
) -> list[Path]:
    internal_ui = ui or ConsoleUI()
    should_finalize = ui is None

    try:
        listing_url = validate_listing_url(url)
        internal_ui.page_resolved(listing_url)

        try:
            output_directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise WriteError(f"failed to create output directory {output_directory}: {exc}") from exc

        session = scraper or create_scraper()
        books = fetch_listing(session, listing_url, timeout=timeout, ui=internal_ui)
        selected = select_books(books, issues, ui=internal_ui)
        written = archive_books(
            selected,
            output_directory,
            scraper=session,
            timeout=timeout,
            workers=workers,
            ui=internal_ui,
        )
        internal_ui.finished()
        return written
    except Exception as exc:
        internal_ui.failed(exc)
        raise
    finally:
        if should_finalize and isinstance(internal_ui, ConsoleUI):
            internal_ui.finalize()
