from .cli import parse_args, usage, validate_args
from .downloader import archive_book, archive_books, download_comics
from .models import Book
from .parsing import fetch_listing, parse_listing
from .selection import select_books
from .urls import validate_listing_url

__all__ = [
    "Book",
    "archive_book",
    "archive_books",
    "download_comics",
    "fetch_listing",
    "parse_args",
    "parse_listing",
    "select_books",
    "usage",
    "validate_args",
    "validate_listing_url",
]
