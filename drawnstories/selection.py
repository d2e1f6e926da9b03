from __future__ import annotations

from typing import Mapping, Sequence

from .models import Book


def select_books(
    books: Mapping[str, Book],
    issues: Sequence[str],
    *,
    ui=None,
) -> Mapping[str, Book]:
    """Keep only books whose identifier ends with ``-<issue>`` for any issue.

    Without issues the mapping is returned as is. An empty selection is not an
    error: the run simply has nothing to archive.
    """
    if not issues:
        return books

    suffixes = tuple(f"-{issue}" for issue in issues)
    selected = {
        identifier: book
        for identifier, book in books.items()
        if identifier.endswith(suffixes)
    }

    if not selected and ui:
        ui.log_event(
            f"No books match issue numbers {', '.join(issues)}.",
            level="warning",
        )
    return selected
