from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Book:
    identifier: str
    title: str
    issue_number: int
    publisher: str
    pages: tuple[str, ...]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def archive_name(self) -> str:
        return f"{self.identifier}.cbz"
