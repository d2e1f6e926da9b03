from __future__ import annotations

import os
import sys
import threading
from typing import Optional, Protocol


class ProgressSink(Protocol):
    def page_resolved(self, url: str) -> None: ...

    def book_started(self, identifier: str) -> None: ...

    def finished(self) -> None: ...

    def failed(self, error: BaseException) -> None: ...

    def log_event(self, message: str, *, level: str = "info") -> None: ...


class ConsoleUI:
    _COLORS = {
        "info": "36",      # cyan
        "success": "32",   # green
        "warning": "33",   # yellow
        "error": "31",     # red
        "muted": "90",     # bright black / grey
    }
    _LABELS = {
        "info": "INFO",
        "success": "DONE",
        "warning": "WARN",
        "error": "ERR",
        "muted": "...",
    }
    _HINT = "Press Ctrl+C to quit."

    def __init__(self) -> None:
        self._supports_ansi = sys.stdout.isatty() and os.getenv("TERM") != "dumb"
        self._lock = threading.RLock()
        self._status_line: Optional[str] = None
        self._status_level = "info"
        self._detail_line: Optional[str] = None
        self._detail_level = "muted"
        self._rendered_lines = 0
        self._last_line_length = 0
        self._current_book: Optional[str] = None
        self._books_done = 0

        if os.name == "nt" and self._supports_ansi:
            try:
                import colorama
            except ImportError:
                self._supports_ansi = False
            else:
                colorama.just_fix_windows_console()

    def _format_plain(self, message: str, level: str, *, indent: bool = False) -> str:
        if level == "muted":
            prefix = "  " if indent else ""
            return f"{prefix}{message}"
        label = self._LABELS.get(level, level.upper())
        prefix = f"[{label}] "
        if indent:
            prefix = "  " + prefix
        return prefix + message

    def _colorize(self, text: str, level: str) -> str:
        if not self._supports_ansi:
            return text
        code = self._COLORS.get(level)
        if not code:
            return text
        return f"\x1b[{code}m{text}\x1b[0m"

    def _clear_fallback_line(self) -> None:
        if not self._last_line_length:
            return
        sys.stdout.write("\r" + " " * self._last_line_length + "\r")
        sys.stdout.flush()
        self._last_line_length = 0

    def _clear_render(self) -> None:
        if not self._supports_ansi or not self._rendered_lines:
            return
        sys.stdout.write("\r")
        for index in range(self._rendered_lines):
            sys.stdout.write("\x1b[2K")
            if index < self._rendered_lines - 1:
                sys.stdout.write("\x1b[1A")
        sys.stdout.write("\r")
        sys.stdout.flush()
        self._rendered_lines = 0

    def _compose_box_lines(self) -> list[str]:
        if not self._status_line:
            return []
        content = self._status_line.splitlines()
        if self._detail_line:
            content.extend(self._detail_line.splitlines())

        level = self._status_level
        header_text = f"STATUS :: {self._LABELS.get(level, level.upper())}"
        inner_width = max(len(header_text), max(len(line) for line in content))
        horizontal = "+" + "-" * (inner_width + 2) + "+"

        lines = [horizontal]
        lines.append(f"| {self._colorize(header_text.center(inner_width), level)} |")
        lines.append(horizontal)
        for index, line in enumerate(content):
            line_level = level if index == 0 else self._detail_level
            lines.append(f"| {self._colorize(line.ljust(inner_width), line_level)} |")
        lines.append(horizontal)
        return lines

    def _render(self) -> None:
        if not self._supports_ansi:
            self._render_fallback()
            return
        lines = self._compose_box_lines()
        self._clear_render()
        if not lines:
            return
        sys.stdout.write("\n".join(lines))
        sys.stdout.flush()
        self._rendered_lines = len(lines)

    def _render_fallback(self) -> None:
        components: list[str] = []
        if self._status_line:
            components.append(self._format_plain(self._status_line, self._status_level))
        if self._detail_line:
            components.append(self._format_plain(self._detail_line, self._detail_level, indent=True))

        if not components:
            self._clear_fallback_line()
            return
        combined = " | ".join(components)
        padding = max(0, self._last_line_length - len(combined))
        sys.stdout.write("\r" + combined + " " * padding)
        sys.stdout.flush()
        self._last_line_length = len(combined)

    def update_status(self, message: Optional[str], *, level: str = "info") -> None:
        with self._lock:
            self._status_line = message
            self._status_level = level
            self._render()

    def update_detail(self, message: Optional[str], *, level: str = "muted") -> None:
        with self._lock:
            self._detail_line = message
            self._detail_level = level
            self._render()

    def log_event(self, message: str, *, level: str = "info") -> None:
        with self._lock:
            if not self._supports_ansi:
                self._clear_fallback_line()
                print(self._format_plain(message, level), flush=True)
                self._render_fallback()
                return
            self._clear_render()
            print(self._colorize(message, level), flush=True)
            self._render()

    def _close_current_book(self) -> None:
        if self._current_book is None:
            return
        self.log_event(f"Downloaded book {self._current_book!r} ✔", level="success")
        self._books_done += 1
        self._current_book = None

    def page_resolved(self, url: str) -> None:
        with self._lock:
            self.update_status(f"Searching comics on {url!r}...", level="info")
            self.update_detail(self._HINT)

    def book_started(self, identifier: str) -> None:
        with self._lock:
            self._close_current_book()
            self._current_book = identifier
            self.update_status(f"Downloading book {identifier!r}...", level="info")
            self.update_detail(self._HINT)

    def finished(self) -> None:
        with self._lock:
            self._close_current_book()
            self.update_detail(None)
            self.update_status(None)
            self.log_event(f"Finished: {self._books_done} book(s) archived.", level="success")

    def failed(self, error: BaseException) -> None:
        with self._lock:
            self._current_book = None
            self.update_detail(None)
            self.update_status(None)
            self.log_event(f"ERROR: {error}", level="error")

    def finalize(self) -> None:
        with self._lock:
            if not self._supports_ansi:
                self._clear_fallback_line()
                return
            self._clear_render()
