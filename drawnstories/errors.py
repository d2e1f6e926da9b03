from __future__ import annotations


class DrawnStoriesError(RuntimeError):
    """Base class for every failure that aborts a download run."""


class MissingArgument(DrawnStoriesError):
    pass


class InvalidURL(DrawnStoriesError):
    pass


class UnsupportedSite(DrawnStoriesError):
    pass


class NotAComicPage(DrawnStoriesError):
    pass


class FetchError(DrawnStoriesError):
    pass


class EmptyResponse(DrawnStoriesError):
    pass


class NoBooksFound(DrawnStoriesError):
    pass


class WriteError(DrawnStoriesError):
    pass
