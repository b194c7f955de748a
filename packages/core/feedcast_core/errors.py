"""Exception hierarchy."""


class FeedcastError(Exception):
    """Base class for feedcast errors."""


class FeedRenderError(FeedcastError):
    """A feed could not be written to its sink."""

    def __init__(self, message: str, element: str | None = None):
        super().__init__(message)
        self.element = element
