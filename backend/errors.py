"""Error taxonomy for the summarise pipeline.

Every failure the pipeline reports to a caller is a :class:`SummariseError`
carrying a user-facing ``message`` and the HTTP ``status_code`` the API
layer responds with.
"""

from __future__ import annotations


class SummariseError(Exception):
    """Base class for all pipeline failures."""

    status_code: int = 500
    default_message: str = "Failed to summarize the blog."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(SummariseError):
    """The address is missing or not an http(s) URL."""

    status_code = 400
    default_message = "Invalid URL"


class FetchError(SummariseError):
    """The page (or the relay in front of it) could not be retrieved."""

    status_code = 500

    def __init__(self, url: str, cause: str) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to fetch the page: {cause}")


class ContentTooShortError(SummariseError):
    """The extracted text is below the minimum viable length."""

    status_code = 400
    default_message = "Blog content is too short."


class InternalError(SummariseError):
    """Catch-all for unexpected failures; never exposes internal detail."""

    status_code = 500
