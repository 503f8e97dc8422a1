# src/services/errors.py

"""Error types surfaced by the search proxy.

Every error carries the HTTP status and the user-facing message that the
API layer returns as ``{serverName, error}``.
"""


class ProductSearchError(Exception):
    """Base class for failures reported to the caller."""

    status_code: int = 500
    default_message: str = "Failed to contact the external product API"

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class MissingQueryError(ProductSearchError):
    """The search term was missing or blank."""

    status_code = 400
    default_message = "Search term (?q=) is required"


class UpstreamError(ProductSearchError):
    """The external API answered with a non-success status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message, status_code)


class UpstreamRateLimitError(UpstreamError):
    default_message = (
        "External API rate limit exceeded. Please try again later."
    )

    def __init__(self, message: str | None = None) -> None:
        super().__init__(429, message)


class UpstreamServerError(UpstreamError):
    default_message = "External product service is currently unavailable."


class UpstreamUnreachableError(ProductSearchError):
    """Timeout, DNS failure or refused connection to the external API."""

    status_code = 503
    default_message = (
        "Could not reach the external product service. Please try again."
    )


def classify_upstream_status(status_code: int) -> UpstreamError:
    """Pick the error bucket for a non-success upstream status."""
    if status_code == 429:
        return UpstreamRateLimitError()
    if status_code >= 500:
        return UpstreamServerError(status_code)
    return UpstreamError(status_code)
