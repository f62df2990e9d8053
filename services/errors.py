"""
Trello error taxonomy.

The gateway maps every failed HTTP exchange to one of these classes.
Callers above the gateway propagate them unchanged; only tool dispatch
turns them into an error result for the client.
"""

# Friendly messages by HTTP status
_STATUS_MESSAGES = {
    400: "The request was invalid. Please check your input.",
    401: "Authentication failed. Please check your API key and token.",
    403: "You do not have permission to access this resource.",
    404: "The requested resource was not found.",
    429: "Rate limit exceeded. Please try again later.",
}
_SERVER_ERROR_MESSAGE = "The server encountered an error. Please try again later."


class TrelloError(Exception):
    """Base class for all Trello failures."""


class TrelloAPIError(TrelloError):
    """Trello answered with a non-2xx status."""

    def __init__(self, status_code: int, method: str, path: str, detail: str = "") -> None:
        self.status_code = status_code
        self.method = method
        self.path = path
        self.detail = detail
        super().__init__(self._format())

    def _format(self) -> str:
        summary = _STATUS_MESSAGES.get(self.status_code)
        if summary is None:
            summary = _SERVER_ERROR_MESSAGE if self.status_code >= 500 else "An error occurred."
        message = f"{summary} (HTTP {self.status_code} on {self.method} {self.path})"
        if self.detail:
            message += f": {self.detail}"
        return message


class TrelloBadRequestError(TrelloAPIError):
    """HTTP 400."""


class TrelloAuthenticationError(TrelloAPIError):
    """HTTP 401 or 403."""


class TrelloNotFoundError(TrelloAPIError):
    """HTTP 404."""


class TrelloRateLimitError(TrelloAPIError):
    """HTTP 429 that outlasted the retry ceiling."""


class TrelloServerError(TrelloAPIError):
    """HTTP 5xx."""


class TrelloConnectionError(TrelloError):
    """The request never produced an HTTP response (DNS, TCP, TLS, timeout)."""

    def __init__(self, method: str, path: str, reason: str) -> None:
        self.method = method
        self.path = path
        self.reason = reason
        super().__init__(f"Could not reach Trello for {method} {path}: {reason}")


def error_for_status(status_code: int, method: str, path: str, detail: str = "") -> TrelloAPIError:
    """Build the typed error for a non-2xx status."""
    if status_code == 400:
        cls = TrelloBadRequestError
    elif status_code in (401, 403):
        cls = TrelloAuthenticationError
    elif status_code == 404:
        cls = TrelloNotFoundError
    elif status_code == 429:
        cls = TrelloRateLimitError
    elif status_code >= 500:
        cls = TrelloServerError
    else:
        cls = TrelloAPIError
    return cls(status_code, method, path, detail)
