"""Error types raised by the fetcher, and the classifier for failed responses."""

from enum import Enum

INSUFFICIENT_SCOPES_MESSAGE = "Insufficient scopes to perform request"
ACCESS_FORBIDDEN_MESSAGE = (
    "Request forbidden by GitHub endpoint. Check if abuse detection mechanism "
    "is triggered or rate limit is exceeded."
)


class ResponseErrorType(Enum):
    """Classified causes of a failed request to the API endpoint."""

    # Scopes of the access token are not sufficient to perform the request
    INSUFFICIENT_SCOPES = "INSUFFICIENT_SCOPES"
    # Access token is not valid
    BAD_CREDENTIALS = "BAD_CREDENTIALS"
    # E.g. abuse detection mechanism triggered, or rate limit hit
    ACCESS_FORBIDDEN = "ACCESS_FORBIDDEN"
    # Queried resource (user, organization, ...) does not exist
    NOT_FOUND = "NOT_FOUND"
    # Endpoint responded with a server-side error
    SERVER_ERROR = "SERVER_ERROR"
    # Typically a syntax error in the query sent to the endpoint
    UNKNOWN = "UNKNOWN"
    # Response data did not have the expected shape
    PARSE_ERROR = "PARSE_ERROR"


class ResponseError(Exception):
    """Failed request to the API endpoint, classified by kind."""

    def __init__(self, kind: ResponseErrorType, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name}, {self.message!r})"


class ParseError(ResponseError):
    """Response data could not be parsed according to the expected shape."""

    def __init__(self, data, message: str = "Unable to parse data"):
        super().__init__(ResponseErrorType.PARSE_ERROR, message)
        self.data = data


class ConfigError(RuntimeError):
    """Raised when the fetcher cannot be configured, e.g. no access token."""


class PageStateError(RuntimeError):
    """Raised when a paged request is advanced before any page info was received."""


def not_found(message: str = "Resource not found") -> ResponseError:
    return ResponseError(ResponseErrorType.NOT_FOUND, message)


def classify_error(
    status_code: int | None,
    message: str | None = None,
    errors: list[dict] | None = None,
) -> ResponseError:
    """Map a failed response to a classified ResponseError.

    Args:
        status_code: HTTP status code, or None when the request never got a response
        message: Message provided by the transport, if any
        errors: Nested GraphQL ``errors`` array from the response body

    Only the first nested error is consulted.
    """
    if status_code is None:
        return ResponseError(
            ResponseErrorType.UNKNOWN, message or "Request failed without a response"
        )

    if status_code >= 500:
        return ResponseError(
            ResponseErrorType.SERVER_ERROR,
            message or f"GitHub endpoint responded with server error (status code {status_code})",
        )

    if status_code == 401:
        return ResponseError(
            ResponseErrorType.BAD_CREDENTIALS, message or "Bad credentials provided"
        )

    if status_code == 403:
        return ResponseError(
            ResponseErrorType.ACCESS_FORBIDDEN, message or ACCESS_FORBIDDEN_MESSAGE
        )

    if status_code == 200 and errors:
        if not isinstance(errors, list):
            return ResponseError(ResponseErrorType.UNKNOWN, message or "Unknown GraphQL error")
        first_error = errors[0] if isinstance(errors[0], dict) else {}
        nested_message = first_error.get("message")
        error_type = first_error.get("type")

        if error_type == "NOT_FOUND":
            return not_found(nested_message or "Resource not found")
        if error_type == "INSUFFICIENT_SCOPES":
            return ResponseError(
                ResponseErrorType.INSUFFICIENT_SCOPES,
                f"{INSUFFICIENT_SCOPES_MESSAGE}. Error message: {nested_message}"
                if nested_message
                else INSUFFICIENT_SCOPES_MESSAGE,
            )
        return ResponseError(ResponseErrorType.UNKNOWN, message or "Unknown GraphQL error")

    return ResponseError(
        ResponseErrorType.UNKNOWN,
        message or f"Unexpected response from GitHub endpoint (status code {status_code})",
    )
