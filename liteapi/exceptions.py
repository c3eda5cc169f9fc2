"""LiteAPI client exceptions."""


class LiteAPIClientError(Exception):
    """Base exception for LiteAPI client errors."""


class LiteAPIAuthError(LiteAPIClientError):
    """Authentication failed."""

    def __init__(self, status_code: int) -> None:
        """Initialize with the HTTP status that signalled the failure."""
        super().__init__(f"Authentication failed (HTTP {status_code}): check LITEAPI_KEY")
        self.status_code = status_code


class LiteAPIError(LiteAPIClientError):
    """API returned an error response."""


class LiteAPIHttpError(LiteAPIError):
    """API returned an HTTP error status."""

    def __init__(self, status_code: int, response_text: str) -> None:
        """Initialize with HTTP status code and response text."""
        super().__init__(f"API error (HTTP {status_code}): {response_text[:500]}")
        self.status_code = status_code
        self.response_text = response_text


class LiteAPIInvalidJsonError(LiteAPIError):
    """API returned invalid JSON response."""

    def __init__(self, error: Exception) -> None:
        """Initialize with the JSON parsing error."""
        super().__init__(f"Invalid JSON response: {error}")
        self.original_error = error


class LiteAPINetworkError(LiteAPIClientError):
    """Network-related error occurred."""


class LiteAPITimeoutError(LiteAPINetworkError):
    """Request timed out."""

    def __init__(self) -> None:
        """Initialize with default message."""
        super().__init__("Request timed out")


class LiteAPIConnectionError(LiteAPINetworkError):
    """Connection error occurred."""

    def __init__(self, error: Exception) -> None:
        """Initialize with the connection error."""
        super().__init__(f"Connection error: {error}")
        self.original_error = error


class LiteAPIRequestError(LiteAPINetworkError):
    """Request failed."""

    def __init__(self, error: Exception) -> None:
        """Initialize with the request error."""
        super().__init__(f"Request failed: {error}")
        self.original_error = error
