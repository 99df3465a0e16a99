"""Exception hierarchy for the AUA client.

AuaClientError
├── AuaTransportError          network failure or non-2xx without an envelope
├── AuaMalformedResponseError  envelope missing a field required by its status
└── AuaAPIError                the server reported a negative status
"""


class AuaClientError(Exception):
    """Base exception for AUA client errors."""

    pass


class AuaTransportError(AuaClientError):
    """Raised when the request fails at the HTTP level."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AuaMalformedResponseError(AuaClientError):
    """Raised when a response body is not a well-formed envelope."""

    pass


class AuaAPIError(AuaClientError):
    """Raised when the server answers with a negative envelope status."""

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"
