"""
Doppler SDK error types.

Transport failures are not wrapped: httpx exceptions reach the caller as-is.
"""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from doppler_sdk.transport.envelope import APIResponse


class DopplerError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class InvalidPayloadError(DopplerError):
    """The request payload failed validation. No request was sent."""

    def __init__(self, message: str, violations: Optional[list[dict[str, Any]]] = None):
        super().__init__("invalid_payload", message, {"violations": violations or []})
        self.violations = violations or []


class EncodingError(DopplerError):
    def __init__(self, message: str):
        super().__init__("encoding_error", message)


class DecodeError(DopplerError):
    def __init__(self, message: str, response: Optional["APIResponse"] = None):
        super().__init__("decode_error", message)
        self.response = response


class APIError(DopplerError):
    """Doppler reported one or more messages in the response body."""

    def __init__(
        self,
        messages: list[str],
        response: Optional["APIResponse"] = None,
        decode_error: Optional[DecodeError] = None,
    ):
        message = ": ".join(messages)
        if decode_error is not None:
            message = f"{message}: {decode_error.message}"
        super().__init__("api_error", message, {"messages": list(messages)})
        self.messages = list(messages)
        self.response = response
        self.decode_error = decode_error

    @property
    def status_code(self) -> Optional[int]:
        if self.response is None:
            return None
        return self.response.status_code
