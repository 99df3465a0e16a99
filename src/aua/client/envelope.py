"""Decoding of the AUA response envelope.

All JSON endpoints wrap their payload in ``{status, message, content}``. The
status branch is decided on the raw envelope before the content is validated
against the endpoint's content type, so a failure report is never hidden
behind an unrelated content mismatch.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from aua.client.exceptions import AuaAPIError, AuaMalformedResponseError
from aua.models.envelope import RawAuaResponse

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(content_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(content_type)


def parse_envelope(body: str | bytes) -> RawAuaResponse:
    """Parse the outer envelope without validating its content.

    Raises:
        AuaMalformedResponseError: If the body is not JSON, not an object,
            or has no integer ``status``.
    """
    try:
        return RawAuaResponse.model_validate_json(body)
    except ValidationError as e:
        raise AuaMalformedResponseError(f"Malformed response envelope: {e}") from e


def decode_envelope(body: str | bytes, content_type: type[T]) -> T:
    """Decode an envelope and return its content as ``content_type``.

    Args:
        body: Raw JSON response body.
        content_type: Anything pydantic can validate, e.g. a model class or
            ``list[str]``.

    Returns:
        The validated content.

    Raises:
        AuaAPIError: If the envelope reports a negative status.
        AuaMalformedResponseError: If the envelope is inconsistent with its
            status or the content does not match ``content_type``.
    """
    envelope = parse_envelope(body)
    return unwrap_envelope(envelope, content_type)


def unwrap_envelope(envelope: RawAuaResponse, content_type: type[T]) -> T:
    """Branch on an already parsed envelope. See ``decode_envelope``."""
    if envelope.status < 0:
        if envelope.message is None:
            raise AuaMalformedResponseError(
                f"Error envelope with status {envelope.status} has no message"
            )
        raise AuaAPIError(envelope.status, envelope.message)

    if envelope.content is None:
        raise AuaMalformedResponseError(
            f"Success envelope with status {envelope.status} has no content"
        )

    try:
        return _adapter(content_type).validate_python(envelope.content)
    except ValidationError as e:
        raise AuaMalformedResponseError(f"Unexpected response content: {e}") from e
