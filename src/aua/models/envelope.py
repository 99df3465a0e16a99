"""Response envelope shared by every JSON endpoint."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class AuaResponse(BaseModel, Generic[T]):
    """Uniform ``{status, message, content}`` wrapper.

    A negative status reports a failure described by ``message``; a
    non-negative status carries the endpoint payload in ``content``.
    """

    model_config = ConfigDict(populate_by_name=True)

    status: int
    message: str | None = None
    content: T | None = None

    @property
    def is_error(self) -> bool:
        return self.status < 0


RawAuaResponse = AuaResponse[Any]
