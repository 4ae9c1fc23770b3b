"""Response envelope shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

# Upper bounds of the INTEGER and NUMERIC(10, 2) columns
MAX_ID = 2**31 - 1
MAX_PRICE = 99_999_999.99


class Envelope(BaseModel, Generic[T]):
    """Successful API response: ``{"success": true, "data": ...}``.

    Failures are rendered by the exception handlers in ``menugen.main`` as
    ``{"success": false, "error": ...}``.
    """

    success: bool = True
    data: T | None = None


class DeletedResponse(BaseModel):
    deleted: bool = True
