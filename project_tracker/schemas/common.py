"""Response bodies shared by all routers."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    error: str
