from pydantic import BaseModel, Field
from typing import Any


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: list[dict[str, Any]] = Field(default_factory=list)
