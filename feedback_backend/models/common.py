"""
Common response models.

Error schemas shared by all routers.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    detail: str | dict | list = Field(description="Error message or structured error context")
