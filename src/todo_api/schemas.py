from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, model_validator


# PUBLIC_INTERFACE
class TodoRequestBody(BaseModel):
    """
    Schema for creating a new Todo item.

    Only the client-supplied subset of a Todo. Missing or null fields (and a
    null body) fall back to their zero values; values of the wrong JSON type
    are rejected rather than coerced.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "task": "buy milk",
                "completed": False,
            }
        },
    )

    task: StrictStr = Field(default="", description="Task description")
    completed: StrictBool = Field(default=False, description="Completion status flag")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        """
        Treat a null body or null fields as absent so they keep their zero values.
        """
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "task": "buy milk",
                "completed": False,
                "created_at": "2025-01-25T10:15:30.123000",
                "updated_at": "2025-01-25T10:15:30.123000",
            }
        }
    )

    id: int = Field(..., description="Unique identifier of the todo item")
    task: str = Field(..., description="Task description")
    completed: bool = Field(..., description="Completion status flag")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
