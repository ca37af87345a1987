from __future__ import annotations

from datetime import datetime
from typing import TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A lightweight domain model representing a stored Todo row.

    Fields:
    - id: Unique integer identifier, assigned by storage on insert
    - task: Task description
    - completed: Boolean completion flag
    - created_at: Creation timestamp, assigned by storage
    - updated_at: Last update timestamp, assigned by storage
    """

    id: int
    task: str
    completed: bool
    created_at: datetime
    updated_at: datetime
