"""Rolling todo domain model."""

from pydantic import BaseModel, Field

from lif.domain.priority import Priority


class RollingTodo(BaseModel):
    """Ad-hoc todo with no temporal behaviour."""

    id: int = Field(..., description="Stable todo ID")
    task: str = Field(..., description="Todo text")
    priority: Priority = Field(default=Priority.MEDIUM, description="Todo priority")
    category: str = Field(default="", description="Free-text category")
    deadline: str = Field(default="", description="Free-text deadline label")
