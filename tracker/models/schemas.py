"""Pydantic models for the tracker state and its persisted document.

The same models back the in-memory state and the JSON file, so a document
that does not validate is rejected as a whole at load time.
"""
import uuid
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


def new_task_id() -> str:
    return uuid.uuid4().hex


class Task(BaseModel):
    id: str = Field(default_factory=new_task_id)
    name: str
    accumulated: int = Field(default=0, ge=0)

    @field_validator("name")
    @classmethod
    def name_nonempty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Task name cannot be empty")
        return v.strip()


class AppState(BaseModel):
    """Everything the window needs to restore itself.

    ``selected`` is an index into ``tasks``; an out-of-range value is reset
    to None rather than rejecting the document.
    """

    tasks: List[Task] = Field(default_factory=list)
    selected: Optional[int] = None
    new_task_name: str = ""

    @model_validator(mode="after")
    def normalize(self) -> "AppState":
        # Task ids key the GUI rows, so they must be unique.
        seen = set()
        for task in self.tasks:
            if task.id in seen:
                task.id = new_task_id()
            seen.add(task.id)
        if self.selected is not None and not 0 <= self.selected < len(self.tasks):
            self.selected = None
        return self
