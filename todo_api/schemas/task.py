from pydantic import BaseModel, Field
from typing import List


class Task(BaseModel):
    """A titled, completable to-do item.

    ``id == 0`` means the store has not assigned an id yet.
    """
    id: int = 0
    title: str
    completed: bool = False


class TaskCreate(BaseModel):
    """Body of ``POST /task/``."""
    title: str = Field(alias="Title")

    class Config:
        populate_by_name = True


class TaskList(BaseModel):
    """Body of ``GET /task/`` and of both sides of ``PUT /task/``."""
    tasks: List[Task] = Field(alias="Tasks")

    class Config:
        populate_by_name = True
