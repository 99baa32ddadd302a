from sqlmodel import SQLModel, Field
from typing import Optional


class Task(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    description: str
    completed: bool = False
    __tablename__ = "tasks"
