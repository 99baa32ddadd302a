from pydantic import BaseModel, ConfigDict


class TodoForm(BaseModel):
    # strict: a missing description or any stray field is a 422, not a flash
    model_config = ConfigDict(extra="forbid")

    description: str
