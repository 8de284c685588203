from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    id: int = Field(ge=0)
    name: str
    email: str


class UserCreate(BaseModel):
    """Body of POST /users. A client-supplied id is accepted and ignored."""
    name: str
    email: str
    id: Optional[int] = None
