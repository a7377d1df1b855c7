from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from pydantic_core import PydanticCustomError


class UserInput(BaseModel):
    name: str = Field(min_length=1, max_length=120)
    username: str = Field(min_length=1, max_length=50, pattern=r"^[A-Za-z0-9_.-]+$")
    password: str | None = Field(default=None, min_length=10, max_length=256)
    confirm_password: str | None = None
    reset_password_required: bool = False
    profile_picture: str | None = None
    twitter_handle: str | None = None
    biography: str | None = None
    tagline: str | None = None

    @model_validator(mode="after")
    def passwords_match(self) -> "UserInput":
        if self.password is not None and self.password != self.confirm_password:
            raise PydanticCustomError("passwords_do_not_match", "Your passwords must match")
        return self
