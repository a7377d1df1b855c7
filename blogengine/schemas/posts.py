from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from blogengine.utils.slug import slugify


def split_tag_names(value: str | list[str] | None) -> list[str]:
    """Comma separated tag input to a de-duplicated list of names."""
    if isinstance(value, str):
        value = value.split(",")
    names: list[str] = []
    for name in value or []:
        name = str(name).strip()
        if name and name not in names:
            names.append(name)
    return names


class PostInput(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    contents: str = Field(min_length=1)
    # Explicit slug source typed by the editor
    slug_url: str | None = Field(default=None, max_length=255)
    tags: list[str] = Field(default_factory=list)
    published: bool = False

    @field_validator("title", "contents")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("slug_url")
    @classmethod
    def blank_slug_is_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v):
        return split_tag_names(v)

    @model_validator(mode="after")
    def slug_has_content(self) -> "PostInput":
        # A slug of only dropped characters would leave the post unreachable
        if not slugify(self.slug_url or self.title):
            raise PydanticCustomError(
                "empty_slug",
                "The post URL needs at least one letter or number",
            )
        return self
