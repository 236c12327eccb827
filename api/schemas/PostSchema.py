from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from dbase.models.PostModel import Author

REQUIRED_FIELDS = ("title", "content", "author")


class AuthorSchema(Author):
    firstName: str = Field(min_length=1)
    lastName: str = Field(min_length=1)


class PostCreate(BaseModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    author: AuthorSchema


class PostUpdate(BaseModel):
    # anything else in the body, id included, is dropped
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = Field(default=None, min_length=1)
    author: Optional[AuthorSchema] = None

    @field_validator("title", "content", "author")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


def first_invalid_field(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "request body"
    return ".".join(str(part) for part in errors[0]["loc"])
