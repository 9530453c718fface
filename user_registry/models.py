from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class User(BaseModel):
    # Records are shared between threads once stored; never mutate in place.
    model_config = ConfigDict(frozen=True)

    id: str = Field(default="", description="Caller-supplied identifier, also the store key")
    name: str = Field(default="", description="Display name")

    @model_validator(mode="before")
    @classmethod
    def _null_body_is_empty_user(cls, data: Any) -> Any:
        # A JSON ``null`` body decodes to a user with every field absent.
        return {} if data is None else data

    @field_validator("id", "name", mode="before")
    @classmethod
    def _null_field_is_absent(cls, value: Any) -> Any:
        return "" if value is None else value


SEED_USERS: tuple[User, ...] = (User(id="1", name="Charles"),)
