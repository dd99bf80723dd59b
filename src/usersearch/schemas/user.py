"""User record schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class NewUser(BaseModel):
    """Payload used to create a user.

    The given name is most often the first name, but not always. Users with a
    single name put it in ``given_name`` and leave ``family_name`` empty. The
    e-mail address is stored as supplied and is not verified.
    """

    given_name: str
    family_name: str
    email_address: str

    model_config = ConfigDict(extra="forbid")

    @field_validator("given_name", "family_name", "email_address", mode="before")
    @classmethod
    def strip_whitespace(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @model_validator(mode="after")
    def require_identity(self) -> "NewUser":
        if not self.given_name or not self.email_address:
            raise ValueError(
                "The user's given name and e-mail address cannot be left blank"
            )
        return self


class UserUpdate(NewUser):
    """Full replacement payload for an existing user."""

    id: UUID
    creation_datetime: datetime


class User(BaseModel):
    """Stored user record; the candidate the search engine ranks."""

    id: UUID
    creation_datetime: datetime
    given_name: str
    family_name: str = ""
    email_address: str = ""

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("family_name", "email_address", mode="before")
    @classmethod
    def none_as_empty(cls, value: object) -> object:
        if value is None:
            return ""
        return value
