from __future__ import annotations

import uuid
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from usersearch.schemas import NewUser, User, UserUpdate


def test_new_user_trims_fields():
    user = NewUser(given_name="  Dolores ", family_name=" Haskett", email_address=" a@x.com ")

    assert user.given_name == "Dolores"
    assert user.family_name == "Haskett"
    assert user.email_address == "a@x.com"


def test_new_user_allows_empty_family_name():
    user = NewUser(given_name="Cher", family_name="  ", email_address="cher@x.com")

    assert user.family_name == ""


@pytest.mark.parametrize(
    "payload",
    [
        {"given_name": "  ", "family_name": "Flute", "email_address": "c@x.com"},
        {"given_name": "Monmouth", "family_name": "Flute", "email_address": ""},
        {"given_name": "Monmouth", "email_address": "c@x.com"},
        {"given_name": "Monmouth", "family_name": "Flute", "email_address": "c@x.com", "age": 3},
    ],
)
def test_new_user_rejects_incomplete_payloads(payload):
    with pytest.raises(ValidationError):
        NewUser.model_validate(payload)


def test_user_update_requires_identity_fields():
    with pytest.raises(ValidationError):
        UserUpdate(given_name="Esau", family_name="", email_address="e@x.com")


def test_user_is_immutable_and_round_trips_json():
    user = User(
        id=uuid.uuid4(),
        creation_datetime=datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc),
        given_name="Havelock",
        family_name="Thring",
        email_address="Havelock_Thring@HolidayExtras.com",
    )

    with pytest.raises(ValidationError):
        user.given_name = "Eustace"  # type: ignore[misc]

    assert User.model_validate_json(user.model_dump_json()) == user


def test_user_missing_optional_fields_become_empty():
    user = User.model_validate(
        {
            "id": str(uuid.uuid4()),
            "creation_datetime": "2024-05-01T09:30:00Z",
            "given_name": "Esau",
            "family_name": None,
            "email_address": None,
        }
    )

    assert user.family_name == ""
    assert user.email_address == ""
