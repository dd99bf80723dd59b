"""Deterministic test-user generation."""

from __future__ import annotations

from typing import Iterator

from .schemas import NewUser, User
from .store import InMemoryUserStore

GIVEN_NAMES: tuple[str, ...] = (
    "Alberic", "Ninian", "Tottie", "Crispin", "Dorothy", "Ermintrude", "Evadne", "Esau",
    "Dolores", "Lillian", "Euphemia", "Havelock", "Cholmondeley", "Eustace", "Cassandra", "Monmouth",
)

FAMILY_NAMES: tuple[str, ...] = (
    "Haskett", "Cutflower", "De Lish", "Gantt", "Doodad", "Flay", "Cuspcolon", "Crump",
    "Tintwhistle", "Gaunt", "Potato", "Thring", "Groan", "Grabbitas", "Totes", "Flute",
)

EMAIL_DOMAIN = "HolidayExtras.com"

# Must be co-prime to the name list lengths so every pair is visited.
INDEX_STEP = 31


def generate_users(count: int = 256) -> Iterator[NewUser]:
    """Yield ``count`` users; only the first 256 have unique name pairs."""
    if count < 0:
        raise ValueError("count must be zero or greater")
    index = 0
    for _ in range(count):
        given = GIVEN_NAMES[index % len(GIVEN_NAMES)]
        family = FAMILY_NAMES[(index // len(GIVEN_NAMES)) % len(FAMILY_NAMES)]
        index += INDEX_STEP
        email = f"{given}_{family}@{EMAIL_DOMAIN}".replace(" ", "_")
        yield NewUser(given_name=given, family_name=family, email_address=email)


def populate(store: InMemoryUserStore, count: int = 256) -> list[User]:
    return [store.create(new_user) for new_user in generate_users(count)]


__all__ = ["EMAIL_DOMAIN", "FAMILY_NAMES", "GIVEN_NAMES", "generate_users", "populate"]
