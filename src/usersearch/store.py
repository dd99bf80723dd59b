"""In-memory user store and JSONL persistence helpers."""

from __future__ import annotations

import json
import threading
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Iterable
from uuid import UUID

import pendulum
import structlog
from pydantic import ValidationError

from .schemas import NewUser, User, UserUpdate


class UserNotFoundError(KeyError):
    """Raised when no user exists for the given id."""

    def __init__(self, user_id: UUID):
        super().__init__(user_id)
        self.user_id = user_id

    def __str__(self) -> str:
        return f"User id {self.user_id} not found"


class UserValidationError(ValueError):
    """Raised when a user payload is incomplete or inconsistent."""


class UserLoadError(ValueError):
    """Raised when user loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[User]):
        super().__init__("User loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"User loading failed: {self.errors}"


def _utc_now() -> datetime:
    return pendulum.now("UTC")


def parse_user_id(value: UUID | str) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError as exc:
        raise UserValidationError(f"Invalid user id: {value!r}") from exc


def _validation_message(exc: ValidationError) -> str:
    return "; ".join(
        str(error.get("msg", "invalid value")).removeprefix("Value error, ")
        for error in exc.errors()
    )


class InMemoryUserStore:
    """Thread-safe user store keeping insertion order.

    ``list_candidates`` returns an immutable snapshot, so a search never sees
    a half-applied write.
    """

    def __init__(
        self,
        users: Iterable[User] = (),
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._users: dict[UUID, User] = {user.id: user for user in users}
        self._lock = threading.Lock()
        self._clock = clock or _utc_now
        self._logger = structlog.get_logger(__name__)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def list_candidates(self) -> tuple[User, ...]:
        with self._lock:
            return tuple(self._users.values())

    def create(self, new_user: NewUser | dict[str, Any]) -> User:
        payload = self._validate(NewUser, new_user)
        user = User(
            id=uuid.uuid4(),
            creation_datetime=self._clock(),
            given_name=payload.given_name,
            family_name=payload.family_name,
            email_address=payload.email_address,
        )
        with self._lock:
            self._users[user.id] = user
        self._logger.info("store.created", user_id=str(user.id))
        return user

    def get(self, user_id: UUID | str) -> User:
        key = parse_user_id(user_id)
        with self._lock:
            try:
                return self._users[key]
            except KeyError as exc:
                raise UserNotFoundError(key) from exc

    def update(self, update: UserUpdate | dict[str, Any]) -> User:
        payload = self._validate(UserUpdate, update)
        with self._lock:
            current = self._users.get(payload.id)
            if current is None:
                raise UserNotFoundError(payload.id)
            if payload.creation_datetime != current.creation_datetime:
                raise UserValidationError("The creation datetime cannot be changed")
            updated = current.model_copy(
                update={
                    "given_name": payload.given_name,
                    "family_name": payload.family_name,
                    "email_address": payload.email_address,
                }
            )
            self._users[payload.id] = updated
        self._logger.info("store.updated", user_id=str(payload.id))
        return updated

    def delete(self, user_id: UUID | str) -> None:
        key = parse_user_id(user_id)
        with self._lock:
            if self._users.pop(key, None) is None:
                raise UserNotFoundError(key)
        self._logger.info("store.deleted", user_id=str(key))

    @staticmethod
    def _validate(model: type[NewUser], payload: NewUser | dict[str, Any]) -> Any:
        if isinstance(payload, model):
            return payload
        if isinstance(payload, NewUser):
            payload = payload.model_dump()
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise UserValidationError(_validation_message(exc)) from exc


class UserLoader:
    """Load stored users from a JSONL file."""

    def load(self, path: Path) -> list[User]:
        users: list[User] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                try:
                    users.append(User.model_validate(record))
                except ValidationError as exc:
                    errors.append(f"line {idx}: {_validation_message(exc)}")
        if errors:
            raise UserLoadError(errors, users)
        return users


class UserWriter:
    """Persist users as JSON lines."""

    def write(self, path: Path, users: Iterable[User]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        lines = [user.model_dump_json() for user in users]
        path.write_text(
            "".join(f"{line}\n" for line in lines),
            encoding="utf-8",
        )


def load_store(path: Path, *, loader: UserLoader | None = None) -> InMemoryUserStore:
    """Build a store from ``path``; a missing file yields an empty store.

    Invalid lines are skipped and logged.
    """
    if not path.exists():
        return InMemoryUserStore()
    loader = loader or UserLoader()
    try:
        users = loader.load(path)
    except UserLoadError as exc:
        structlog.get_logger(__name__).warning("users.partial_load", errors=exc.errors)
        users = exc.partial
    return InMemoryUserStore(users)


__all__ = [
    "InMemoryUserStore",
    "UserLoadError",
    "UserLoader",
    "UserNotFoundError",
    "UserValidationError",
    "UserWriter",
    "load_store",
    "parse_user_id",
]
