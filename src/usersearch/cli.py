"""Typer CLI entrypoint for user management and search."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import pendulum
import typer
from pydantic import ValidationError

from . import __version__
from .config import ConfigManager
from .container import SearchContainer, create_container
from .core import InvalidArgumentError, ResultPage
from .generator import populate as populate_store
from .logging import configure_logging
from .schemas import User
from .store import (
    InMemoryUserStore,
    UserNotFoundError,
    UserValidationError,
    UserWriter,
    load_store,
)

app = typer.Typer(help="User store with fuzzy name and e-mail search.")

STORE_OPTION = typer.Option(..., dir_okay=False, help="Users JSONL path.")
LOG_LEVEL_OPTION = typer.Option("INFO", help="Log level for structured logging.")


def _load_settings(config: Optional[Path]) -> dict[str, Any]:
    if not config:
        return {}
    try:
        return ConfigManager(config.parent).load(config.name)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _build_container(
    store: InMemoryUserStore,
    config: Optional[Path] = None,
) -> SearchContainer:
    try:
        return create_container(settings=_load_settings(config), store=store)
    except (ValidationError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _emit(payload: Any, output: Optional[Path]) -> None:
    rendered = json.dumps(payload, ensure_ascii=False, indent=2)
    if output is None:
        typer.echo(rendered)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(rendered, encoding="utf-8")


def _fail(message: str, code: int) -> typer.Exit:
    typer.echo(message, err=True)
    return typer.Exit(code=code)


def _user_payload(user: User) -> dict[str, Any]:
    return user.model_dump(mode="json")


def _page_payload(page: ResultPage, criteria: dict[str, Any]) -> dict[str, Any]:
    return {
        "metadata": {
            "query": criteria,
            "start": page.start,
            "count": page.count,
            "total": page.total,
            "returned": len(page),
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        },
        "results": [_user_payload(user) for user in page],
    }


@app.command()
def search(
    store: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Users JSONL path."),
    given_name: Optional[str] = typer.Option(None, help="Given name to match."),
    family_name: Optional[str] = typer.Option(None, help="Family name to match."),
    email_address: Optional[str] = typer.Option(None, help="E-mail address to match."),
    start: int = typer.Option(0, help="Zero-based index of the first result."),
    count: Optional[int] = typer.Option(None, help="Maximum number of results (1..25)."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    output: Optional[Path] = typer.Option(None, dir_okay=False, help="Write results JSON here instead of stdout."),
    log_level: str = LOG_LEVEL_OPTION,
) -> None:
    """Rank users by e-mail, then family name, then given name similarity."""
    configure_logging(log_level)
    container = _build_container(load_store(store), config)
    if count is None:
        count = container.config.search.default_count() or container.pager().max_count

    try:
        page = container.search().search(
            given_name=given_name,
            family_name=family_name,
            email_address=email_address,
            start=start,
            count=count,
        )
    except InvalidArgumentError as exc:
        raise _fail(str(exc), code=2) from exc

    criteria = {
        "given_name": given_name,
        "family_name": family_name,
        "email_address": email_address,
    }
    _emit(_page_payload(page, criteria), output)


@app.command()
def populate(
    store: Path = STORE_OPTION,
    count: int = typer.Option(256, min=0, help="Number of users to generate."),
    log_level: str = LOG_LEVEL_OPTION,
) -> None:
    """Append generated test users to the store."""
    configure_logging(log_level)
    user_store = load_store(store)
    created = populate_store(user_store, count)
    UserWriter().write(store, user_store.list_candidates())
    typer.echo(f"Created {len(created)} users. Store now holds {len(user_store)} users.")


@app.command()
def create(
    store: Path = STORE_OPTION,
    given_name: str = typer.Option(..., help="Given name (required, non-blank)."),
    email_address: str = typer.Option(..., help="E-mail address (required, non-blank)."),
    family_name: str = typer.Option("", help="Family name (may be empty)."),
    log_level: str = LOG_LEVEL_OPTION,
) -> None:
    """Create a user and print it."""
    configure_logging(log_level)
    user_store = load_store(store)
    try:
        user = user_store.create(
            {
                "given_name": given_name,
                "family_name": family_name,
                "email_address": email_address,
            }
        )
    except UserValidationError as exc:
        raise _fail(str(exc), code=2) from exc
    UserWriter().write(store, user_store.list_candidates())
    _emit(_user_payload(user), None)


@app.command()
def show(
    user_id: str = typer.Argument(..., help="User id."),
    store: Path = STORE_OPTION,
    log_level: str = LOG_LEVEL_OPTION,
) -> None:
    """Print a single user."""
    configure_logging(log_level)
    try:
        user = load_store(store).get(user_id)
    except UserNotFoundError as exc:
        raise _fail(str(exc), code=1) from exc
    except UserValidationError as exc:
        raise _fail(str(exc), code=2) from exc
    _emit(_user_payload(user), None)


@app.command()
def update(
    user_id: str = typer.Argument(..., help="User id."),
    store: Path = STORE_OPTION,
    given_name: Optional[str] = typer.Option(None, help="New given name."),
    family_name: Optional[str] = typer.Option(None, help="New family name."),
    email_address: Optional[str] = typer.Option(None, help="New e-mail address."),
    log_level: str = LOG_LEVEL_OPTION,
) -> None:
    """Replace a user's names or e-mail; omitted fields keep their value."""
    configure_logging(log_level)
    user_store = load_store(store)
    try:
        current = user_store.get(user_id)
        payload = current.model_dump()
        for key, value in (
            ("given_name", given_name),
            ("family_name", family_name),
            ("email_address", email_address),
        ):
            if value is not None:
                payload[key] = value
        user = user_store.update(payload)
    except UserNotFoundError as exc:
        raise _fail(str(exc), code=1) from exc
    except UserValidationError as exc:
        raise _fail(str(exc), code=2) from exc
    UserWriter().write(store, user_store.list_candidates())
    _emit(_user_payload(user), None)


@app.command()
def delete(
    user_id: str = typer.Argument(..., help="User id."),
    store: Path = STORE_OPTION,
    log_level: str = LOG_LEVEL_OPTION,
) -> None:
    """Delete a user."""
    configure_logging(log_level)
    user_store = load_store(store)
    try:
        user_store.delete(user_id)
    except UserNotFoundError as exc:
        raise _fail(str(exc), code=1) from exc
    except UserValidationError as exc:
        raise _fail(str(exc), code=2) from exc
    UserWriter().write(store, user_store.list_candidates())
    typer.echo(f"Deleted user {user_id}.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
