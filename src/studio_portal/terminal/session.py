# SPDX-License-Identifier: MIT

from contextlib import contextmanager
from typing import Iterator

import typer
from rich.console import Console
from rich.markup import escape

from studio_portal import configuration
from studio_portal.errors import (
    ConfigurationError,
    PersistenceError,
    RecordNotFoundError,
)
from studio_portal.model.idea import Idea
from studio_portal.model.task import Task
from studio_portal.repository.configuration import CONFIGURATION_REPO
from studio_portal.repository.document_store import DocumentStore
from studio_portal.repository.gateway import PersistenceGateway
from studio_portal.service.session import Session
from studio_portal.terminal.parse import resolve_id

console = Console(stderr=True)


def open_session() -> Session:
    """Build and hydrate the signed-in user's session, or exit on an unusable store."""
    try:
        config = CONFIGURATION_REPO.get_config()
        session = Session(
            config["user_id"],
            PersistenceGateway(DocumentStore(configuration.DATA_STORE_PATH)),
            seed_on_first_use=config["seed_on_first_use"],
            default_artists=config["default_artists"],
        )
        session.load()
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
    except PersistenceError as e:
        console.print(f"[red]Could not load your records:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
    return session


def warn_if_diverged(session: Session) -> None:
    if session.diverged:
        console.print(
            "[yellow]Some changes could not be saved. "
            "Run `studio refresh` to reload your records.[/yellow]"
        )


@contextmanager
def known_records() -> Iterator[None]:
    """Report a task, idea or phase that cannot be found as a bad parameter."""
    try:
        yield
    except RecordNotFoundError as e:
        raise typer.BadParameter(str(e))


def lookup_task(session: Session, id_prefix: str) -> Task:
    with known_records():
        return session.get_task(
            resolve_id(id_prefix, [t["id"] for t in session.tasks], "task")
        )


def lookup_idea(session: Session, id_prefix: str) -> Idea:
    with known_records():
        return session.get_idea(
            resolve_id(id_prefix, [i["id"] for i in session.ideas], "idea")
        )
