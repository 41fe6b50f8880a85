# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from studio_portal.model.draft import PhaseDraft
from studio_portal.model.entity_id import EntityId
from studio_portal.model.task import Task
from studio_portal.service.progress import is_valid_progress
from studio_portal.time import (
    date_for_input,
    datetime_from_local_date_str,
    relative_date,
    today_local,
)

DATE_HELP = (
    "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"
)


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return datetime_from_local_date_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Relative days, e.g. "1", "-1", "365"
    if re.match(r"^[+-]?\d+$", date):
        return relative_date(int(date))

    if date == "today" or date == "t":
        return today_local()
    if date == "yesterday" or date == "y":
        return relative_date(-1)
    if date == "tomorrow" or date == "o":
        return relative_date(1)
    raise typer.BadParameter("Incorrect date format")


def parse_phase(phase_param: str, position: int = 1) -> PhaseDraft:
    """
    Parse a phase given as NAME[:DATE[:PROGRESS]].

    DATE accepts everything parse_date does; an empty DATE means the phase
    ends with the task. PROGRESS defaults to 0.
    """
    parts = phase_param.split(":")
    if len(parts) > 3:
        raise typer.BadParameter(
            f"Phase must look like NAME[:DATE[:PROGRESS]], got {phase_param!r}"
        )

    name = parts[0].strip() or f"Phase {position}"

    end_date = ""
    if len(parts) > 1 and parts[1].strip():
        end_date = date_for_input(parse_date(parts[1]))

    progress = 0
    if len(parts) > 2 and parts[2].strip():
        try:
            progress = int(parts[2])
        except ValueError:
            raise typer.BadParameter(
                f"Phase progress must be a number, got {parts[2]!r}"
            )
        if not is_valid_progress(progress):
            raise typer.BadParameter(
                "Phase progress must be between 0 and 100 in steps of 10"
            )

    return {"id": None, "name": name, "end_date": end_date, "progress": progress}


def parse_phases(phase_params: list[str]) -> list[PhaseDraft]:
    return [
        parse_phase(phase_param, position)
        for position, phase_param in enumerate(phase_params, start=1)
    ]


def resolve_id(id_prefix: str, ids: list[EntityId], kind: str) -> EntityId:
    """Resolve a full id or an unambiguous prefix of one."""
    if id_prefix in ids:
        return id_prefix

    matches = [id for id in ids if id.startswith(id_prefix)]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        raise typer.BadParameter(f"No {kind} with id {id_prefix}")
    raise typer.BadParameter(
        f"Id {id_prefix} matches {len(matches)} {kind}s, use a longer prefix"
    )


def resolve_phase_id(task: Task, phase_ref: str) -> EntityId:
    """A phase is given by its 1-based position in the task or by its id."""
    if re.match(r"^\d+$", phase_ref):
        position = int(phase_ref)
        if 1 <= position <= len(task["phases"]):
            return task["phases"][position - 1]["id"]
    return resolve_id(phase_ref, [phase["id"] for phase in task["phases"]], "phase")
