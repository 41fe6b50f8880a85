# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import typer

from studio_portal.model.task import PLATFORMS, SOCIAL_FORMATS
from studio_portal.service.progress import PROGRESS_STEP, is_valid_progress


def validate_progress(progress: Optional[int]) -> Optional[int]:
    if progress is None:
        return None
    if not is_valid_progress(progress):
        raise typer.BadParameter(
            f"Progress must be between 0 and 100 in steps of {PROGRESS_STEP}"
        )
    return progress


def __validate_choice(
    value: Optional[str], choices: list[str], label: str
) -> Optional[str]:
    if value is None:
        return None
    for choice in choices:
        if choice.casefold() == value.casefold():
            return choice
    raise typer.BadParameter(f"{label} must be one of: {', '.join(choices)}")


def validate_platform(platform: Optional[str]) -> Optional[str]:
    return __validate_choice(platform, PLATFORMS, "Platform")


def validate_format(format: Optional[str]) -> Optional[str]:
    return __validate_choice(format, SOCIAL_FORMATS, "Format")


def validate_log_level(level: Optional[str]) -> Optional[str]:
    if level is None:
        return None
    if not isinstance(logging.getLevelName(level.upper()), int):
        raise typer.BadParameter(f"Unknown log level {level}")
    return level.upper()


def validate_positive(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if value < 1:
        raise typer.BadParameter("Value must be at least 1")
    return value
