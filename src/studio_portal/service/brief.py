# SPDX-License-Identifier: MIT

import re
from pathlib import Path

from studio_portal.model.task import Task


def brief_filename(task: Task) -> str:
    """'Xmas Guide' becomes 'Xmas_Guide_brief.txt'; path separators become '-'."""
    name = re.sub(r"[\\/]", "-", task["name"])
    name = re.sub(r"\s+", "_", name)
    return f"{name}_brief.txt"


def export_brief(task: Task, directory: Path) -> Path:
    file_path = directory / brief_filename(task)
    file_path.write_text(task["briefing"] or "")
    return file_path
