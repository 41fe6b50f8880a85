# SPDX-License-Identifier: MIT

from studio_portal.model.task import Task
from studio_portal.time import relative_date


def get_seed_tasks() -> list[Task]:
    """Example tasks shown to a brand-new account, dated relative to today."""
    return [
        {
            "id": "seed-1",
            "user_id": None,
            "type": "project",
            "artist": "Salini",
            "name": "Xmas Guide",
            "briefing": "Main campaign visual.",
            "folder_url": "",
            "start_date": relative_date(-5),
            "deadline": relative_date(20),
            "phases": [
                {
                    "id": "p1",
                    "name": "Draft",
                    "end_date": relative_date(0),
                    "color": "green",
                    "progress": 100,
                },
                {
                    "id": "p2",
                    "name": "Refine",
                    "end_date": relative_date(10),
                    "color": "yellow",
                    "progress": 40,
                },
                {
                    "id": "p3",
                    "name": "Final",
                    "end_date": relative_date(20),
                    "color": "red",
                    "progress": 0,
                },
            ],
        },
        {
            "id": "seed-social-1",
            "user_id": None,
            "type": "social",
            "platform": "Instagram",
            "format": "Animation",
            "artist": "Salini",
            "name": "Instagram: Xmas Teaser Reel",
            "briefing": "15s animation for IG Story",
            "folder_url": "",
            "start_date": relative_date(5),
            "deadline": relative_date(12),
            "phases": [
                {
                    "id": "sp1",
                    "name": "Production",
                    "end_date": relative_date(12),
                    "color": "social",
                    "progress": 20,
                }
            ],
        },
    ]
