# SPDX-License-Identifier: MIT


class Collection:
    TASKS = "tasks"
    IDEAS = "ideas"
    ARTISTS = "artists"
