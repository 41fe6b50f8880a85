# SPDX-License-Identifier: MIT

import sys

from rich.console import Console
from rich.markup import escape

from studio_portal.errors import ConfigurationError
from studio_portal.initialize import initialize
from studio_portal.terminal.app import run


def main() -> None:
    try:
        initialize()
    except ConfigurationError as e:
        console = Console(stderr=True)
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        sys.exit(1)
    run()


if __name__ == "__main__":
    main()
