# skycast: current weather in your terminal
# Copyright (C) 2026 skycast Project Contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""skycast CLI: Typer entry point.

Takes no arguments. Resolves the configuration, fetches the current
weather once and prints the summary. Every failure exits with status 1.
"""

from __future__ import annotations

import logging
import os

import typer
from rich.console import Console
from rich.markup import escape

from skycast.client.decoder import check_status, decode_report
from skycast.client.http import fetch_body
from skycast.client.request import build_request_url
from skycast.config import load_config
from skycast.errors import SkycastError, UpstreamError
from skycast.reporter.console_out import print_report

app = typer.Typer(
    name="skycast",
    help=(
        "Show the current weather for the city configured in API_KEY, CITY "
        "and UNITS (environment or ../.env) or in ./config.json."
    ),
    add_completion=False,
)

logger = logging.getLogger("skycast")

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)

LOG_LEVEL_ENV = "SKYCAST_LOG_LEVEL"


def _configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level)

    # Keep request lines (which carry the API key) out of debug output
    for _name in ("httpcore", "httpx"):
        logging.getLogger(_name).setLevel(logging.WARNING)


@app.command()
def main() -> None:
    """Print the current weather for the configured city."""
    _configure_logging()

    try:
        config = load_config()
        logger.debug("Fetching weather for %s (%s)", config.city, config.units)
        body = fetch_body(build_request_url(config))
        report = decode_report(body)
        check_status(report)
    except UpstreamError as e:
        console.print(escape(str(e)))
        raise typer.Exit(code=1)
    except SkycastError as e:
        err_console.print(f"Error: {escape(str(e))}")
        raise typer.Exit(code=1)

    print_report(report, config.units)


if __name__ == "__main__":
    app()
