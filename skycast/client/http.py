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

"""Single synchronous GET against the weather API."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from skycast.errors import FetchError

logger = logging.getLogger(__name__)


def fetch_body(url: str, transport: Optional[httpx.BaseTransport] = None) -> bytes:
    """GET *url* and return the whole response body.

    Non-2xx statuses are returned like any other body: the API reports
    unknown cities and bad keys inside the JSON payload. Only transport
    failures (DNS, connect, TLS, read) raise FetchError.
    """
    try:
        with httpx.Client(transport=transport) as client:
            response = client.get(url)
            body = response.read()
    except httpx.HTTPError as e:
        raise FetchError(f"Request to the weather API failed: {e}") from e

    logger.debug("HTTP %s, %d bytes", response.status_code, len(body))
    return body

