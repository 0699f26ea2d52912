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

"""Build the current-weather request URL."""

from __future__ import annotations

from urllib.parse import quote, urlencode

from skycast.models.config import Configuration

WEATHER_ENDPOINT = "https://api.openweathermap.org/data/2.5/weather"


def build_request_url(config: Configuration) -> str:
    """Return the GET URL for *config*.

    Query order is fixed (``q``, ``units``, ``APPID``) and every value is
    percent-encoded, spaces included (``%20``).
    """
    query = urlencode(
        {"q": config.city, "units": config.units, "APPID": config.api_key},
        quote_via=quote,
    )
    return f"{WEATHER_ENDPOINT}?{query}"
