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

"""Pydantic model for the resolved run configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

METRIC = "metric"
IMPERIAL = "imperial"

# Wind speed suffix per unit system; anything else gets the upstream default.
_WIND_SPEED_UNITS = {
    METRIC: "m/s",
    IMPERIAL: "mph",
}
DEFAULT_WIND_SPEED_UNIT = "m/s"


def wind_speed_unit(units: str) -> str:
    """Return the suffix printed after the wind speed for a unit system."""
    return _WIND_SPEED_UNITS.get(units, DEFAULT_WIND_SPEED_UNIT)


class Configuration(BaseModel):
    """API key, city and unit system for one run.

    Field aliases match the camelCase keys of ``config.json``; the
    snake_case names are accepted as well.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    api_key: str = Field(alias="apiKey", min_length=1, repr=False)
    city: str = Field(min_length=1)
    units: str = Field(min_length=1)
