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

"""Pydantic models for the OpenWeatherMap current-weather payload.

Only ``main``, ``wind``, ``weather[0].main`` and ``cod`` are needed to
draw the summary. The rest of the schema is modelled so a full payload
validates, and every field defaults to zero or empty so error payloads
such as ``{"cod": "404", "message": "city not found"}`` decode too.
Unknown keys are ignored.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

SUCCESS_CODE = 200


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)


class Coord(_Payload):
    lon: float = 0.0
    lat: float = 0.0


class Condition(_Payload):
    """One entry of the ``weather`` list."""

    id: int = 0
    main: str = ""  # "Clear", "Clouds", "Rain", "Snow", "Thunderstorm", ...
    description: str = ""
    icon: str = ""


class MainBlock(_Payload):
    temp: float = 0.0
    feels_like: float = 0.0
    temp_min: float = 0.0
    temp_max: float = 0.0
    pressure: int = 0
    humidity: int = 0  # percent


class Wind(_Payload):
    speed: float = 0.0
    deg: int = 0
    gust: float = 0.0


class Clouds(_Payload):
    all: int = 0


class Sys(_Payload):
    type: int = 0
    id: int = 0
    country: str = ""
    sunrise: int = 0
    sunset: int = 0


class WeatherReport(_Payload):
    """Current weather for one city, as returned by the upstream API."""

    coord: Coord = Field(default_factory=Coord)
    weather: list[Condition] = Field(default_factory=list)
    base: str = ""
    main: MainBlock = Field(default_factory=MainBlock)
    visibility: int = 0
    wind: Wind = Field(default_factory=Wind)
    clouds: Clouds = Field(default_factory=Clouds)
    dt: int = 0
    sys: Sys = Field(default_factory=Sys)
    timezone: int = 0
    id: int = 0
    name: str = ""
    cod: int = 0  # the API sends error codes as strings; lax mode coerces them
    message: Union[str, int, float] = ""

    @property
    def condition(self) -> str:
        """The main condition discriminator, or "" when ``weather`` is empty."""
        if not self.weather:
            return ""
        return self.weather[0].main

    @property
    def ok(self) -> bool:
        return self.cod == SUCCESS_CODE
