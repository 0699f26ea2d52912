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

"""Decode the weather API response and check its ``cod`` status."""

from __future__ import annotations

import logging
from typing import Union

from pydantic import ValidationError

from skycast.errors import (
    CityNotFoundError,
    DecodeError,
    InvalidApiKeyError,
    UpstreamError,
)
from skycast.models.weather import WeatherReport

logger = logging.getLogger(__name__)

NOT_FOUND_CODE = 404
UNAUTHORIZED_CODE = 401


def decode_report(body: Union[bytes, str]) -> WeatherReport:
    """Parse *body* into a WeatherReport. Invalid JSON raises DecodeError."""
    try:
        return WeatherReport.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"Could not decode weather response: {e}") from e


def check_status(report: WeatherReport) -> None:
    """Raise the matching UpstreamError unless ``cod`` is 200."""
    if report.ok:
        return

    logger.debug("Upstream returned cod=%s message=%r", report.cod, report.message)
    if report.cod == NOT_FOUND_CODE:
        raise CityNotFoundError(report.cod)
    if report.cod == UNAUTHORIZED_CODE:
        raise InvalidApiKeyError(report.cod)
    raise UpstreamError(report.cod)
