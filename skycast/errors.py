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

"""Error types. Every one of them ends the run with exit status 1."""


class SkycastError(Exception):
    """Base class for all fatal skycast errors."""


class ConfigError(SkycastError):
    """Raised when API_KEY, CITY and UNITS cannot be resolved."""


class FetchError(SkycastError):
    """Raised when the HTTP request fails below the application layer."""


class DecodeError(SkycastError):
    """Raised when the response body is not a valid weather payload."""


class UpstreamError(SkycastError):
    """Raised when the weather API reports a non-200 ``cod``."""

    def __init__(self, cod: int, message: str = "ERROR") -> None:
        super().__init__(message)
        self.cod = cod


class CityNotFoundError(UpstreamError):
    def __init__(self, cod: int = 404) -> None:
        super().__init__(cod, "City not found")


class InvalidApiKeyError(UpstreamError):
    def __init__(self, cod: int = 401) -> None:
        super().__init__(cod, "Invalid API key")
