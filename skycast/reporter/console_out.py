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

r"""Rich terminal output for a weather report.

The summary is a small ASCII-art glyph for the main condition with five
labelled lines to its right::

        \   /           Weather: clear
         .-.            Temperature: 20
      ‒ (   ) ‒         Min/Max: 18/22
         `-᾿            Wind speed: 3 m/s
        /   \           Humidity: 55%

Only the glyph characters are colored. Conditions without a glyph get
the labels alone.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from rich.console import Console
from rich.text import Text

from skycast.models.config import wind_speed_unit
from skycast.models.weather import WeatherReport

YELLOW = "bold yellow"  # \e[1;33m
WHITE = "bold white"  # \e[1;37m
BLUE = "bold blue"  # \e[1;34m


class Glyph(NamedTuple):
    lines: tuple[str, ...]
    style: str


_CLOUD = (
    "       .--.",
    "    .-(    ).",
    "   (___.__)__)",
)

GLYPHS: dict[str, Glyph] = {
    "Clear": Glyph(
        (
            "     \\   /",
            "      .-.",
            "   ‒ (   ) ‒",
            "      `-᾿",
            "     /   \\",
        ),
        YELLOW,
    ),
    "Clouds": Glyph(_CLOUD, WHITE),
    "Rain": Glyph(_CLOUD + ("    ʻ‚ʻ‚ʻ‚ʻ‚ʻ",), BLUE),
    "Snow": Glyph(_CLOUD + ("    * * * * *",), WHITE),
    "Thunderstorm": Glyph(_CLOUD + ("     /_   /_", "      /    /"), BLUE),
}

# Labels that differ from the lowercased discriminator.
_LABELS = {
    "Thunderstorm": "storm",
}
UNKNOWN_LABEL = "unknown"

# Cells reserved for the glyph column; labels start right after it.
ART_WIDTH = 20
# Indent of the labels when there is no glyph.
TEXT_INDENT = "   "


def format_number(value: float) -> str:
    """Round to zero decimal places and print as an integer."""
    return str(round(value))


def condition_label(condition: str) -> str:
    if not condition:
        return UNKNOWN_LABEL
    return _LABELS.get(condition, condition.lower())


def format_labels(report: WeatherReport, units: str) -> list[str]:
    """The five labelled lines, in display order."""
    main = report.main
    return [
        f"Weather: {condition_label(report.condition)}",
        f"Temperature: {format_number(main.temp)}",
        f"Min/Max: {format_number(main.temp_min)}/{format_number(main.temp_max)}",
        f"Wind speed: {format_number(report.wind.speed)} {wind_speed_unit(units)}",
        f"Humidity: {format_number(main.humidity)}%",
    ]


def _glyph_cell(art: str, style: str) -> Text:
    glyph = art.lstrip(" ")
    cell = Text(" " * (len(art) - len(glyph)))
    cell.append(glyph, style=style)
    cell.append(" " * max(ART_WIDTH - cell.cell_len, 1))
    return cell


def build_lines(report: WeatherReport, units: str) -> list[Text]:
    """Lay out glyph rows and labels side by side."""
    labels = format_labels(report, units)
    glyph: Optional[Glyph] = GLYPHS.get(report.condition)
    if glyph is None:
        return [Text(TEXT_INDENT + label) for label in labels]

    lines: list[Text] = []
    for idx in range(len(labels)):
        if idx < len(glyph.lines):
            row = _glyph_cell(glyph.lines[idx], glyph.style)
        else:
            row = Text(" " * ART_WIDTH)
        row.append(labels[idx])
        lines.append(row)
    return lines


def _make_console() -> Console:
    """Standard 16-color console, forced on even when stdout is not a TTY.

    ``NO_COLOR`` is still honored.
    """
    return Console(
        force_terminal=True,
        color_system="standard",
        soft_wrap=True,
        highlight=False,
        markup=False,
        emoji=False,
    )


def _print_block(console: Console, report: WeatherReport, units: str) -> None:
    console.print()
    for line in build_lines(report, units):
        console.print(line)
    console.print()


def render_report(report: WeatherReport, units: str) -> str:
    """Return the summary block, ANSI escapes included."""
    console = _make_console()
    with console.capture() as capture:
        _print_block(console, report, units)
    return capture.get()


def print_report(report: WeatherReport, units: str) -> None:
    _print_block(_make_console(), report, units)
