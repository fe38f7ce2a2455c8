"""Map geometry: pixel/map conversions, map metadata and room membership."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from tourguide.models import Point2D

_DIGITS = "0123456789"
_ARROW_LENGTH = 15
_ARROW_HEAD = 3


def string_to_float(text: str) -> float:
    """Parse a plain decimal number made only of digits, '.' and '-'.

    A '-' anywhere makes the result negative. Raises ValueError on any other
    character or when there is no digit before the decimal point.
    """
    result = 0.0
    fraction = 0.1
    negative = False
    decimal = False
    integer_digits = 0
    for char in text:
        if char == "-":
            negative = True
        elif char == ".":
            decimal = True
        elif char in _DIGITS:
            digit = ord(char) - ord("0")
            if decimal:
                result += digit * fraction
                fraction *= 0.1
            else:
                result = result * 10.0 + digit
                integer_digits += 1
        else:
            raise ValueError(f"non-numeric character {char!r} in {text!r}")
    if integer_digits == 0:
        raise ValueError(f"no digits found in {text!r}")
    return -result if negative else result


def replace_commas_with_dots(text: str) -> str:
    """Return ``text`` with every ',' turned into '.'."""
    return text.replace(",", ".")


def is_in_room(x: float, y: float, polygon: Sequence[Point2D]) -> bool:
    """Tell whether (x, y) lies inside, or on the border of, an ordered polygon.

    Uses the crossing-number test; vertices must be ordered clockwise or
    counter-clockwise.
    """
    if not polygon:
        raise ValueError("a room needs at least one vertex")
    inside = False
    for vertex, following in zip(polygon, polygon[1:]):
        if vertex.x < x < following.x or vertex.x > x > following.x:
            yr = (following.y - vertex.y) * (x - vertex.x) / (following.x - vertex.x) + vertex.y
            if yr == y:
                return True
            if yr < y:
                inside = not inside
        if vertex.x == x and vertex.y <= y:
            if vertex.y == y:
                return True
            if following.x == x:
                if y <= following.y:
                    return True
            elif following.x > x:
                inside = not inside

    last, first = polygon[-1], polygon[0]
    if last.x < x < first.x or last.x > x > first.x:
        yr = (first.y - last.y) * (x - last.x) / (first.x - last.x) + last.y
        if yr == y:
            return True
        if yr < y:
            inside = not inside
    if last.x == x and last.y <= y:
        if last.y == y:
            return True
        if first.x == x:
            if y <= first.y:
                return True
        elif first.x < x:
            inside = not inside
    return inside


def parse_map_yaml(text: str) -> dict[str, float]:
    """Read resolution and origin from the text of a map's YAML description.

    Returns a dict holding whichever of ``resolution``, ``origin_x`` and
    ``origin_y`` were found.
    """
    values: dict[str, float] = {}
    for line in text.splitlines():
        if "resolution: " in line:
            values["resolution"] = string_to_float(line[12:])
        if "origin: " in line:
            first_comma = line.find(",")
            if first_comma < 0:
                raise ValueError(f"origin line without coordinates: {line!r}")
            last_comma = line.rfind(",")
            values["origin_x"] = string_to_float(line[9:first_comma])
            if last_comma > first_comma:
                y_text = line[first_comma + 2:last_comma]
            else:
                y_text = line[first_comma + 2:]
            values["origin_y"] = string_to_float(y_text)
    return values


def map_config_path(image_path: str) -> str:
    """Return the YAML description path that goes with a map image."""
    dot = image_path.rfind(".")
    stem = image_path if dot < 0 else image_path[:dot]
    return stem + ".yaml"


def arrow_points(x: int, y: int, theta: float) -> tuple[tuple[int, int], tuple[int, int], tuple[int, int]]:
    """Return the tip and the two head corners of an arrow drawn from (x, y).

    Pixel rows grow downwards, so the heading ``theta`` is mirrored in y.
    """
    tip = (
        int(x + _ARROW_LENGTH * math.cos(theta)),
        int(y - _ARROW_LENGTH * math.sin(theta)),
    )

    def corner(angle: float) -> tuple[int, int]:
        return (
            int(tip[0] + _ARROW_HEAD * math.cos(angle)),
            int(tip[1] - _ARROW_HEAD * math.sin(angle)),
        )

    return tip, corner(theta + 0.75 * math.pi), corner(theta - 0.75 * math.pi)


@dataclass
class MapFrame:
    """Relation between pixels of the displayed map and map coordinates."""

    resolution: float = 1.0
    width_relation: float = 1.0
    height_relation: float = 1.0
    input_map_height: float = 400.0
    origin_x: float = 0.0
    origin_y: float = 0.0

    def to_map(self, px: float, py: float) -> tuple[float, float]:
        """Convert a displayed pixel position to map coordinates."""
        x = self.origin_x + px * self.width_relation * self.resolution
        y = (
            self.origin_y
            + self.input_map_height * self.resolution
            - py * self.height_relation * self.resolution
        )
        return x, y

    def to_pixel(self, x: float, y: float, offset: float = 0.0) -> tuple[float, float]:
        """Convert map coordinates to a displayed pixel position.

        ``offset`` shifts the map's y origin before converting.
        """
        px = (x - self.origin_x) / (self.width_relation * self.resolution)
        py = (
            self.origin_y + offset + self.input_map_height * self.resolution - y
        ) / (self.height_relation * self.resolution)
        return px, py