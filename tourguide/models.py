"""Plain data types shared by the tour guide components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional


@dataclass
class Point2D:
    """A point on the map plane, in metres."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Place:
    """A named pose inside a room that the robot can be sent to."""

    name: str = ""
    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0
    place_type: str = ""
    id: int = 0


@dataclass
class Room:
    """A room, described by its outline and the places learned inside it."""

    name: str = ""
    places: list[Place] = field(default_factory=list)
    vertices: list[Point2D] = field(default_factory=list)
    time: float = 0.0
    x_ref: float = 0.0
    y_ref: float = 0.0
    theta_ref: float = 0.0

    def find_place(self, name: str) -> Optional[Place]:
        """Return the first place called ``name``, or None."""
        return next((place for place in self.places if place.name == name), None)


@dataclass
class Pose2D:
    """A planar pose with a timestamp."""

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0
    time: float = 0.0


def find_room(rooms: Iterable[Room], name: str) -> Optional[Room]:
    """Return the first room called ``name``, or None."""
    return next((room for room in rooms if room.name == name), None)