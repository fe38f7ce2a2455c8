"""Learning named places inside known rooms from the robot's current pose."""

from __future__ import annotations

import enum
import logging
import time
from dataclasses import replace
from os import PathLike
from typing import Callable, Optional, Union

from tourguide.geometry import is_in_room
from tourguide.models import Place, Room, find_room
from tourguide.placesfile import load_rooms, save_places

log = logging.getLogger(__name__)

PLACE_TO_BE_LEARNED = "place_to_be_learned"
ESTIMATED_POSE = "amcl_pose"
CURRENT_ROOM = "current_room"
CURRENT_ROOM_REQUEST = "room_name_requested"

ROOM_NAME_REQUEST = "Request"

PathType = Union[str, "PathLike[str]"]


class PlaceType(enum.Enum):
    """The kinds of place an operator can tag while learning."""

    POINT_OF_INTEREST = "punto_de_interés"
    ROOM_ENTRANCE = "entrada de la sala"
    ROOM_CENTRE = "centro de la sala"


class PlacesLearner:
    """Keeps the known room outlines and the places learned in each room.

    ``known_rooms`` holds the outlines read from the rooms file and is used to
    tell which room the robot is in. ``rooms`` holds the rooms that places are
    added to and that are saved.
    """

    def __init__(
        self,
        publish_request: Optional[Callable[[str], None]] = None,
        settle_time: float = 5.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.publish_request = publish_request
        self.settle_time = settle_time
        self.sleep = sleep
        self.known_rooms: list[Room] = []
        self.rooms: list[Room] = []
        self.current_x = 0.0
        self.current_y = 0.0
        self.current_theta = 0.0
        self._current_room_name = ""

    def load_known_rooms(self, path: PathType) -> list[Room]:
        """Read room names and outlines from ``path`` and add them.

        Raises PlacesFileError when the file cannot be read or parsed.
        Returns the rooms read.
        """
        loaded = [
            Room(name=room.name, vertices=list(room.vertices))
            for room in load_rooms(path)
        ]
        for room in loaded:
            self.rooms.append(replace(room, vertices=list(room.vertices), places=[]))
            self.known_rooms.append(room)
        log.info("num rooms %d", len(self.rooms))
        return loaded

    def update_pose(self, x: float, y: float, theta: float) -> None:
        """Record the robot's latest estimated pose."""
        self.current_x = x
        self.current_y = y
        self.current_theta = theta

    def current_room(self) -> str:
        """Return the name of the known room containing the current pose.

        When no room contains it, the last room found is kept; before any
        room has been found this is the empty string. Rooms without an
        outline are ignored.
        """
        for room in self.known_rooms:
            if not room.vertices:
                continue
            if is_in_room(self.current_x, self.current_y, room.vertices):
                self._current_room_name = room.name
                log.info("current room %s", room.name)
                break
        return self._current_room_name

    def learn_place(self, place_name: str, place_type: Union[PlaceType, str]) -> Place:
        """Store the current pose as a place of the current room and return it."""
        if self.publish_request is not None:
            self.publish_request(ROOM_NAME_REQUEST)
        room_name = self.current_room()
        if self.settle_time > 0:
            self.sleep(self.settle_time)

        kind = place_type.value if isinstance(place_type, PlaceType) else place_type
        place = Place(
            name=place_name,
            x=self.current_x,
            y=self.current_y,
            theta=self.current_theta,
            place_type=kind,
        )
        room = find_room(self.rooms, room_name)
        if room is None:
            room = Room(name=room_name)
            self.rooms.append(room)
            log.info("Adding new room %s", room_name)
        else:
            log.info("Adding place to room %s", room_name)
        room.places.append(place)
        return place

    def delete_place(self, room_name: str, place_name: str) -> Place:
        """Remove and return the first place called ``place_name`` in ``room_name``.

        Raises KeyError when the room does not exist or holds no such place.
        """
        matching = [room for room in self.rooms if room.name == room_name]
        if not matching:
            raise KeyError(f"room {room_name!r} does not exist")
        for room in matching:
            place = room.find_place(place_name)
            if place is not None:
                room.places.remove(place)
                return place
        raise KeyError(f"place {place_name!r} was not found within room {room_name!r}")

    def save(self, path: PathType) -> int:
        """Append the learned places to the matching rooms in the file at ``path``.

        Raises PlacesFileError when there is nothing to save or the file
        cannot be read or written. Returns the number of places written.
        """
        return save_places(path, self.rooms)