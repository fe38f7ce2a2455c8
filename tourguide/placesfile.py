"""Reading and updating the XML file that describes rooms and places."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from os import PathLike
from typing import Iterable, Optional, Union

from tourguide.models import Place, Point2D, Room

PathType = Union[str, "PathLike[str]"]

_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class PlacesFileError(Exception):
    """The places file could not be read, parsed or written."""


def _to_float(text: Optional[str]) -> float:
    """Parse the leading number of ``text`` (comma or dot decimals), else 0."""
    if not text:
        return 0.0
    match = _NUMBER.match(text.lstrip().replace(",", "."))
    return float(match.group()) if match else 0.0


def _child_text(element: ET.Element, name: str) -> str:
    child = element.find(name)
    if child is None or child.text is None:
        return ""
    return child.text


def _read_document(path: PathType) -> ET.ElementTree:
    try:
        return ET.parse(path)
    except OSError as error:
        raise PlacesFileError(f"cannot open places file {path}: {error}") from error
    except ET.ParseError as error:
        raise PlacesFileError(f"malformed places file {path}: {error}") from error


def _read_place(element: ET.Element) -> Place:
    pose = element.find("pose")
    attributes = pose.attrib if pose is not None else {}
    return Place(
        name=_child_text(element, "name"),
        place_type=_child_text(element, "type"),
        x=_to_float(attributes.get("x")),
        y=_to_float(attributes.get("y")),
        theta=_to_float(attributes.get("theta")),
    )


def _read_room(element: ET.Element) -> Room:
    room = Room(name=_child_text(element, "name"))
    vertices = element.find("vertices")
    if vertices is not None:
        room.vertices = [
            Point2D(_to_float(vertex.get("x")), _to_float(vertex.get("y")))
            for vertex in vertices.findall("vertex")
        ]
    places = element.find("places")
    if places is not None:
        room.places = [_read_place(place) for place in places.findall("place")]
    return room


def load_rooms(path: PathType) -> list[Room]:
    """Read every room, with its outline and its first set of places."""
    root = _read_document(path).getroot()
    if root.tag != "rooms":
        return []
    return [_read_room(room) for room in root.findall("room")]


def _append_places(room_element: ET.Element, places: Iterable[Place]) -> int:
    places_element = ET.SubElement(room_element, "places")
    count = 0
    for place in places:
        place_element = ET.SubElement(places_element, "place")
        ET.SubElement(place_element, "name").text = place.name
        ET.SubElement(place_element, "type").text = place.place_type
        ET.SubElement(
            place_element,
            "pose",
            {
                "x": f"{place.x:.6f}",
                "y": f"{place.y:.6f}",
                "theta": f"{place.theta:.6f}",
            },
        )
        count += 1
    return count


def save_places(path: PathType, rooms: Iterable[Room]) -> int:
    """Append the places of ``rooms`` to the matching rooms in the file at ``path``.

    Rooms without places, or not present in the file, are skipped. Returns
    the number of places written.
    """
    rooms = list(rooms)
    if not rooms:
        raise PlacesFileError("no places to be saved")
    tree = _read_document(path)
    root = tree.getroot()
    written = 0
    if root.tag == "rooms":
        for room in rooms:
            if not room.places:
                continue
            for element in root.findall("room"):
                if _child_text(element, "name") == room.name:
                    written += _append_places(element, room.places)
    ET.indent(root, space="\t")
    body = ET.tostring(root, encoding="unicode")
    try:
        with open(path, "w", encoding="utf-8") as stream:
            stream.write('<?xml version="1.0"?>\n')
            stream.write(body)
            stream.write("\n")
    except OSError as error:
        raise PlacesFileError(f"cannot write places file {path}: {error}") from error
    return written