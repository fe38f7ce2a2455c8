# tourguide

Building blocks for running guided visits with a service robot. The package
reads and writes the XML file that describes rooms and the places inside
them. It converts between map-image pixels and map coordinates and tells
which room a pose lies in. It records the robot's current pose as a named
place, and it turns goal poses into navigation goals.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `tourguide.models` holds the data types `Point2D`, `Place`, `Room` and
  `Pose2D`. `Room.find_place` and `find_room` look things up by name and
  return `None` when there is no match.
- `tourguide.placesfile` reads a places file with `load_rooms(path)`, which
  returns a list of `Room` objects with their vertices and places.
  `save_places(path, rooms)` appends the places of each room to the room of
  the same name already in the file. Poses are written with six decimals, and
  the function returns the number of places written. Both functions raise
  `PlacesFileError` when the file cannot be read, parsed or written, and
  `save_places` also raises it when it is given no rooms.
- `tourguide.geometry` provides:
  - `is_in_room(x, y, polygon)`, a crossing-number point-in-polygon test that
    also counts points on the border as inside;
  - `string_to_float` and `replace_commas_with_dots`;
  - `parse_map_yaml(text)`, which reads `resolution`, `origin_x` and
    `origin_y` from a map's YAML description;
  - `map_config_path(image_path)`, which gives the YAML path that goes with a
    map image;
  - `arrow_points(x, y, theta)`, the tip and head corners of a heading arrow
    in pixel space;
  - `MapFrame`, whose `to_map` and `to_pixel` convert between displayed
    pixels and map coordinates.
- `tourguide.learning` provides `PlacesLearner`. It loads room outlines with
  `load_known_rooms` and tracks the pose given to `update_pose`.
  `current_room()` reports the room that contains the pose. `learn_place`
  stores the pose as a place of that room, tagged with a `PlaceType` or any
  string. `delete_place` removes a place and raises `KeyError` when the room
  or place is unknown. `save` writes the learned places through
  `save_places`.
- `tourguide.goals` provides `GoalSender`. It takes goal poses
  (`on_goal_pose`) and stop requests (`on_stop_request`). Each `step()` cancels
  goals on a client object and sends `MoveGoal`s to it, with the orientation
  taken from `yaw_to_quaternion`. When a goal finishes, it publishes status
  words such as `"new_goal"`, `"reached"`, `"idle"` and `"aborted"` through a
  callback.

## Example

```python
from tourguide.geometry import is_in_room
from tourguide.models import Point2D

square = [Point2D(0, 0), Point2D(4, 0), Point2D(4, 4), Point2D(0, 4)]
is_in_room(2.0, 2.0, square)   # True
is_in_room(5.0, 2.0, square)   # False
```

## What the package does not do

The package has no commands, no graphical interface and no messaging
transport. Nothing here resolves room and place names into goals on request,
and nothing runs a visit programme or speaks dialogues. The navigation client
that `GoalSender` drives and the status callback it publishes to must be
supplied by the caller.