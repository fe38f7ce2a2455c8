from tourguide.models import Place, Point2D, Pose2D, Room, find_room


def _kitchen():
    return Room(
        name="kitchen",
        places=[
            Place(name="table", x=1.0, y=2.0, theta=0.5),
            Place(name="sink", x=3.0, y=4.0),
            Place(name="table", x=9.0, y=9.0),
        ],
        vertices=[Point2D(0, 0), Point2D(5, 0), Point2D(5, 5)],
    )


def test_find_place_returns_first_match():
    room = _kitchen()
    place = room.find_place("table")
    assert place is room.places[0]
    assert place.x == 1.0


def test_find_place_missing_returns_none():
    assert _kitchen().find_place("fridge") is None


def test_find_room_by_name():
    hall = Room(name="hall")
    kitchen = _kitchen()
    assert find_room([hall, kitchen], "kitchen") is kitchen
    assert find_room([hall, kitchen], "hall") is hall


def test_find_room_missing_and_empty():
    assert find_room([Room(name="hall")], "garage") is None
    assert find_room([], "hall") is None


def test_room_lists_are_independent():
    first = Room(name="a")
    second = Room(name="b")
    first.places.append(Place(name="p"))
    first.vertices.append(Point2D(1, 1))
    assert second.places == []
    assert second.vertices == []


def test_defaults_are_zero():
    pose = Pose2D()
    assert (pose.x, pose.y, pose.theta, pose.time) == (0.0, 0.0, 0.0, 0.0)
    place = Place()
    assert (place.name, place.place_type, place.id) == ("", "", 0)