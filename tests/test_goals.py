import math

import pytest

from tourguide.goals import GoalSender, GoalState, MoveGoal, yaw_to_quaternion
from tourguide.models import Pose2D


class FakeClient:
    def __init__(self, events):
        self.events = events
        self.sent = []
        self.callbacks = []

    def send_goal(self, goal, done_callback):
        self.events.append("send")
        self.sent.append(goal)
        self.callbacks.append(done_callback)

    def cancel_all_goals(self):
        self.events.append("cancel")


@pytest.fixture
def setup():
    events = []
    statuses = []
    client = FakeClient(events)
    sender = GoalSender(client, statuses.append, clock=lambda: 42.0)
    return sender, client, statuses, events


def test_yaw_zero_is_identity():
    assert yaw_to_quaternion(0.0) == (0.0, 0.0, 0.0, 1.0)


@pytest.mark.parametrize("yaw", [-3.0, -1.0, 0.3, 1.5, math.pi])
def test_quaternion_is_unit_and_round_trips(yaw):
    x, y, z, w = yaw_to_quaternion(yaw)
    assert (x, y) == (0.0, 0.0)
    assert math.isclose(z * z + w * w, 1.0)
    assert math.isclose(2 * math.atan2(z, w), yaw)


def test_step_without_goal_does_nothing(setup):
    sender, client, statuses, events = setup
    assert sender.step() is None
    assert events == []
    assert statuses == []


def test_goal_pose_is_sent_once(setup):
    sender, client, statuses, events = setup
    sender.on_goal_pose(Pose2D(x=1.5, y=-2.0, theta=0.7, time=3.0))
    goal = sender.step()
    assert isinstance(goal, MoveGoal)
    assert client.sent == [goal]
    assert (goal.x, goal.y) == (1.5, -2.0)
    assert goal.frame_id == "map"
    assert goal.stamp == 42.0
    assert goal.orientation == yaw_to_quaternion(0.7)
    assert statuses == ["new_goal"]
    assert sender.step() is None
    assert len(client.sent) == 1


def test_done_callback_is_goal_sender_handler(setup):
    sender, client, statuses, events = setup
    sender.on_goal_pose(Pose2D(x=1.0, y=1.0))
    sender.step()
    client.callbacks[0](GoalState.SUCCEEDED)
    assert statuses == ["new_goal", "reached", "idle"]


@pytest.mark.parametrize(
    "state, expected",
    [
        (GoalState.SUCCEEDED, ["reached", "idle"]),
        (GoalState.ABORTED, ["aborted"]),
        (GoalState.PREEMPTED, ["preempted"]),
        (GoalState.RECALLED, ["recalled"]),
        (GoalState.PENDING, []),
        (GoalState.REJECTED, []),
    ],
)
def test_goal_done_statuses(setup, state, expected):
    sender, client, statuses, events = setup
    sender.on_goal_done(state)
    assert statuses == expected


@pytest.mark.parametrize("text", ["stop", "STOP", "anything"])
def test_stop_request_cancels_once(setup, text):
    sender, client, statuses, events = setup
    sender.on_stop_request(text)
    sender.step()
    sender.step()
    assert events == ["cancel"]


def test_cancel_happens_before_new_goal(setup):
    sender, client, statuses, events = setup
    sender.on_goal_pose(Pose2D(x=2.0, y=2.0))
    sender.on_stop_request("stop")
    sender.step()
    assert events == ["cancel", "send"]


def test_latest_pose_wins(setup):
    sender, client, statuses, events = setup
    sender.on_goal_pose(Pose2D(x=1.0, y=1.0))
    sender.on_goal_pose(Pose2D(x=5.0, y=6.0))
    goal = sender.step()
    assert (goal.x, goal.y) == (5.0, 6.0)
    assert len(client.sent) == 1