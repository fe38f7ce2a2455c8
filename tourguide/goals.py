"""Forwarding of goal poses to a navigation action server."""

from __future__ import annotations

import enum
import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from tourguide.models import Pose2D

log = logging.getLogger(__name__)

GOAL_POSE = "goal_pose"
STOP_REQUEST = "stop_request"
GOAL_STATUS = "goal_status"


class GoalState(enum.Enum):
    """Terminal and intermediate states reported for a navigation goal."""

    PENDING = "pending"
    ACTIVE = "active"
    PREEMPTED = "preempted"
    SUCCEEDED = "succeeded"
    ABORTED = "aborted"
    REJECTED = "rejected"
    RECALLED = "recalled"
    LOST = "lost"


_STATUS_TEXT = {
    GoalState.SUCCEEDED: ("reached", "idle"),
    GoalState.ABORTED: ("aborted",),
    GoalState.PREEMPTED: ("preempted",),
    GoalState.RECALLED: ("recalled",),
}


def yaw_to_quaternion(yaw: float) -> tuple[float, float, float, float]:
    """Return the (x, y, z, w) quaternion for a rotation of ``yaw`` about z."""
    half = 0.5 * yaw
    return (0.0, 0.0, math.sin(half), math.cos(half))


@dataclass
class MoveGoal:
    """A target pose in a fixed frame, as handed to the action server."""

    x: float
    y: float
    orientation: tuple[float, float, float, float]
    stamp: float
    frame_id: str = "map"


class MoveBaseClient(Protocol):
    def send_goal(self, goal: MoveGoal, done_callback: Callable[[GoalState], None]) -> None: ...

    def cancel_all_goals(self) -> None: ...


class GoalSender:
    """Turns received goal poses and stop requests into action-server calls.

    Status words ("new_goal", "reached", "idle", "aborted", "preempted",
    "recalled") are passed to ``publish_status``.
    """

    def __init__(
        self,
        client: MoveBaseClient,
        publish_status: Callable[[str], None],
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.client = client
        self.publish_status = publish_status
        self.clock = clock
        self.goal_pose = Pose2D()
        self.new_goal = False
        self.stop = False
        self.status = "idle"

    def _publish(self, text: str) -> None:
        self.status = text
        self.publish_status(text)

    def on_goal_pose(self, pose: Pose2D) -> None:
        """Remember a new target pose to be sent on the next step."""
        self.goal_pose = Pose2D(pose.x, pose.y, pose.theta, pose.time)
        self.new_goal = True

    def on_stop_request(self, text: str) -> None:
        """Request cancellation of all goals; the message text is not inspected."""
        self.stop = True

    def on_goal_done(self, state: GoalState) -> None:
        """Publish the status words for a finished goal."""
        for word in _STATUS_TEXT.get(state, ()):
            if word != "idle":
                log.info("Goal %s", word)
            self._publish(word)

    def step(self) -> Optional[MoveGoal]:
        """Handle pending stop and goal requests; return the goal sent, if any."""
        if self.stop:
            log.info("canceling goal")
            self.client.cancel_all_goals()
            self.stop = False
        if not self.new_goal:
            return None
        pose = self.goal_pose
        goal = MoveGoal(
            x=pose.x,
            y=pose.y,
            orientation=yaw_to_quaternion(pose.theta),
            stamp=self.clock(),
        )
        self.new_goal = False
        self.client.send_goal(goal, self.on_goal_done)
        log.info("New goal: %s %s", pose.x, pose.y)
        self._publish("new_goal")
        return goal