"""
data_models.py: Data structures for the game state.
"""

import enum
from dataclasses import dataclass, field
from typing import List, Tuple

from .constants import (
    FIELD_WIDTH, FIELD_HEIGHT, GROUND_OFFSET, BASELINE_OFFSET,
    PLAYER_X, PLAYER_WIDTH, PLAYER_HEIGHT, OBSTACLE_WIDTH, OBSTACLE_HEIGHT
)

# (x, y, width, height)
Box = Tuple[float, float, float, float]


class Phase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


def baseline_for(field_height: float) -> float:
    """The y-coordinate the player rests on for a given field height."""
    return field_height - BASELINE_OFFSET


def ground_for(field_height: float) -> float:
    """The y-coordinate of the ground line obstacles stand on."""
    return field_height - GROUND_OFFSET


@dataclass
class Player:
    """The authoritative player state."""
    y: float = baseline_for(FIELD_HEIGHT)
    x: float = PLAYER_X
    width: float = PLAYER_WIDTH
    height: float = PLAYER_HEIGHT
    velocity: float = 0.0
    jumping: bool = False
    frame_index: int = 0           # Running animation frame (0 or 1)
    frame_timer: int = 0

    def box(self) -> Box:
        return (self.x, self.y, self.width, self.height)


@dataclass
class Obstacle:
    """A cactus scrolling toward the player. Its y is anchored to the ground."""
    x: float
    width: float = OBSTACLE_WIDTH
    height: float = OBSTACLE_HEIGHT

    def box(self, field_height: float) -> Box:
        top = ground_for(field_height) - self.height
        return (self.x, top, self.width, self.height)


@dataclass
class RunState:
    """Everything one run of the game mutates, owned by the Simulation."""
    player: Player = field(default_factory=Player)
    obstacles: List[Obstacle] = field(default_factory=list)
    score: int = 0
    phase: Phase = Phase.IDLE
    spawn_counter: int = 0
    field_width: float = FIELD_WIDTH
    field_height: float = FIELD_HEIGHT

    @property
    def baseline(self) -> float:
        return baseline_for(self.field_height)

    def to_snapshot(self) -> "Snapshot":
        """Prepares a read-only view of the state for the renderer."""
        return Snapshot(
            player=self.player.box(),
            frame_index=self.player.frame_index,
            jumping=self.player.jumping,
            obstacles=tuple(o.box(self.field_height) for o in self.obstacles),
            score=self.score,
            phase=self.phase,
            field_width=self.field_width,
            field_height=self.field_height,
        )


@dataclass(frozen=True)
class Snapshot:
    """What the presentation layer sees of one tick."""
    player: Box
    frame_index: int
    jumping: bool
    obstacles: Tuple[Box, ...]
    score: int
    phase: Phase
    field_width: float
    field_height: float
