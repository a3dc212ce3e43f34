"""
simulation.py: The authoritative single-player world simulation.
"""

import random
from dataclasses import dataclass, field

from .constants import (
    OBSTACLE_SPEED, SPAWN_THRESHOLD_TICKS, SPAWN_CHANCE
)
from .data_models import Obstacle, Phase, RunState, Snapshot
from .physics_core import PhysicsCore


@dataclass
class Simulation(PhysicsCore):
    """
    Owns the RunState and advances it one tick at a time.
    Inherits kinematics and collision from PhysicsCore.
    """
    state: RunState = field(default_factory=RunState)
    rng: random.Random = field(default_factory=random.Random)
    tick_count: int = 0

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def _spawn_obstacle(self):
        """Places a new obstacle at the right edge of the field."""
        self.state.obstacles.append(Obstacle(x=float(self.state.field_width)))

    def _step_spawner(self):
        state = self.state
        state.spawn_counter += 1
        if state.spawn_counter > SPAWN_THRESHOLD_TICKS:
            if self.rng.random() < SPAWN_CHANCE:
                self._spawn_obstacle()
            # Opens a fresh window whether or not the roll fired.
            state.spawn_counter = 0

    def tick(self) -> bool:
        """
        The main simulation step. Returns True when the player collided with
        an obstacle this tick; the caller decides what that means for the phase.
        """
        state = self.state
        if state.phase is not Phase.RUNNING:
            return False

        self.tick_count += 1

        # 1. Player kinematics and animation
        self.step_player(state.player, state.baseline)

        # 2. Obstacle spawning
        self._step_spawner()

        # 3. Move, collide and retire obstacles, newest first
        obstacles = state.obstacles
        for i in range(len(obstacles) - 1, -1, -1):
            obstacle = obstacles[i]
            obstacle.x -= OBSTACLE_SPEED

            if self.check_collision(state.player, obstacle, state.field_height):
                return True

            if obstacle.x + obstacle.width < 0:
                del obstacles[i]
                state.score += 1

        return False

    def start_run(self):
        """Resets the run and enters the Running phase."""
        state = self.state
        state.score = 0
        state.obstacles.clear()
        state.spawn_counter = 0
        self.respawn(state.player, state.baseline)
        state.phase = Phase.RUNNING
        self.tick_count = 0

    def end_run(self):
        """Freezes the run at the collision frame."""
        self.state.phase = Phase.GAME_OVER

    def jump(self) -> bool:
        """Starts a jump when Running and grounded."""
        if self.state.phase is not Phase.RUNNING:
            return False
        return self.apply_jump(self.state.player)

    def resize(self, width: float, height: float):
        """
        Records new field geometry. A height change puts the player back on
        the (moved) baseline; score and phase are untouched.
        """
        state = self.state
        state.field_width = width
        if height != state.field_height:
            state.field_height = height
            self.reground(state.player, state.baseline)

    def snapshot(self) -> Snapshot:
        return self.state.to_snapshot()
