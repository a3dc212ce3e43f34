"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from typing import Tuple

from .constants import (
    GRAVITY, JUMP_VELOCITY, FRAME_TIMER_LIMIT, COLLISION_MARGIN
)
from .data_models import Box, Player, Obstacle


def inset(box: Box, margin: float) -> Tuple[float, float, float, float]:
    """Shrinks a box by margin on every side, returned as (left, top, right, bottom)."""
    x, y, w, h = box
    return (x + margin, y + margin, x + w - margin, y + h - margin)


def boxes_overlap(a: Box, b: Box, margin: float = COLLISION_MARGIN) -> bool:
    """Axis-aligned overlap of two boxes after insetting both. Touching edges overlap."""
    a_left, a_top, a_right, a_bottom = inset(a, margin)
    b_left, b_top, b_right, b_bottom = inset(b, margin)
    return not (a_right < b_left or a_left > b_right or
                a_bottom < b_top or a_top > b_bottom)


class PhysicsCore:
    """
    Stateless physics shared by the simulation and its tests.
    """

    GRAVITY = GRAVITY
    JUMP_VELOCITY = JUMP_VELOCITY
    MARGIN = COLLISION_MARGIN

    def apply_gravity_and_movement(self, y: float, velocity: float,
                                   baseline: float) -> Tuple[float, float, bool]:
        """
        Integrates one airborne tick. Returns the new y, the new velocity and
        whether the player landed this tick.
        """
        y += velocity
        velocity += self.GRAVITY

        if y >= baseline:
            return baseline, 0.0, True
        return y, velocity, False

    def advance_animation(self, player: Player):
        """Steps the running animation while the player is on the ground."""
        player.frame_timer += 1
        if player.frame_timer > FRAME_TIMER_LIMIT:
            player.frame_index = (player.frame_index + 1) % 2
            player.frame_timer = 0

    def step_player(self, player: Player, baseline: float):
        """Vertical integration when jumping, run animation otherwise."""
        if player.jumping:
            player.y, player.velocity, landed = self.apply_gravity_and_movement(
                player.y, player.velocity, baseline)
            if landed:
                player.jumping = False
        else:
            self.advance_animation(player)

    def apply_jump(self, player: Player) -> bool:
        """Starts a jump unless one is already underway."""
        if player.jumping:
            return False
        player.jumping = True
        player.velocity = self.JUMP_VELOCITY
        return True

    def check_collision(self, player: Player, obstacle: Obstacle,
                        field_height: float) -> bool:
        return boxes_overlap(player.box(), obstacle.box(field_height), self.MARGIN)

    def reground(self, player: Player, baseline: float):
        player.y = baseline
        player.velocity = 0.0
        player.jumping = False

    def respawn(self, player: Player, baseline: float):
        self.reground(player, baseline)
        player.frame_index = 0
        player.frame_timer = 0
