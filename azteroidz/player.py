import math

import pygame

from .geometry import angle_to_vector, clamp, point_in_triangle, wrap_position
from .settings import (
    HEIGHT,
    PLAYER_BASE_HEIGHT,
    PLAYER_LIVES,
    PLAYER_ROTATION_DAMPING,
    PLAYER_ROTATION_EPSILON,
    PLAYER_ROTATION_LIMIT,
    PLAYER_SPEED_LIMIT,
    PLAYER_THRUST,
    PLAYER_TIME_INVUL,
    PLAYER_TURN_IMPULSE,
    WIDTH,
)


def arena_center():
    return pygame.Vector2(WIDTH / 2, HEIGHT / 2)


class Player:
    """The ship. Rotation is in degrees, rotational velocity in degrees per tick."""

    def __init__(self):
        self.pos = arena_center()
        self.vel = pygame.Vector2(0, 0)
        self.rot = 0.0
        self.rot_vel = 0.0
        self.base_height = PLAYER_BASE_HEIGHT
        self.lives = PLAYER_LIVES
        self.invulnerable = False
        self.invulnerable_ticks = 0
        self.shape = [pygame.Vector2(0, 0) for _ in range(3)]
        self.refresh_shape()

    @property
    def heading(self):
        return angle_to_vector(self.rot)

    def thrust(self):
        self.vel += self.heading * PLAYER_THRUST

    def rotate_left(self):
        self.rot_vel -= PLAYER_TURN_IMPULSE

    def rotate_right(self):
        self.rot_vel += PLAYER_TURN_IMPULSE

    def refresh_shape(self):
        spoke = self.base_height / 2
        for i, offset in enumerate((0, -135, -225)):
            radians = math.radians(self.rot + offset)
            self.shape[i] = pygame.Vector2(
                self.pos.x + math.cos(radians) * spoke,
                self.pos.y + math.sin(radians) * spoke,
            )

    def update(self):
        self.vel.x = clamp(self.vel.x, -PLAYER_SPEED_LIMIT, PLAYER_SPEED_LIMIT)
        self.vel.y = clamp(self.vel.y, -PLAYER_SPEED_LIMIT, PLAYER_SPEED_LIMIT)
        self.pos += self.vel

        self.rot_vel = clamp(self.rot_vel, -PLAYER_ROTATION_LIMIT, PLAYER_ROTATION_LIMIT)
        self.rot += self.rot_vel
        self.rot_vel -= self.rot_vel * PLAYER_ROTATION_DAMPING
        if abs(self.rot_vel) <= PLAYER_ROTATION_EPSILON:
            self.rot_vel = 0.0

        self.refresh_shape()
        self.pos = wrap_position(self.pos)

        if self.invulnerable:
            self.invulnerable_ticks -= 1
            self.invulnerable = self.invulnerable_ticks > 0

    def kill(self):
        self.pos = arena_center()
        self.vel = pygame.Vector2(0, 0)
        self.invulnerable = True
        self.invulnerable_ticks = PLAYER_TIME_INVUL
        self.lives = max(0, self.lives - 1)

    def reset(self):
        self.pos = arena_center()
        self.vel = pygame.Vector2(0, 0)
        self.rot_vel = 0.0
        self.lives = PLAYER_LIVES
        self.invulnerable = False
        self.invulnerable_ticks = 0
        self.refresh_shape()

    def collides_with(self, point):
        return point_in_triangle(point, *self.shape)
