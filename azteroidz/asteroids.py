import enum
import logging
import math

import pygame

from .geometry import wrap_position
from .pool import Pool
from .settings import (
    ASTEROID_MAX_DISTANCE,
    ASTEROID_MIN_DISTANCE,
    ASTEROID_SPIN_PER_TICK,
    HEIGHT,
    WIDTH,
)

logger = logging.getLogger(__name__)


class AsteroidSize(enum.IntEnum):
    NORMAL = 1
    TINY = 2


def make_asteroid_shape(rng, size):
    """Polar points of a triangle fan: centroid, ring, then the first ring point again."""
    count = rng.randint(6, 10) + 2
    step = 360.0 / (count - 2)
    points = [(0.0, 0.0)]
    for i in range(1, count - 1):
        radians = math.radians(step * (i - 1))
        distance = rng.uniform(ASTEROID_MIN_DISTANCE, ASTEROID_MAX_DISTANCE) / int(size)
        points.append((radians, distance))
    points.append(points[1])
    return points


def shape_vertices(pos, points):
    # screen y grows downward, hence the negated sine
    return [
        pygame.Vector2(pos.x + math.cos(radians) * distance, pos.y - math.sin(radians) * distance)
        for radians, distance in points
    ]


def random_edge_position(rng):
    x = rng.choose(rng.randint(-64, 128), rng.randint(WIDTH - 128, WIDTH + 64))
    y = rng.choose(rng.randint(-64, 128), rng.randint(HEIGHT - 128, HEIGHT + 64))
    return pygame.Vector2(x, y)


class Asteroid:
    def __init__(self):
        self.active = False
        self.pos = pygame.Vector2(0, 0)
        self.vel = pygame.Vector2(0, 0)
        self.rot = 0.0
        self.rot_vel = 0.0
        self.size = AsteroidSize.NORMAL
        self.points = []
        self.vertices = []

    @property
    def outline(self):
        """Ring vertices (centroid excluded) closing back on the first one."""
        return self.vertices[1:]

    def create_shape(self, rng, size):
        self.size = size
        self.points = make_asteroid_shape(rng, size)
        self.refresh_vertices()

    def delete_shape(self):
        self.points = []
        self.vertices = []

    def refresh_vertices(self):
        self.vertices = shape_vertices(self.pos, self.points)

    def advance(self):
        self.pos += self.vel
        self.rot += self.rot_vel
        self.pos = wrap_position(self.pos)
        spin = math.radians(ASTEROID_SPIN_PER_TICK)
        self.points = [(radians + spin, distance) for radians, distance in self.points]
        self.refresh_vertices()


class AsteroidField:
    """Owns the asteroid pool and every asteroid's shape storage."""

    def __init__(self, rng, pool=None):
        self.rng = rng
        self.pool = pool if pool is not None else Pool(Asteroid, name="asteroid")

    @property
    def number_actives(self):
        return self.pool.number_actives

    def revive(self, size, x=None, y=None):
        asteroid = self.pool.reserve()
        if asteroid is None:
            return None
        edge = None
        if x is None or y is None:
            edge = random_edge_position(self.rng)
        asteroid.pos = pygame.Vector2(
            edge.x if x is None else x,
            edge.y if y is None else y,
        )
        asteroid.delete_shape()
        asteroid.create_shape(self.rng, size)
        asteroid.vel = pygame.Vector2(self.rng.uniform(-1.0, 1.0), self.rng.uniform(-1.0, 1.0))
        asteroid.rot = 0.0
        asteroid.rot_vel = self.rng.uniform(-1.0, 1.0)
        return asteroid

    def spawn_random(self, amount=1):
        spawned = 0
        for _ in range(amount):
            if self.revive(AsteroidSize.NORMAL) is None:
                continue
            spawned += 1
        if spawned < amount:
            logger.debug("spawned %d of %d asteroids", spawned, amount)
        return spawned

    def fragment(self, asteroid):
        """Split a Normal asteroid into Tiny ones at its position, then release it."""
        children = []
        if asteroid.size == AsteroidSize.NORMAL:
            for _ in range(2):
                child = self.revive(AsteroidSize.TINY, asteroid.pos.x, asteroid.pos.y)
                if child is not None:
                    children.append(child)
        self.release(asteroid)
        return children

    def release(self, asteroid):
        asteroid.delete_shape()
        self.pool.release(asteroid)

    def clear_all(self):
        for asteroid in self.pool:
            asteroid.active = False
            asteroid.delete_shape()
        self.pool.number_actives = 0
