import pygame

from .geometry import angle_to_vector, in_arena
from .pool import Pool
from .settings import BULLET_SPEED


class Bullet:
    def __init__(self):
        self.active = False
        self.pos = pygame.Vector2(0, 0)
        self.vel = pygame.Vector2(0, 0)


class BulletSystem:
    def __init__(self, pool=None):
        self.pool = pool if pool is not None else Pool(Bullet, name="bullet")

    def fire(self, pos, angle_deg, speed=BULLET_SPEED):
        """Reserve a bullet leaving ``pos`` along ``angle_deg``; None when the pool is full."""
        bullet = self.pool.reserve()
        if bullet is None:
            return None
        bullet.pos = pygame.Vector2(pos)
        bullet.vel = angle_to_vector(angle_deg) * speed
        return bullet

    def advance(self, bullet):
        """Move one bullet; returns False once it has left the arena and been released."""
        bullet.pos += bullet.vel
        if not in_arena(bullet.pos):
            self.pool.release(bullet)
            return False
        return True

    def release(self, bullet):
        self.pool.release(bullet)
