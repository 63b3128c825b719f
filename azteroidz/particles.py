import pygame

from .pool import Pool
from .settings import COLORS, PARTICLE_LIFE, PARTICLE_SIZE


class Particle:
    def __init__(self):
        self.active = False
        self.pos = pygame.Vector2(0, 0)
        self.vel = pygame.Vector2(0, 0)
        self.rot = 0.0
        self.rot_speed = 0.0
        self.color = COLORS["lines"]
        self.size = PARTICLE_SIZE[0]
        self.life_start = PARTICLE_LIFE[0]
        self.life_current = 0

    @property
    def alpha(self):
        if self.life_start <= 0:
            return 0.0
        return max(0.0, self.life_current / self.life_start)


class ParticleSystem:
    """Decorative triangles thrown out by explosions."""

    def __init__(self, rng, pool=None):
        self.rng = rng
        self.pool = pool if pool is not None else Pool(Particle, name="particle")

    def burst(self, x, y, amount):
        spawned = 0
        for _ in range(amount):
            particle = self.pool.reserve()
            if particle is None:
                break
            particle.pos = pygame.Vector2(x, y)
            particle.vel = pygame.Vector2(self.rng.uniform(-1.0, 1.0), self.rng.uniform(-1.0, 1.0))
            particle.rot = 0.0
            particle.rot_speed = self.rng.uniform(-2.0, 2.0)
            particle.color = COLORS["lines"]
            particle.size = self.rng.randint(*PARTICLE_SIZE)
            particle.life_start = self.rng.randint(*PARTICLE_LIFE)
            particle.life_current = particle.life_start
            spawned += 1
        return spawned

    def update(self):
        for particle in self.pool:
            if not particle.active:
                continue
            particle.pos += particle.vel
            particle.rot += particle.rot_speed
            particle.life_current -= 1
            if particle.life_current <= 0:
                self.pool.release(particle)
