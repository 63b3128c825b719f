"""World state and the per-tick driver.

``World`` aggregates the pools, the ship, the game mode, timers and score.
``World.tick`` runs one frame of simulation to completion; ``World.frame``
captures what the renderer should draw afterwards.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields

from .asteroids import AsteroidField
from .audio import SilentAudio
from .bullets import BulletSystem
from .frame import (
    AsteroidView,
    Frame,
    Mode,
    ParticleView,
    ShipView,
    hud_lines,
    invulnerable_alpha,
)
from .geometry import point_in_polygon
from .particles import ParticleSystem
from .player import Player
from .rng import RandomSource
from .settings import (
    ASTEROID_INCREMENT_INTERVAL,
    ASTEROID_MAX_LIMIT,
    ASTEROID_START_NUMBER,
    BURST_ASTEROID,
    BURST_PLAYER,
    FIRE_COOLDOWN,
    SOUND_EXPLOSION_ASTEROID,
    SOUND_EXPLOSION_PLAYER,
    SOUND_LASER,
)

logger = logging.getLogger(__name__)


@dataclass
class InputState:
    thrust: bool = False
    rotate_left: bool = False
    rotate_right: bool = False
    fire: bool = False
    fire_pressed: bool = False

    @classmethod
    def from_mapping(cls, values):
        """Build from a dict of flags; absent keys read as not held."""
        return cls(**{f.name: bool(values.get(f.name, False)) for f in fields(cls)})


class World:
    def __init__(self, now=0.0, rng=None, audio=None):
        self.rng = rng if rng is not None else RandomSource()
        self.audio = audio if audio is not None else SilentAudio()
        self.particles = ParticleSystem(self.rng)
        self.bullets = BulletSystem()
        self.asteroids = AsteroidField(self.rng)
        self.player = Player()
        self.mode = Mode.TITLE
        self.score = 0
        self.asteroids_max = ASTEROID_START_NUMBER
        self.time_shoot = now
        self.time_asteroids_increment = now
        self.asteroids.spawn_random(ASTEROID_START_NUMBER)

    # -- mode machine ---------------------------------------------------

    def start_match(self, now):
        self.mode = Mode.PLAYING
        self.score = 0
        self.time_asteroids_increment = now
        self.asteroids.clear_all()
        self.asteroids.spawn_random(ASTEROID_START_NUMBER)
        logger.info("Match started")

    def game_over(self):
        self.mode = Mode.GAME_OVER
        logger.info("Game over, score %d", self.score)

    def back_to_title(self):
        self.mode = Mode.TITLE
        self.player.reset()
        self.asteroids_max = ASTEROID_START_NUMBER
        self.asteroids.clear_all()
        self.asteroids.spawn_random(ASTEROID_START_NUMBER)
        logger.info("Back to title")

    # -- tick -----------------------------------------------------------

    def tick(self, inputs, now):
        if inputs is None:
            inputs = InputState()
        elif isinstance(inputs, Mapping):
            inputs = InputState.from_mapping(inputs)

        mode = self.mode
        playing = mode == Mode.PLAYING

        if playing:
            self._grow_wave(now)
            self._steer(inputs)
            self.player.update()
            self._shoot(inputs, now)

        self._update_bullets()
        self._update_asteroids(check_player=playing)

        if self.mode == Mode.PLAYING and self.player.lives == 0:
            self.game_over()

        self.particles.update()

        if inputs.fire_pressed:
            if mode == Mode.TITLE:
                self.start_match(now)
            elif mode == Mode.GAME_OVER:
                self.back_to_title()

    def _grow_wave(self, now):
        if self.asteroids.number_actives < self.asteroids_max:
            self.asteroids.spawn_random()

        if now - self.time_asteroids_increment > ASTEROID_INCREMENT_INTERVAL and self.asteroids_max < ASTEROID_MAX_LIMIT:
            self.asteroids_max += 1
            self.time_asteroids_increment = now
            logger.debug("Asteroid cap raised to %d", self.asteroids_max)

    def _steer(self, inputs):
        if inputs.thrust:
            self.player.thrust()
        if inputs.rotate_left:
            self.player.rotate_left()
        if inputs.rotate_right:
            self.player.rotate_right()

    def _shoot(self, inputs, now):
        if not inputs.fire or now - self.time_shoot <= FIRE_COOLDOWN:
            return False
        bullet = self.bullets.fire(self.player.pos, self.player.rot)
        if bullet is not None:
            self.audio.play(SOUND_LASER)
        # cooldown applies even when no bullet was available
        self.time_shoot = now
        return bullet is not None

    def _update_bullets(self):
        for bullet in self.bullets.pool:
            if not bullet.active:
                continue
            if not self.bullets.advance(bullet):
                continue
            for asteroid in self.asteroids.pool:
                if not asteroid.active:
                    continue
                if point_in_polygon(bullet.pos, asteroid.outline):
                    self._break_asteroid(bullet, asteroid)
                    break

    def _break_asteroid(self, bullet, asteroid):
        self.bullets.release(bullet)
        self.score += 1
        self.particles.burst(asteroid.pos.x, asteroid.pos.y, BURST_ASTEROID)
        self.asteroids.fragment(asteroid)
        self.audio.play(SOUND_EXPLOSION_ASTEROID)

    def _update_asteroids(self, check_player):
        player = self.player
        for asteroid in self.asteroids.pool:
            if not asteroid.active:
                continue
            asteroid.advance()
            if not check_player or player.invulnerable:
                continue
            if any(player.collides_with(vertex) for vertex in asteroid.vertices):
                self.particles.burst(player.pos.x, player.pos.y, BURST_PLAYER)
                player.kill()
                self.audio.play(SOUND_EXPLOSION_PLAYER)
                logger.info("Ship destroyed, %d lives left", player.lives)

    # -- snapshot -------------------------------------------------------

    def frame(self, now):
        frame = Frame(mode=self.mode, hud=hud_lines(self.mode, self.score))
        if self.mode == Mode.PLAYING:
            player = self.player
            frame.ship = ShipView(
                shape=[(p.x, p.y) for p in player.shape],
                center=(player.pos.x, player.pos.y),
                invulnerable=player.invulnerable,
                alpha=invulnerable_alpha(now) if player.invulnerable else 1.0,
            )
            frame.bullets = [(b.pos.x, b.pos.y) for b in self.bullets.pool.actives()]
        for asteroid in self.asteroids.pool.actives():
            frame.asteroids.append(
                AsteroidView(vertices=[(v.x, v.y) for v in asteroid.vertices])
            )
        for particle in self.particles.pool.actives():
            frame.particles.append(
                ParticleView(
                    center=(particle.pos.x, particle.pos.y),
                    size=particle.size,
                    rotation=particle.rot,
                    alpha=particle.alpha,
                    color=particle.color,
                )
            )
        frame.stats = {
            "rot_vel": self.player.rot_vel,
            "bullets": self.bullets.pool.number_actives,
            "asteroids": self.asteroids.number_actives,
            "particles": self.particles.pool.number_actives,
            "invulnerable": int(self.player.invulnerable),
            "invulnerable_ticks": self.player.invulnerable_ticks,
            "lives": self.player.lives,
            "asteroids_max": self.asteroids_max,
        }
        return frame
