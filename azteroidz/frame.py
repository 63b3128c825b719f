"""Drawable snapshot handed to the renderer once per tick."""

import enum
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .settings import HEIGHT, WIDTH

Point = Tuple[float, float]


class Mode(enum.IntEnum):
    TITLE = 0
    PLAYING = 1
    GAME_OVER = 2


@dataclass
class ShipView:
    shape: List[Point]
    center: Point
    invulnerable: bool
    alpha: float = 1.0


@dataclass
class AsteroidView:
    vertices: List[Point]

    @property
    def outline(self):
        return self.vertices[1:]


@dataclass
class ParticleView:
    center: Point
    size: int
    rotation: float
    alpha: float
    color: Tuple[int, int, int, int]


@dataclass
class HudText:
    text: str
    size: int
    y: float
    x_offset: float = 0.0


@dataclass
class Frame:
    mode: Mode
    ship: Optional[ShipView] = None
    bullets: List[Point] = field(default_factory=list)
    asteroids: List[AsteroidView] = field(default_factory=list)
    particles: List[ParticleView] = field(default_factory=list)
    hud: List[HudText] = field(default_factory=list)
    stats: Dict[str, float] = field(default_factory=dict)


def invulnerable_alpha(now):
    return abs(math.sin(now * 7))


def hud_lines(mode, score):
    """Texts for the current mode; each is centered horizontally by the renderer."""
    if mode == Mode.TITLE:
        return [
            HudText("ASTEROIDS", 56, HEIGHT / 2 - 56),
            HudText("PRESS SPACE TO PLAY", 24, HEIGHT / 2 + 24),
        ]
    if mode == Mode.PLAYING:
        return [HudText(f"{score:04d}", 22, 8, x_offset=-8)]
    return [
        HudText("GAME OVER", 56, HEIGHT / 2 - 56),
        HudText(f"SCORE {score}", 24, HEIGHT / 2 + 24),
    ]


def centered_x(text_width, x_offset=0.0):
    return WIDTH / 2 - text_width / 2 + x_offset
