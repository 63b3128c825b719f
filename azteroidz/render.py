import math

import pygame

from .frame import centered_x
from .geometry import polygon_outline
from .settings import COLORS


def with_alpha(color, alpha):
    return (color[0], color[1], color[2], int(max(0.0, min(1.0, alpha)) * color[3]))


class Renderer:
    """Draws a ``Frame`` onto a pygame surface."""

    def __init__(self, surface, font_name=None):
        self.surface = surface
        self.font_name = font_name
        self.fonts = {}
        self.overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)

    def font(self, size):
        if size not in self.fonts:
            self.fonts[size] = pygame.font.SysFont(self.font_name, size)
        return self.fonts[size]

    def measure_text(self, text, size):
        return self.font(size).size(text)[0]

    def draw_text(self, text, x, y, size, color):
        image = self.font(size).render(text, True, color)
        self.surface.blit(image, (x, y))

    def draw(self, frame, debug_lines=None):
        surface = self.surface
        surface.fill(COLORS["bg"])
        self.overlay.fill((0, 0, 0, 0))

        if frame.ship is not None:
            self.draw_ship(frame.ship)
            for x, y in frame.bullets:
                pygame.draw.circle(surface, COLORS["bullet"], (int(x), int(y)), 4)

        for asteroid in frame.asteroids:
            outline = asteroid.outline
            if len(outline) >= 3:
                pygame.draw.polygon(surface, COLORS["bg"], outline)
            if len(outline) >= 2:
                pygame.draw.lines(surface, COLORS["lines"], False, outline, 1)

        for particle in frame.particles:
            points = polygon_outline(particle.center, 3, particle.size, particle.rotation)
            pygame.draw.polygon(self.overlay, with_alpha(particle.color, particle.alpha), points, 1)

        surface.blit(self.overlay, (0, 0))

        for line in frame.hud:
            x = centered_x(self.measure_text(line.text, line.size), line.x_offset)
            self.draw_text(line.text, x, line.y, line.size, COLORS["lines"])

        if debug_lines:
            for i, (text, color) in enumerate(debug_lines):
                self.draw_text(text, 8, 48 + i * 16, 12, color)

    def draw_ship(self, ship):
        if ship.invulnerable:
            self.draw_faded_outline(ship.shape, with_alpha((255, 255, 255, 255), ship.alpha))
        else:
            pygame.draw.polygon(self.surface, COLORS["lines"], ship.shape, 1)
        pygame.draw.circle(self.surface, COLORS["ship_core"], (int(ship.center[0]), int(ship.center[1])), 4)

    def draw_faded_outline(self, points, color):
        # own layer so the outline stacks like an opaque one
        left = int(math.floor(min(x for x, _ in points))) - 1
        top = int(math.floor(min(y for _, y in points))) - 1
        width = int(math.ceil(max(x for x, _ in points))) - left + 2
        height = int(math.ceil(max(y for _, y in points))) - top + 2
        layer = pygame.Surface((width, height), pygame.SRCALPHA)
        pygame.draw.polygon(layer, color, [(x - left, y - top) for x, y in points], 1)
        self.surface.blit(layer, (left, top))


def debug_lines(frame, fps):
    stats = frame.stats
    return [
        (f"FPS: {fps:.0f}", COLORS["debug"]),
        (f"Player rot_vel: {stats.get('rot_vel', 0.0):05.2f}", COLORS["debug"]),
        (f"Bullets: {stats.get('bullets', 0):02d}", COLORS["debug"]),
        (f"Asteroids: {stats.get('asteroids', 0):02d}", COLORS["debug"]),
        (f"Particles: {stats.get('particles', 0):02d}", COLORS["debug"]),
        (f"Invul.: {stats.get('invulnerable', 0)}", COLORS["debug_player"]),
        (f"Invul. Frames: {stats.get('invulnerable_ticks', 0)}", COLORS["debug_player"]),
        (f"Lives: {stats.get('lives', 0)}", COLORS["debug_player"]),
        (f"Max Asteroids: {stats.get('asteroids_max', 0)}", COLORS["debug_player"]),
    ]
