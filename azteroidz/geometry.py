import math

import pygame

from .settings import HEIGHT, WIDTH


def angle_to_vector(angle_deg):
    radians = math.radians(angle_deg)
    return pygame.Vector2(math.cos(radians), math.sin(radians))


def clamp(value, lo, hi):
    return max(lo, min(hi, value))


def wrap_value(value, size):
    value %= size
    # tiny negatives round up to ``size`` under float modulo
    return 0.0 if value >= size else value


def wrap_position(pos):
    return pygame.Vector2(wrap_value(pos.x, WIDTH), wrap_value(pos.y, HEIGHT))


def in_arena(pos):
    return 0 <= pos.x < WIDTH and 0 <= pos.y < HEIGHT


def point_in_polygon(point, vertices):
    """Even-odd crossing test; ``vertices`` is an ordered ring of points."""
    inside = False
    count = len(vertices)
    if count < 3:
        return False
    px, py = point[0], point[1]
    j = count - 1
    for i in range(count):
        xi, yi = vertices[i][0], vertices[i][1]
        xj, yj = vertices[j][0], vertices[j][1]
        if (yi > py) != (yj > py):
            cross_x = (xj - xi) * (py - yi) / (yj - yi) + xi
            if px < cross_x:
                inside = not inside
        j = i
    return inside


def point_in_triangle(point, a, b, c):
    # barycentric, edges excluded
    px, py = point[0], point[1]
    denom = (b[1] - c[1]) * (a[0] - c[0]) + (c[0] - b[0]) * (a[1] - c[1])
    if denom == 0:
        return False
    alpha = ((b[1] - c[1]) * (px - c[0]) + (c[0] - b[0]) * (py - c[1])) / denom
    beta = ((c[1] - a[1]) * (px - c[0]) + (a[0] - c[0]) * (py - c[1])) / denom
    gamma = 1.0 - alpha - beta
    return alpha > 0 and beta > 0 and gamma > 0


def polygon_outline(center, sides, radius, rotation):
    points = []
    for i in range(sides):
        angle = math.radians(rotation + 360.0 / sides * i)
        points.append((center[0] + math.cos(angle) * radius, center[1] + math.sin(angle) * radius))
    return points
