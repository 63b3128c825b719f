import logging

import pygame

from .audio import SoundBank
from .render import Renderer, debug_lines
from .settings import FPS, HEIGHT, TITLE, WIDTH
from .world import InputState, World

JOY_AXIS_X = 0
JOY_AXIS_Y = 1
JOY_AXIS_DEADZONE = 0.5
JOY_FIRE_BUTTON = 0

logger = logging.getLogger(__name__)


def poll_input(keys, joystick, fire_pressed):
    turn = 0
    thrusting = False
    fire = False
    hat_x = 0
    hat_y = 0
    axis_x = 0.0
    axis_y = 0.0
    if joystick:
        if joystick.get_numhats() > 0:
            hat_x, hat_y = joystick.get_hat(0)
        if joystick.get_numaxes() > max(JOY_AXIS_X, JOY_AXIS_Y):
            axis_x = joystick.get_axis(JOY_AXIS_X)
            axis_y = joystick.get_axis(JOY_AXIS_Y)
        if joystick.get_numbuttons() > JOY_FIRE_BUTTON:
            fire = bool(joystick.get_button(JOY_FIRE_BUTTON))

    if keys[pygame.K_LEFT] or keys[pygame.K_a]:
        turn -= 1
    if keys[pygame.K_RIGHT] or keys[pygame.K_d]:
        turn += 1
    if keys[pygame.K_UP] or keys[pygame.K_w]:
        thrusting = True
    if keys[pygame.K_SPACE]:
        fire = True
    if hat_x < 0:
        turn -= 1
    if hat_x > 0:
        turn += 1
    if hat_y > 0:
        thrusting = True
    if hat_x == 0 and hat_y == 0:
        if axis_x < -JOY_AXIS_DEADZONE:
            turn -= 1
        if axis_x > JOY_AXIS_DEADZONE:
            turn += 1
        if axis_y < -JOY_AXIS_DEADZONE:
            thrusting = True

    return InputState(
        thrust=thrusting,
        rotate_left=turn < 0,
        rotate_right=turn > 0,
        fire=fire,
        fire_pressed=fire_pressed,
    )


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    pygame.joystick.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    joystick = None
    if pygame.joystick.get_count() > 0:
        joystick = pygame.joystick.Joystick(0)
        joystick.init()
        logger.info("Using gamepad %s", joystick.get_name())

    audio = SoundBank()
    renderer = Renderer(screen)
    world = World(now=pygame.time.get_ticks() / 1000.0, audio=audio)
    show_debug = False

    running = True
    while running:
        fire_pressed = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    fire_pressed = True
                elif event.key == pygame.K_F1:
                    show_debug = not show_debug
            elif event.type == pygame.JOYBUTTONDOWN and event.button == JOY_FIRE_BUTTON:
                fire_pressed = True
        if not running:
            break

        inputs = poll_input(pygame.key.get_pressed(), joystick, fire_pressed)
        now = pygame.time.get_ticks() / 1000.0
        world.tick(inputs, now)

        frame = world.frame(now)
        renderer.draw(frame, debug_lines(frame, clock.get_fps()) if show_debug else None)
        pygame.display.flip()
        clock.tick(FPS)

    audio.close()
    pygame.quit()
    return 0
