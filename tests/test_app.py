from collections import defaultdict

import pygame

from azteroidz.app import poll_input
from azteroidz.world import InputState


class StubJoystick:
    def __init__(self, hat=(0, 0), axes=(0.0, 0.0), buttons=(0,)):
        self.hat = hat
        self.axes = list(axes)
        self.buttons = list(buttons)

    def get_numhats(self):
        return 1

    def get_hat(self, index):
        return self.hat

    def get_numaxes(self):
        return len(self.axes)

    def get_axis(self, index):
        return self.axes[index]

    def get_numbuttons(self):
        return len(self.buttons)

    def get_button(self, index):
        return self.buttons[index]


def held(*names):
    keys = defaultdict(bool)
    for name in names:
        keys[name] = True
    return keys


def test_keyboard_only():
    inputs = poll_input(held(pygame.K_w, pygame.K_a, pygame.K_SPACE), None, True)
    assert inputs == InputState(thrust=True, rotate_left=True, fire=True, fire_pressed=True)
    assert poll_input(held(pygame.K_RIGHT, pygame.K_UP), None, False) == InputState(thrust=True, rotate_right=True)
    assert poll_input(held(pygame.K_LEFT, pygame.K_d), None, False) == InputState()


def test_hat_left_rotates_left_only():
    inputs = poll_input(held(), StubJoystick(hat=(-1, 0), axes=(0.9, -0.9)), False)
    assert inputs == InputState(rotate_left=True)


def test_hat_up_thrusts():
    assert poll_input(held(), StubJoystick(hat=(0, 1)), False) == InputState(thrust=True)


def test_axis_outside_deadzone_rotates():
    assert poll_input(held(), StubJoystick(axes=(0.6, 0.0)), False) == InputState(rotate_right=True)
    assert poll_input(held(), StubJoystick(axes=(-0.6, 0.0)), False) == InputState(rotate_left=True)


def test_axis_inside_deadzone_is_ignored():
    assert poll_input(held(), StubJoystick(axes=(0.4, -0.4)), False) == InputState()
    assert poll_input(held(), StubJoystick(axes=(0.5, -0.5)), False) == InputState()


def test_axis_up_thrusts():
    assert poll_input(held(), StubJoystick(axes=(0.0, -0.6)), False) == InputState(thrust=True)


def test_fire_button():
    assert poll_input(held(), StubJoystick(buttons=(1,)), False) == InputState(fire=True)
