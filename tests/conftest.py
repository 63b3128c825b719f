import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from azteroidz.rng import RandomSource  # noqa: E402
from azteroidz.world import World  # noqa: E402


class RecordingAudio:
    def __init__(self):
        self.played = []

    def play(self, name):
        self.played.append(name)

    def count(self, name):
        return self.played.count(name)


@pytest.fixture
def rng():
    return RandomSource()


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def world(audio):
    return World(now=0.0, audio=audio)
