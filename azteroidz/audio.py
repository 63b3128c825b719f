import logging
import os

import pygame

from .settings import SOUND_FILES, SOUND_VOLUME

logger = logging.getLogger(__name__)

ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "assets")


class SilentAudio:
    def play(self, name):
        pass


class SoundBank:
    """Fire-and-forget sound triggers backed by ``pygame.mixer``.

    Sounds that fail to load are skipped; ``play`` on them does nothing.
    """

    def __init__(self, assets_dir=ASSETS_DIR, volume=SOUND_VOLUME):
        self.sounds = {}
        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as e:
                logger.warning("Audio device unavailable, running silent: %s", e)
                return
        for name, filename in SOUND_FILES.items():
            path = os.path.join(assets_dir, filename)
            try:
                sound = pygame.mixer.Sound(path)
            except (pygame.error, FileNotFoundError) as e:
                logger.warning("Failed to load sound %s: %s", filename, e)
                continue
            sound.set_volume(volume)
            self.sounds[name] = sound
        logger.info("Loaded %d of %d sounds from %s", len(self.sounds), len(SOUND_FILES), assets_dir)

    def play(self, name):
        sound = self.sounds.get(name)
        if sound is not None:
            sound.play()

    def close(self):
        self.sounds.clear()
        if pygame.mixer.get_init():
            pygame.mixer.quit()
