
"""Sound effects keyed by game event name"""
import logging
import os
from typing import Dict, Optional
import pygame
from tetris_config import CONFIG

log = logging.getLogger(__name__)

SOUND_FILES: Dict[str, str] = {
    "rotate": "rotate.wav",
    "move": "move.wav",
    "drop": "drop.wav",
    "clear": "clear.wav",
    "gameOver": "gameover.wav",
}

class AudioService:
    """Fire-and-forget playback. A missing device or file leaves that event silent."""
    def __init__(self, sound_dir: Optional[str] = None):
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        sound_dir = sound_dir or CONFIG["SOUND_DIR"]
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as e:
            log.warning("audio disabled: %s", e)
            return
        for name, fn in SOUND_FILES.items():
            path = os.path.join(sound_dir, fn)
            try:
                self.sounds[name] = pygame.mixer.Sound(path)
            except (pygame.error, FileNotFoundError) as e:
                log.warning("could not load sound %r from %s: %s", name, path, e)

    def play(self, name: str):
        sound = self.sounds.get(name)
        if sound is None: return
        try:
            sound.stop()
            sound.play()
        except pygame.error as e:
            log.warning("audio play failed for %r: %s", name, e)
