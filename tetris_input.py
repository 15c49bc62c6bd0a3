
"""Keyboard -> game action"""
from typing import Dict, Optional
import pygame

KEY_ACTIONS: Dict[int, str] = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_DOWN: "down",
    pygame.K_UP: "rotate",
}

def action_for(key: int) -> Optional[str]:
    return KEY_ACTIONS.get(key)
