import pygame
from tetris_input import action_for


def test_arrow_keys():
    assert action_for(pygame.K_LEFT) == "left"
    assert action_for(pygame.K_RIGHT) == "right"
    assert action_for(pygame.K_DOWN) == "down"
    assert action_for(pygame.K_UP) == "rotate"


def test_other_keys_ignored():
    assert action_for(pygame.K_SPACE) is None
    assert action_for(pygame.K_a) is None
