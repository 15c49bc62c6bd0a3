
import pygame

class GameOverOverlay:
    """Half-transparent veil over the board with a centred caption."""
    def __init__(self, rect: pygame.Rect, font: pygame.font.Font, text: str = "Game Over"):
        self.rect = rect
        self.veil = pygame.Surface(rect.size, pygame.SRCALPHA)
        self.veil.fill((0,0,0,128))
        self.msg = font.render(text, True, (255,255,255))

    def draw(self, screen, active: bool):
        if not active: return
        screen.blit(self.veil, self.rect.topleft)
        screen.blit(self.msg, self.msg.get_rect(center=self.rect.center))
