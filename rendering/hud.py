"""Text overlay showing simulation status."""

import pygame
from OpenGL.GL import *

from config import boids as config
from boids import Flock


class Hud:
    """Renders status lines with pygame fonts blitted through OpenGL."""

    def __init__(self, font_name: str = "monospace", font_size: int = 18):
        pygame.font.init()
        self.font = pygame.font.SysFont(font_name, font_size)
        self.color = config.COLORS["text"]
        self.line_height = font_size + 6

    @staticmethod
    def status_lines(flock: Flock, fps: float, paused: bool) -> list:
        """Lines describing the flock's last published frame."""
        state = "PAUSED" if paused else f"FPS: {fps:.0f}"
        return [
            f"Boids: {flock.num_boids}  K: {flock.neighborhood_size}  |  {state}",
            f"Frame: {flock.frame}  |  Avoiding walls: {flock.environment_count}",
            "Drag/WASD: orbit  Q/E: zoom  Space: pause  R: respawn",
        ]

    def _draw_line(self, text: str, x: int, y: int, screen_size: tuple):
        surface = self.font.render(text, True, self.color)
        data = pygame.image.tostring(surface, "RGBA", True)
        w, h = surface.get_size()
        glRasterPos2f(x, screen_size[1] - y - h)
        glDrawPixels(w, h, GL_RGBA, GL_UNSIGNED_BYTE, data)

    def draw(self, lines: list, screen_size: tuple):
        """Draw `lines` top-left, switching to an orthographic projection meanwhile."""
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, screen_size[0], 0, screen_size[1], -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()

        glDisable(GL_LIGHTING)
        glDisable(GL_DEPTH_TEST)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)

        for row, text in enumerate(lines):
            self._draw_line(text, 10, 10 + row * self.line_height, screen_size)

        glDisable(GL_BLEND)
        glEnable(GL_DEPTH_TEST)
        glEnable(GL_LIGHTING)

        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)
