"""Wireframe drawing of the cylindrical tank."""

import math
from OpenGL.GL import *

from config import boids as config
from boids import Enclosure


class EnclosureRenderer:
    """Draws the tank wall as rings and uprights, and the floor as a disc outline."""

    def __init__(self, enclosure: Enclosure):
        self.enclosure = enclosure
        self.segments = config.RENDER["wall_segments"]
        self.rings = config.RENDER["wall_rings"]
        self.wall_color = config.COLORS["wall"]
        self.floor_color = config.COLORS["floor"]

        step = 2 * math.pi / self.segments
        self._circle = [
            (math.cos(i * step) * enclosure.radius, math.sin(i * step) * enclosure.radius)
            for i in range(self.segments)
        ]

    def _ring(self, y: float):
        glBegin(GL_LINE_LOOP)
        for x, z in self._circle:
            glVertex3f(x, y, z)
        glEnd()

    def draw(self):
        e = self.enclosure
        glDisable(GL_LIGHTING)

        glColor3f(*self.floor_color)
        self._ring(e.floor_y)
        glBegin(GL_LINES)
        for x, z in self._circle[::4]:
            glVertex3f(0.0, e.floor_y, 0.0); glVertex3f(x, e.floor_y, z)
        glEnd()

        glColor3f(*self.wall_color)
        for r in range(1, self.rings + 1):
            self._ring(e.floor_y + (e.height - e.floor_y) * r / self.rings)

        glBegin(GL_LINES)
        for x, z in self._circle[::4]:
            glVertex3f(x, e.floor_y, z); glVertex3f(x, e.height, z)
        glEnd()

        glEnable(GL_LIGHTING)
