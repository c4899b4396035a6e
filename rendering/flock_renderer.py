"""Lit arrowhead rendering of the flock."""

from OpenGL.GL import *

from config import boids as config
from boids import Flock, geometry


class FlockRenderer:
    """
    Draws each boid as a six-faced arrowhead pointing along its heading.

    The mesh is built once in model space with +Z as the nose; every boid is
    drawn by rotating it to the boid's yaw and pitch.
    """

    def __init__(self):
        apex = config.RENDER["apex"]
        base = config.RENDER["base"]
        self.scale = config.RENDER["scale"]

        nose = (0.0, 0.0, apex)
        top_left = (base, base, -apex)
        top_right = (-base, base, -apex)
        bottom_left = (base, -base, -apex)
        bottom_right = (-base, -base, -apex)

        faces = [
            (nose, top_left, top_right),
            (nose, bottom_left, top_left),
            (nose, bottom_right, bottom_left),
            (nose, top_right, bottom_right),
            (top_left, bottom_left, top_right),
            (top_right, bottom_left, bottom_right),
        ]
        self.faces = [(geometry.triangle_normal(*face), face) for face in faces]

    def _apply_material(self):
        glMaterialfv(GL_FRONT, GL_AMBIENT, config.RENDER["ambient"])
        glMaterialfv(GL_FRONT, GL_DIFFUSE, config.RENDER["diffuse"])
        glMaterialfv(GL_FRONT, GL_SPECULAR, config.RENDER["specular"])
        glMaterialf(GL_FRONT, GL_SHININESS, config.RENDER["shininess"])

    def draw(self, flock: Flock):
        """Draw the last published frame of `flock`."""
        self._apply_material()

        for boid in flock.boids():
            glPushMatrix()
            glTranslatef(*boid.position)
            glRotatef(boid.yaw, 0.0, 1.0, 0.0)
            glRotatef(-boid.pitch, 1.0, 0.0, 0.0)
            glScalef(self.scale, self.scale, self.scale)

            glBegin(GL_TRIANGLES)
            for normal, vertices in self.faces:
                glNormal3f(*normal)
                for vertex in vertices:
                    glVertex3f(*vertex)
            glEnd()

            glPopMatrix()
