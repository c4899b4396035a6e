"""Orbital camera circling the tank."""

import numpy as np
from OpenGL.GL import *
from OpenGL.GLU import *

from config import boids as config
from boids import geometry


class Camera:
    """Orbital camera looking at the middle of the tank, with smooth zoom."""

    def __init__(self):
        self.radius = config.CAMERA["initial_radius"]
        self.target_radius = self.radius
        self.theta = config.CAMERA["initial_theta"]
        self.phi = config.CAMERA["initial_phi"]
        env = config.ENVIRONMENT
        self.target = np.array([0.0, (env["floor_y"] + env["height"]) / 2, 0.0])
        self.zoom_smoothing = 8.0

    def get_direction(self) -> np.ndarray:
        """Unit vector from the look-at target toward the camera."""
        # theta sweeps around Y, phi lifts above the XZ plane
        return geometry.direction_from_angles(
            geometry.degree_to_radian(self.phi),
            geometry.degree_to_radian(self.theta)
        )

    def get_position(self) -> np.ndarray:
        return self.target + self.radius * self.get_direction()

    def rotate(self, d_theta: float, d_phi: float):
        """Rotate the camera by the given angles in degrees."""
        self.theta = (self.theta + d_theta) % 360
        self.phi = max(
            config.CAMERA["min_phi"],
            min(config.CAMERA["max_phi"], self.phi + d_phi)
        )

    def _clamp_radius(self, radius: float) -> float:
        return max(config.CAMERA["min_radius"], min(config.CAMERA["max_radius"], radius))

    def zoom(self, delta: float):
        """Immediately zoom by the given amount."""
        self.radius = self._clamp_radius(self.radius + delta)
        self.target_radius = self.radius

    def zoom_smooth(self, delta: float):
        """Ease toward a zoom offset over the next frames."""
        self.target_radius = self._clamp_radius(self.target_radius + delta)

    def update(self, dt: float):
        step = min(1.0, self.zoom_smoothing * dt)
        self.radius = self._clamp_radius(self.radius + (self.target_radius - self.radius) * step)

    def apply(self):
        """Load the view transform into the OpenGL modelview matrix."""
        pos = self.get_position()
        glLoadIdentity()
        gluLookAt(
            pos[0], pos[1], pos[2],
            self.target[0], self.target[1], self.target[2],
            0, 1, 0
        )
