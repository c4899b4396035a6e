"""Keyboard and mouse bindings for the tank viewer."""

import pygame
from pygame.locals import *

from config import boids as config
from .camera import Camera


# Held keys orbiting the camera: key -> (theta sign, phi sign)
ORBIT_KEYS = {
    K_a: (-1, 0),
    K_d: (1, 0),
    K_w: (0, 1),
    K_s: (0, -1),
}

# Held keys moving the camera toward (-1) or away from (+1) the tank center
ZOOM_KEYS = {
    K_q: -1,
    K_e: 1,
}

# One-shot keys that control the simulation rather than the camera
COMMAND_KEYS = {
    K_SPACE: "pause",
    K_r: "respawn",
}


class InputHandler:
    """
    Turns pygame input into camera orbit/zoom and viewer commands.

    The flock steers itself, so the viewer only ever issues two commands:
    "pause" toggles the simulation and "respawn" scatters a fresh flock.
    Commands queue up until the application consumes them once per frame.
    """

    def __init__(self, camera: Camera):
        self.camera = camera
        self.mouse_dragging = False
        self.last_mouse_pos = (0, 0)
        self.pending = set()

    def consume(self, command: str) -> bool:
        """Return True once if `command` was requested since the last call."""
        if command in self.pending:
            self.pending.discard(command)
            return True
        return False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.

        Returns:
            False if the viewer should close
        """
        if event.type == QUIT:
            return False

        if event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return False
            command = COMMAND_KEYS.get(event.key)
            if command:
                self.pending.add(command)
        elif event.type == MOUSEBUTTONDOWN and event.button == 1:
            self.mouse_dragging = True
            self.last_mouse_pos = event.pos
        elif event.type == MOUSEBUTTONUP and event.button == 1:
            self.mouse_dragging = False
        elif event.type == MOUSEMOTION and self.mouse_dragging:
            self._drag_to(event.pos)
        elif event.type == MOUSEWHEEL:
            # Wheel up pulls the camera in toward the flock
            self.camera.zoom_smooth(-event.y * config.CAMERA["wheel_zoom_step"])

        return True

    def _drag_to(self, pos):
        dx = pos[0] - self.last_mouse_pos[0]
        dy = pos[1] - self.last_mouse_pos[1]
        sensitivity = config.CAMERA["mouse_sensitivity"]
        self.camera.rotate(dx * sensitivity, dy * sensitivity)
        self.last_mouse_pos = pos

    def handle_held_keys(self, pressed, dt: float):
        """Orbit and zoom for every binding held down this frame."""
        rot_step = config.CAMERA["keyboard_rotate_speed"] * dt
        zoom_step = config.CAMERA["keyboard_zoom_speed"] * dt

        for key, (theta, phi) in ORBIT_KEYS.items():
            if pressed[key]:
                self.camera.rotate(theta * rot_step, phi * rot_step)

        for key, sign in ZOOM_KEYS.items():
            if pressed[key]:
                self.camera.zoom(sign * zoom_step)
