"""Main application class that ties everything together."""

import pygame
from pygame.locals import *
from OpenGL.GL import *
from OpenGL.GLU import *

from config import boids as config
from .camera import Camera
from .input_handler import InputHandler
from rendering import EnclosureRenderer, FlockRenderer, Hud
from boids import Flock


class Application:
    """
    Window, frame loop and drawing.

    The flock is ticked exactly once per rendered frame, and drawn only after
    the tick has published, so rendering never sees a half-updated frame.
    """

    def __init__(self, flock: Flock, seed=None):
        pygame.init()
        pygame.display.set_mode(
            (config.WINDOW["width"], config.WINDOW["height"]),
            DOUBLEBUF | OPENGL
        )
        pygame.display.set_caption(config.WINDOW["title"])

        # Core components
        self.camera = Camera()
        self.input_handler = InputHandler(self.camera)

        # Simulation
        self.flock = flock
        self.seed = seed
        self.flock.initialize(seed)

        # Rendering components
        self.enclosure_renderer = EnclosureRenderer(flock.enclosure)
        self.flock_renderer = FlockRenderer()
        self.hud = Hud()

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.paused = False
        self.fps = 0

        self._setup_gl()

    def _setup_gl(self):
        """Initialize OpenGL settings."""
        glClearColor(*config.COLORS["background"])
        glEnable(GL_DEPTH_TEST)
        glEnable(GL_NORMALIZE)
        glEnable(GL_LIGHTING)
        glEnable(GL_LIGHT0)
        glShadeModel(GL_SMOOTH)

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        gluPerspective(
            config.CAMERA["fov"],
            config.WINDOW["width"] / config.WINDOW["height"],
            config.CAMERA["near_clip"],
            config.CAMERA["far_clip"]
        )
        glMatrixMode(GL_MODELVIEW)

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if not self.input_handler.handle_event(event):
                self.running = False

        if self.input_handler.consume("pause"):
            self.paused = not self.paused
            print(f"[App] {'Paused' if self.paused else 'Running'}")

        if self.input_handler.consume("respawn"):
            self._respawn()

    def _respawn(self):
        """Scatter a fresh flock; with a seed it is the same flock as at startup."""
        print(f"[App] Respawning flock (seed: {self.seed})...")
        self.flock.initialize(self.seed)

    def _update(self, dt: float):
        self.input_handler.handle_held_keys(pygame.key.get_pressed(), dt)
        self.camera.update(dt)
        if not self.paused:
            self.flock.update()

    def _render(self):
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        self.camera.apply()
        glLightfv(GL_LIGHT0, GL_POSITION, config.RENDER["light_position"])

        self.enclosure_renderer.draw()
        self.flock_renderer.draw(self.flock)

        screen_size = (config.WINDOW["width"], config.WINDOW["height"])
        self.hud.draw(self.hud.status_lines(self.flock, self.fps, self.paused), screen_size)

        pygame.display.flip()

    def run(self):
        """Main application loop."""
        print("[App] Starting main loop...")
        while self.running:
            dt = self.clock.tick(config.WINDOW["fps"]) / 1000.0
            self.fps = self.clock.get_fps()

            self._handle_events()
            self._update(dt)
            self._render()

        pygame.quit()
        print("[App] Shutdown complete")
