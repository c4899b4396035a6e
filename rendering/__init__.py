"""Rendering components for the reef boids viewer."""

from .enclosure import EnclosureRenderer
from .flock_renderer import FlockRenderer
from .hud import Hud

__all__ = ["EnclosureRenderer", "FlockRenderer", "Hud"]
