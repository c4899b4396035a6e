"""Viewer components: frame loop, orbital camera and input mapping."""

from .camera import Camera
from .input_handler import InputHandler
from .application import Application

__all__ = ["Camera", "InputHandler", "Application"]
