"""Configuration for the reef boids flocking simulation."""

WINDOW = {
    "width": 1280,
    "height": 720,
    "title": "Reef Boids",
    "fps": 60
}

CAMERA = {
    "fov": 60.0,
    "near_clip": 0.1,
    "far_clip": 200.0,
    "initial_radius": 24.0,
    "initial_theta": 45.0,
    "initial_phi": 20.0,
    "min_radius": 2.0,
    "max_radius": 80.0,
    "min_phi": -89.0,
    "max_phi": 89.0,
    "keyboard_rotate_speed": 60.0,
    "keyboard_zoom_speed": 10.0,
    "mouse_sensitivity": 0.3,
    "wheel_zoom_step": 2.0
}

# Cylindrical tank, axis along Y
ENVIRONMENT = {
    "radius": 10.0,
    "height": 10.0,    # Y of the ceiling
    "floor_y": -1.0,
}

BOIDS = {
    "count": 40,
    "neighborhood_size": 6,      # K nearest neighbors considered per boid
    "speed": 0.01,               # Distance travelled per frame

    # Spawn volume: X,Z uniform, Y integer levels
    "spawn_xz": (-4.0, 4.0),
    "spawn_y_levels": (1, 8),

    # Distance thresholds
    "separation_trigger": 1.0,
    "environment_trigger": 2.0,

    # Steering strengths
    "environment_strength": 0.1,
    "separation_strength": 0.005,
    "alignment_strength": 0.00125,
    "cohesion_strength": 0.002,

    "epsilon": 1e-6,             # Softening for inverse-square weights
}

RENDER = {
    "apex": 2.0,                 # Nose distance from boid center (model units)
    "base": 1.0,                 # Half-width of the tail
    "scale": 0.1,
    "wall_segments": 48,
    "wall_rings": 5,
    "ambient": (0.2, 0.2, 0.2, 1.0),
    "diffuse": (0.0, 1.0, 1.0, 1.0),
    "specular": (1.0, 1.0, 1.0, 1.0),
    "shininess": 20.0,
    "light_position": (0.0, 10.0, 0.0, 1.0),
}

COLORS = {
    "background": (0.01, 0.05, 0.1, 1.0),
    "wall": (0.15, 0.3, 0.4),
    "floor": (0.55, 0.5, 0.35),
    "text": (230, 230, 230)
}
