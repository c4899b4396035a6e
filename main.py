"""
Reef Boids
==========

A flock of boids swimming inside a cylindrical tank, with an orbital camera.

Controls:
    - W/S: Rotate camera up/down
    - A/D: Rotate camera left/right
    - Q/E: Zoom in/out
    - Mouse drag: Rotate camera
    - Mouse wheel: Zoom
    - Space: Pause/resume
    - R: Respawn the flock
    - ESC: Quit

Usage:
    python main.py                             # Open the viewer
    python main.py --seed 7 --count 60         # Reproducible, larger flock
    python main.py --headless --frames 5000    # Simulate without a window
"""

import argparse
import time

from config import boids as config
from boids import Flock


def run_headless(flock: Flock, frames: int, report_every: int = 500) -> dict:
    """
    Tick an initialized flock `frames` times without rendering.

    Returns:
        Summary stats of the run
    """
    start = time.perf_counter()
    peak_avoiding = 0

    for _ in range(frames):
        flock.update()
        peak_avoiding = max(peak_avoiding, flock.environment_count)
        if report_every and flock.frame % report_every == 0:
            print(f"[Boids] Frame {flock.frame:,}: "
                  f"{flock.environment_count}/{flock.num_boids} avoiding walls")

    elapsed = time.perf_counter() - start
    return {
        "frames": frames,
        "elapsed": elapsed,
        "peak_avoiding": peak_avoiding,
        "degenerate_steps": flock.degenerate_count,
    }


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Boids flocking inside a cylindrical tank",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--count", type=int, default=config.BOIDS["count"],
                        help=f"Number of boids (default: {config.BOIDS['count']})")
    parser.add_argument("--neighbors", type=int, default=config.BOIDS["neighborhood_size"],
                        help=f"Neighborhood size K (default: {config.BOIDS['neighborhood_size']})")
    parser.add_argument("--seed", type=int, help="Random seed for the initial flock")
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument("--frames", type=int, default=1000,
                        help="Frames to simulate in headless mode (default: 1000)")
    parser.add_argument("--report-every", type=int, default=500,
                        help="Headless progress interval in frames, 0 to disable (default: 500)")

    args = parser.parse_args(argv)

    try:
        flock = Flock(num_boids=args.count, neighborhood_size=args.neighbors)
    except ValueError as e:
        parser.error(str(e))

    if args.headless:
        flock.initialize(args.seed)
        stats = run_headless(flock, args.frames, args.report_every)
        print(f"[Boids] {stats['frames']:,} frames in {stats['elapsed']:.2f}s "
              f"(peak avoiding: {stats['peak_avoiding']}, "
              f"degenerate steps: {stats['degenerate_steps']})")
        return

    from core import Application

    app = Application(flock, seed=args.seed)
    app.run()


if __name__ == "__main__":
    main()
