"""Engine core for a 2D side-scrolling platformer: geometry, camera, animation, collision and debug overlay."""

__version__ = "0.1.0"