"""Building blocks for a 2D side-scrolling platformer: containers, timers,
animations, A* pathfinding, entities, UI controls and pygame rendering."""

__version__ = "0.1.0"