"""A grid-based snake arcade game: canvas, snake logic, food, menus and game loop."""

__version__ = "0.1.0"