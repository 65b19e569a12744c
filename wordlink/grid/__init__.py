"""Crossword-style word placement for Word Link."""

from .models import Direction, Letter, PlacedWord
from .placer import place_words, normalize
from .render import build_grid, render_grid, visualize

__all__ = [
    # Placement
    "place_words",
    "normalize",
    # Models
    "Direction",
    "Letter",
    "PlacedWord",
    # Grid utilities
    "build_grid",
    "render_grid",
    "visualize",
]
