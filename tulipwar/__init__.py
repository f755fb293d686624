"""War of the Tulips: a bee-versus-wasp paddle game built on pygame."""

__version__ = "0.1.0"
__all__ = ["ai", "events", "game", "pics", "text"]