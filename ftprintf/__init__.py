"""Printf-style formatting with a character-driven state machine."""

__version__ = "0.1.0"
__all__ = ["flags", "formatter"]