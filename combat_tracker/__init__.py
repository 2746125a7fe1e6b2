"""Keyboard-driven terminal combat tracker for tabletop role-playing games."""

__version__ = "0.1.0"
__all__ = ["creature", "notes", "tracker", "help", "ui"]