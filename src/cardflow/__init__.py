"""cardflow: task boards with a validated card workflow."""

__version__ = "0.1.0"
