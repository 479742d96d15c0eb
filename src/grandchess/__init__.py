"""Rules engine for a 15x20 large-board chess variant."""

__version__ = "0.1.0"
