"""Parser and timing engine for ADOFAI rhythm-game level files."""

__version__ = "0.1.0"