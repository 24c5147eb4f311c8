"""TextNote - daily plain-text notes organized into sections."""

__version__ = "0.1.0"
