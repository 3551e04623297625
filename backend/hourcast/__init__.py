"""hourcast: upload audio files and assign them to the 24 hours of a day."""

__version__ = "1.0.0"
