"""dustctl - find and remove build artifact directories."""

__version__ = "0.1.0"
