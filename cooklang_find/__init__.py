"""Find, search, parse and organise Cooklang recipe files stored on disk."""

__version__ = "0.1.1"