"""recent-work: a folder of symlinks to the files you touched most recently."""

__version__ = "0.1.0"
