"""Reading and validating .cub scene files, with string, line-reading and list helpers."""

__version__ = "0.1.0"