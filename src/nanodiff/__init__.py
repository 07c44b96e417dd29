"""nanodiff — compare actual program output against an expected reference."""

__version__ = "1.0.0"
