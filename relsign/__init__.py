"""Release signing resolution for Flutter Android builds."""

__version__ = "0.1.0"
