"""Nanban CLI - Command-line front end for sign language conversation."""

__version__ = "1.0.0"
