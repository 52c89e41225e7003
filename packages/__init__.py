"""Nanban packages."""
