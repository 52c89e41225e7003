"""Applications built on the Nanban packages."""
