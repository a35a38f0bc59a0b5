"""Game packages."""
