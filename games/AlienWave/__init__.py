"""Alien Waves - timed waves of wandering aliens to shoot down."""
