"""Exercise API - calculator, user registration and greeting endpoints."""

__version__ = "0.1.0"
